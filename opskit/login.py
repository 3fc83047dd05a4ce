"""Exchanging a password for a bearer token."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol, Union

from opskit.errors import RequestError
from opskit.httpclient import HttpResponse
from opskit.pages import _as_str, _field, _load_json, _object_fields, _text


class _Poster(Protocol):
    def post(self, url: str, content_type: str, body: Union[bytes, str]) -> HttpResponse: ...


@dataclass
class LoginRequest:
    """The body sent to the login endpoint."""

    password: str

    def to_json(self) -> bytes:
        return json.dumps({"password": self.password}, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


@dataclass
class LoginResponse:
    """The body returned by the login endpoint."""

    token: str = ""

    @classmethod
    def from_json(cls, document: Any) -> "LoginResponse":
        fields = _object_fields(document, "LoginResponse")
        return cls(token=_as_str(_field(fields, "token"), "LoginResponse.token"))


def do_login_request(client: _Poster, request_url: str, password: str) -> str:
    """Post the password to the login URL and return the token it replies with."""
    payload = LoginRequest(password).to_json()
    try:
        response = client.post(request_url, "application/json", payload)
    except OSError as exc:
        raise ConnectionError(f"http Post error: {exc}") from exc

    text = _text(response.body)
    if response.status_code != 200:
        raise ValueError(f"Invalid output (HTTP Code {response.status_code}): {text}")

    try:
        document = _load_json(text)
    except ValueError:
        raise RequestError("No valid JSON returned", http_code=response.status_code, body=text) from None

    try:
        login_response = LoginResponse.from_json(document)
    except ValueError as exc:
        raise RequestError(
            f"Page unmarshal error: {exc}", http_code=response.status_code, body=text
        ) from exc

    if not login_response.token:
        raise RequestError("Empty token replied", http_code=response.status_code, body=text)
    return login_response.token