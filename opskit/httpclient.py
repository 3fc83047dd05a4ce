"""A small HTTP client whose requests pass through a replaceable transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Union
from urllib.parse import SplitResult, urlsplit

import requests


@dataclass
class HttpRequest:
    """An outgoing HTTP request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass
class HttpResponse:
    """A received HTTP response with its whole body."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


class _RoundTripper(Protocol):
    def round_trip(self, request: HttpRequest) -> HttpResponse: ...


class RequestsTransport:
    """Sends requests over the network with a requests session."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> None:
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def round_trip(self, request: HttpRequest) -> HttpResponse:
        try:
            reply = self.session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body or None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ConnectionError(str(exc)) from exc
        return HttpResponse(
            status_code=reply.status_code,
            body=reply.content,
            headers=dict(reply.headers),
        )


class Client:
    """Issues GET and POST requests through a transport."""

    def __init__(self, transport: Optional[_RoundTripper] = None) -> None:
        self.transport = transport if transport is not None else RequestsTransport()

    def get(self, url: str) -> HttpResponse:
        return self.transport.round_trip(HttpRequest("GET", url))

    def post(self, url: str, content_type: str, body: Union[bytes, str]) -> HttpResponse:
        if isinstance(body, str):
            body = body.encode("utf-8")
        request = HttpRequest("POST", url, {"Content-Type": content_type}, bytes(body))
        return self.transport.round_trip(request)


def _split_scheme(raw: str) -> tuple[str, str]:
    for index, char in enumerate(raw):
        if char.isascii() and char.isalpha():
            continue
        if char.isascii() and (char.isdigit() or char in "+-."):
            if index == 0:
                return "", raw
            continue
        if char == ":":
            if index == 0:
                raise ValueError(f'parse "{raw}": missing protocol scheme')
            return raw[:index], raw[index + 1:]
        return "", raw
    return "", raw


def parse_request_uri(raw: str) -> SplitResult:
    """Parse a URL as received in an HTTP request line.

    The URL must be absolute or an absolute path; no fragment is split off.
    Raises ValueError when it is not acceptable.
    """
    if raw == "":
        raise ValueError('parse "": empty url')
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in raw):
        raise ValueError(f'parse "{raw}": net/url: invalid control character in URL')
    if raw == "*":
        return SplitResult("", "", "*", "", "")
    scheme, rest = _split_scheme(raw)
    if not scheme and not rest.startswith("/"):
        raise ValueError(f'parse "{raw}": invalid URI for request')
    result = urlsplit(raw, allow_fragments=False)
    try:
        result.port
    except ValueError as exc:
        raise ValueError(f'parse "{raw}": invalid port') from exc
    return result