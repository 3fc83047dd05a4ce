"""Client for the words API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from opskit.httpclient import Client, RequestsTransport
from opskit.pages import Occurrence, Words, _text, parse_response
from opskit.transport import JWTTransport


@dataclass
class Options:
    """Settings for the API client."""

    password: str = ""
    login_url: str = ""


@dataclass
class Api:
    """Fetches pages from the words API."""

    options: Options
    client: Any

    def do_get_request(self, request_url: str) -> Optional[Union[Words, Occurrence]]:
        """Fetch a URL and decode the page it returns; None for unknown pages."""
        try:
            response = self.client.get(request_url)
        except OSError as exc:
            raise ConnectionError(f"Get error: {exc}") from exc

        if response.status_code != 200:
            raise ValueError(
                f"Invalid output (HTTP Code {response.status_code}): {_text(response.body)}"
            )
        return parse_response(response.body, response.status_code)


def new(options: Options) -> Api:
    """Build an API client that logs in with the configured password when set."""
    transport = JWTTransport(
        RequestsTransport(),
        password=options.password,
        login_url=options.login_url,
        http_client=Client(),
    )
    return Api(options=options, client=Client(transport))