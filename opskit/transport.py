"""A transport that logs in once and adds a bearer token to every request."""

from __future__ import annotations

from typing import Any, Optional

from opskit.httpclient import Client, HttpRequest, HttpResponse, RequestsTransport
from opskit.login import do_login_request


class JWTTransport:
    """Adds an Authorization header, fetching the token by password on first use."""

    def __init__(
        self,
        transport: Optional[Any] = None,
        *,
        password: str = "",
        login_url: str = "",
        http_client: Optional[Any] = None,
        token: str = "",
    ) -> None:
        self.transport = transport if transport is not None else RequestsTransport()
        self.password = password
        self.login_url = login_url
        self.http_client = http_client if http_client is not None else Client()
        self.token = token

    def round_trip(self, request: HttpRequest) -> HttpResponse:
        if not self.token and self.password:
            self.token = do_login_request(self.http_client, self.login_url, self.password)
        if self.token:
            request.headers["Authorization"] = "Bearer " + self.token
        return self.transport.round_trip(request)