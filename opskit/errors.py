"""Errors raised by the API client."""

from __future__ import annotations


class RequestError(Exception):
    """A request reached the server but its reply could not be used.

    Carries the HTTP status code and the raw body of the reply.
    """

    def __init__(self, err: str, *, http_code: int = 0, body: str = "") -> None:
        super().__init__(err)
        self.err = err
        self.http_code = http_code
        self.body = body

    def __str__(self) -> str:
        return self.err

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.err!r}, "
            f"http_code={self.http_code!r}, body={self.body!r})"
        )