"""Command that fetches a page from the words API, logging in when asked."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Union
from urllib.parse import SplitResult

from opskit.api import Options, new
from opskit.errors import RequestError
from opskit.httpclient import parse_request_uri


def login_url_for(url: Union[str, SplitResult]) -> str:
    """Return the login endpoint on the same scheme and host as the URL."""
    parsed = parse_request_uri(url) if isinstance(url, str) else url
    host = parsed.netloc.rpartition("@")[2]
    return f"{parsed.scheme}://{host}/login"


def _report_error(exc: Exception) -> None:
    if isinstance(exc, RequestError):
        print(f"Error occurred: {exc} (HTTP Error: {exc.http_code}, Body: {exc.body})")
    else:
        print(f"Error occurred: {exc}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http-login",
        allow_abbrev=False,
        description="Fetch a page from the words API.",
    )
    parser.add_argument("-url", "--url", default="", help="url to access")
    parser.add_argument(
        "-password", "--password", default="", help="use a password to access our api"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the exit status."""
    args = _parser().parse_args(argv)

    try:
        parsed = parse_request_uri(args.url)
    except ValueError:
        print(f"Help: ./http-get -h\nURL is not valid URL: {args.url}")
        return 1

    api = new(Options(password=args.password, login_url=login_url_for(parsed)))

    try:
        response = api.do_get_request(parsed.geturl())
    except (RequestError, ValueError, OSError) as exc:
        _report_error(exc)
        return 1

    if response is None:
        print("No response")
        return 1
    print(f"Response: {response.get_response()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())