"""Command that fetches a URL and shows the status, body or decoded page."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, Union

from opskit.api import Api, Options
from opskit.cli_login import _report_error
from opskit.errors import RequestError
from opskit.httpclient import Client, HttpResponse, parse_request_uri
from opskit.pages import (
    _as_int_map,
    _as_str,
    _as_str_list,
    _field,
    _load_json,
    _object_fields,
    _text,
)

USAGE = "Usage: ./http-get <url>"


def fetch(url: str) -> HttpResponse:
    """GET a URL after checking that it is a valid request URI."""
    parse_request_uri(url)
    return Client().get(url)


def describe_words(body: Union[bytes, str]) -> str:
    """Describe a words page body; raises ValueError if it cannot be decoded."""
    fields = _object_fields(_load_json(_text(body)), "Words")
    page = _as_str(_field(fields, "page"), "Words.page")
    _as_str(_field(fields, "input"), "Words.input")
    words = _as_str_list(_field(fields, "words"), "Words.words")
    return f"JSON: Parsed:\nPage: {page}\nWords: {', '.join(words)}"


def describe_occurrence(body: Union[bytes, str]) -> str:
    """List each word with its count; raises ValueError if it cannot be decoded."""
    fields = _object_fields(_load_json(_text(body)), "Occurrence")
    occurrence = _as_int_map(_field(fields, "words"), "Occurrence.words")
    lines = []
    if "word5" in occurrence:
        lines.append(f"Found word1: {occurrence['word5']}")
    lines.extend(f"{word}: {count}" for word, count in occurrence.items())
    return "\n".join(lines)


def _page_name(body: bytes) -> str:
    fields = _object_fields(_load_json(_text(body)), "Page")
    return _as_str(_field(fields, "page"), "Page.page")


def _show_raw(url: str) -> int:
    try:
        response = Client().get(url)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"HTTP Status Code: {response.status_code}\nBody: {_text(response.body)}")
    return 0


def _describe(url: str) -> int:
    try:
        response = Client().get(url)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    if response.status_code != 200:
        print(f"Invalid output (HTTP Code {response.status_code}): {_text(response.body)}")
        return 1
    try:
        name = _page_name(response.body)
        if name == "words":
            print(describe_words(response.body))
        elif name == "occurrence":
            text = describe_occurrence(response.body)
            if text:
                print(text)
        else:
            print("Page not found")
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def _show_response(url: str) -> int:
    api = Api(Options(), Client())
    try:
        response = api.do_get_request(url)
    except (RequestError, ValueError, OSError) as exc:
        _report_error(exc)
        return 1
    if response is None:
        print("No response")
        return 1
    print(f"Response: {response.get_response()}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="http-get", allow_abbrev=False, description="Fetch a URL."
    )
    parser.add_argument("target", nargs="?", help="url to access")
    parser.add_argument("-url", "--url", default=None, help="url to access")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--raw", action="store_true", help="print status code and body")
    mode.add_argument("--describe", action="store_true", help="print the parsed page")
    args = parser.parse_args(argv)

    url = args.url if args.url is not None else args.target
    if url is None:
        print(USAGE)
        return 1
    try:
        parse_request_uri(url)
    except ValueError:
        print(f"{USAGE}\n\nURL is not valid URL: {url}")
        return 1

    if args.raw:
        return _show_raw(url)
    if args.describe:
        return _describe(url)
    return _show_response(url)


if __name__ == "__main__":
    raise SystemExit(main())