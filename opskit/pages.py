"""Pages returned by the words API and their decoding."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from opskit.errors import RequestError

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


@dataclass
class Page:
    """The page marker that tells which kind of reply a body holds."""

    name: str = ""


@dataclass
class Words:
    """A list of words derived from an input."""

    input: str = ""
    words: list[str] = field(default_factory=list)

    def get_response(self) -> str:
        return "Words: " + ", ".join(self.words)


@dataclass
class Occurrence:
    """How often each word occurs."""

    words: dict[str, int] = field(default_factory=dict)

    def get_response(self) -> str:
        return "Words: " + ", ".join(f"{word} ({count})" for word, count in self.words.items())


def _text(body: Union[bytes, bytearray, str]) -> str:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", "replace")
    return str(body)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def _load_json(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _json_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "number"


def _object_fields(document: Any, type_name: str) -> dict[str, Any]:
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"cannot unmarshal {_json_kind(document)} into value of type {type_name}")
    return document


def _field(fields: dict[str, Any], key: str) -> Any:
    if key in fields:
        return fields[key]
    wanted = key.casefold()
    return next((value for name, value in fields.items() if name.casefold() == wanted), None)


def _as_str(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"cannot unmarshal {_json_kind(value)} into field {where} of type string")
    return value


def _as_str_list(value: Any, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"cannot unmarshal {_json_kind(value)} into field {where} of type []string")
    return [_as_str(item, where) for item in value]


def _as_int_map(value: Any, where: str) -> dict[str, int]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"cannot unmarshal {_json_kind(value)} into field {where} of type map[string]int")
    result: dict[str, int] = {}
    for key, item in value.items():
        if item is None:
            result[key] = 0
            continue
        if isinstance(item, bool) or not isinstance(item, int) or not _INT_MIN <= item <= _INT_MAX:
            raise ValueError(f"cannot unmarshal {_json_kind(item)} {item!r} into field {where} of type int")
        result[key] = item
    return result


def parse_response(body: Union[bytes, str], status_code: int) -> Optional[Union[Words, Occurrence]]:
    """Decode a reply body into the page it announces.

    Returns None for an unknown or missing page. Raises RequestError when the
    body is not JSON or has no usable page marker, and ValueError when the
    announced page cannot be decoded.
    """
    text = _text(body)
    try:
        document = _load_json(text)
    except ValueError:
        raise RequestError("Response is not a json", http_code=status_code, body=text) from None

    try:
        fields = _object_fields(document, "Page")
        page = Page(_as_str(_field(fields, "page"), "Page.page"))
    except ValueError as exc:
        raise RequestError(f"Page unmarshal error: {exc}", http_code=status_code, body=text) from exc

    if page.name == "words":
        try:
            return Words(
                input=_as_str(_field(fields, "input"), "Words.input"),
                words=_as_str_list(_field(fields, "words"), "Words.words"),
            )
        except ValueError as exc:
            raise ValueError(f"Words unmarshal error: {exc}") from exc
    if page.name == "occurrence":
        try:
            return Occurrence(words=_as_int_map(_field(fields, "words"), "Occurrence.words"))
        except ValueError as exc:
            raise ValueError(f"Occurrence unmarshal error: {exc}") from exc
    return None