"""Decoding of JSON log records."""

import json
from typing import Any

from consolelog.errors import DecodeError


class Number:
    """A JSON number kept in its exact source text.

    Large integer identifiers and precise durations survive unchanged, no
    float conversion happens on the way to the terminal. Not a ``str``, so
    renderers that only accept text ignore numbers.
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Number({self.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)


def decode_event(data: bytes | str) -> dict[str, Any]:
    """
    Decode one JSON object into a log record.

    Args:
        data: A single JSON object, as bytes (UTF-8) or text

    Returns:
        Mapping of field name to value. Values are ``str``, ``Number``,
        ``bool``, ``None``, ``dict`` or ``list``.

    Raises:
        DecodeError: If the input is not valid UTF-8, not valid JSON, or
            not a JSON object.
    """
    try:
        if isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data).decode("utf-8")
        evt = json.loads(
            data, parse_int=Number, parse_float=Number, parse_constant=_reject
        )
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(e) from e

    if not isinstance(evt, dict):
        raise DecodeError(f"expected a JSON object, got {type(evt).__name__}")
    return evt


def stringify(value: Any) -> str:
    """Render a raw field value as plain text; absent values render empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return _compact(value)
    return str(value)


def _compact(value: Any) -> str:
    # Nested values are re-encoded as compact JSON with numbers left verbatim
    if isinstance(value, Number):
        return value.text
    if isinstance(value, dict):
        items = (f"{_compact(str(k))}:{_compact(v)}" for k, v in value.items())
        return "{" + ",".join(items) + "}"
    if isinstance(value, list):
        return "[" + ",".join(_compact(v) for v in value) + "]"
    return json.dumps(value, ensure_ascii=False)


def _reject(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise json.JSONDecodeError(f"invalid constant {name}", name, 0)
