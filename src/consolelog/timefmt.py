"""Timestamp parsing and display layouts.

Layouts are ``strftime`` strings. ``KITCHEN`` renders the compact 12-hour
clock used by default, e.g. ``3:04PM``.
"""

import re
from datetime import datetime

KITCHEN = "%I:%M%p"
RFC822 = "%d %b %y %H:%M %Z"
RFC3339 = "%Y-%m-%dT%H:%M:%S%z"
STAMP = "%b %d %H:%M:%S"

_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339(value: str) -> datetime | None:
    """Parse an RFC 3339 timestamp; returns None when ``value`` is not one."""
    if not _RFC3339_RE.match(value):
        return None
    text = value.upper()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    date_part, _, rest = text.partition("T")
    clock, sign, offset = re.split(r"([+-])", rest, maxsplit=1)
    if "." in clock:
        # fromisoformat accepts at most microseconds
        seconds, fraction = clock.split(".")
        clock = f"{seconds}.{fraction[:6].ljust(6, '0')}"
    try:
        return datetime.fromisoformat(f"{date_part}T{clock}{sign}{offset}")
    except ValueError:
        return None


def format_time(value: str, layout: str) -> str:
    """Reformat an RFC 3339 timestamp; anything else passes through unchanged."""
    ts = parse_rfc3339(value)
    if ts is None:
        return value
    if layout == KITCHEN:
        # strftime has no portable unpadded hour
        return ts.strftime(layout).lstrip("0")
    return ts.strftime(layout)
