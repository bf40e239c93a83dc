"""
ConsoleWriter: renders JSON log records as colorized console lines.

Each call to :meth:`ConsoleWriter.write` takes one JSON object, as emitted
by a structured logger, and writes one human-readable line to ``out``:

    12:00AM INF api > Starting listener listen=:8080 pid=37556

Known fields (time, level, component, caller, message) come first in
``parts_order``. The remaining fields follow sorted by name, with ``error``
moved to the front. Every piece of text is produced by a formatter looked
up by id, so any of them can be replaced with :meth:`set_formatter`.

The formatter registry is not locked. Register custom formatters before
the writer is shared between threads.
"""

import os
import sys
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TextIO

from consolelog.colors import Palette, color_enabled
from consolelog.event import decode_event, stringify
from consolelog.fields import (
    DEFAULT_FIELD_NAMES,
    FIELD_NAME,
    FIELD_VALUE,
    FieldNames,
    field_name_id,
    field_value_id,
)
from consolelog.timefmt import KITCHEN, format_time

Formatter = Callable[[Any], str]
Option = Callable[["ConsoleWriter"], None]

LEVELS = {
    "debug": ("DBG", ("yellow",)),
    "info": ("INF", ("green",)),
    "warn": ("WRN", ("red",)),
    "error": ("ERR", ("red", "bold")),
    "fatal": ("FTL", ("red", "bold")),
    "panic": ("PNC", ("red", "bold")),
}


def default_formatter(value: Any) -> str:
    """Pass-through formatter returned for unregistered ids."""
    return stringify(value)


class ConsoleWriter:
    """
    Parses JSON log records and writes ANSI-colorized lines to ``out``.

    Attributes:
        out: Destination text stream (default: ``sys.stderr``)
        time_format: ``strftime`` layout for the timestamp (default: KITCHEN)
        parts_order: Field names rendered first, in this order
        field_names: Canonical names of the known fields
        exclude_fields: Field names never rendered as arbitrary fields
        no_color: Force color off (True) or on (False); None auto-detects
    """

    def __init__(
        self,
        *options: Option,
        out: TextIO | None = None,
        time_format: str | None = None,
        parts_order: Iterable[str] | None = None,
        field_names: FieldNames | None = None,
        exclude_fields: Iterable[str] | None = None,
        no_color: bool | None = None,
        formatters: Mapping[str, Formatter] | None = None,
    ):
        self.out = out
        self.time_format = time_format or KITCHEN
        self.field_names = field_names or DEFAULT_FIELD_NAMES
        if parts_order is None:
            self.parts_order = self.field_names.parts_order()
        else:
            self.parts_order = list(parts_order)
        self.exclude_fields = set(exclude_fields or ())
        self.no_color = no_color
        self._formatters: dict[str, Formatter] = {}
        self._palette: Palette | None = None

        self._set_default_formatters()

        for fid, fn in (formatters or {}).items():
            self.set_formatter(fid, fn)
        for opt in options:
            opt(self)

    @property
    def palette(self) -> Palette:
        """Styles for the current destination and color setting.

        Resolved once per write; outside a write it is resolved on each access.
        """
        if self._palette is not None:
            return self._palette
        return Palette(color_enabled(self._out(), self.no_color))

    def formatter(self, fid: str) -> Formatter:
        """Return the formatter registered as ``fid``, or the pass-through default."""
        return self._formatters.get(fid, default_formatter)

    def set_formatter(self, fid: str, fn: Formatter) -> None:
        """Register ``fn`` as the formatter for ``fid``, replacing any previous one."""
        self._formatters[fid] = fn

    def write(self, data: bytes | str) -> int:
        """
        Render one JSON record and write it to ``out`` as a single line.

        Args:
            data: One JSON object

        Returns:
            Number of input bytes (or characters, for text) consumed

        Raises:
            DecodeError: If ``data`` is not a JSON object. Nothing is written.
        """
        evt = decode_event(data)

        self._palette = Palette(color_enabled(self._out(), self.no_color))
        try:
            parts = [self._render_part(evt, p) for p in self.parts_order]
            segments = [s for s in parts if s]
            fields = self._render_fields(evt)
            if fields:
                segments.append(fields)
        finally:
            self._palette = None

        self._out().write(" ".join(segments) + "\n")
        return len(data)

    def flush(self) -> None:
        out = self._out()
        if hasattr(out, "flush"):
            out.flush()

    def _out(self) -> TextIO:
        return self.out if self.out is not None else sys.stderr

    def _render_part(self, evt: dict[str, Any], part: str) -> str:
        return self.formatter(part)(evt.get(part))

    def _field_order(self, evt: dict[str, Any]) -> list[str]:
        known = self.field_names.known() | self.exclude_fields
        known.update(self.parts_order)
        fields = sorted(k for k in evt if k not in known)

        error = self.field_names.error
        if error in fields:
            fields.remove(error)
            fields.insert(0, error)
        return fields

    def _render_fields(self, evt: dict[str, Any]) -> str:
        name_fmt = self.formatter(FIELD_NAME)
        value_fmt = self.formatter(FIELD_VALUE)

        rendered = []
        for field in self._field_order(evt):
            fn = self._formatters.get(field_name_id(field), name_fmt)
            fv = self._formatters.get(field_value_id(field), value_fmt)
            rendered.append(fn(field) + fv(evt[field]))
        return " ".join(rendered)

    def _set_default_formatters(self) -> None:
        names = self.field_names

        self.set_formatter(names.timestamp, self._format_timestamp)
        self.set_formatter(names.level, self._format_level)
        self.set_formatter(names.caller, self._format_caller)
        self.set_formatter(names.component, self._format_component)
        self.set_formatter(names.message, stringify)

        self.set_formatter(FIELD_NAME, lambda name: self.palette.faint(f"{name}="))
        self.set_formatter(FIELD_VALUE, _format_field_value)

        self.set_formatter(field_name_id(names.error), self._format_error_name)
        self.set_formatter(field_value_id(names.error), self._format_error_value)

    def _format_timestamp(self, value: Any) -> str:
        if not isinstance(value, str):
            return ""
        return self.palette.faint(format_time(value, self.time_format))

    def _format_level(self, value: Any) -> str:
        p = self.palette
        if value is None or value == "":
            return p.bold("N/A")
        if not isinstance(value, str):
            return p.bold(stringify(value).upper())

        if value not in LEVELS:
            return p.bold(value.upper())
        text, styles = LEVELS[value]
        for style in styles:
            text = getattr(p, style)(text)
        return text

    def _format_caller(self, value: Any) -> str:
        if not isinstance(value, str) or not value:
            return ""
        try:
            cwd = os.getcwd()
        except OSError:
            cwd = None
        caller = value
        if cwd and caller.startswith(cwd):
            caller = caller[len(cwd) :]
        caller = caller.removeprefix(os.sep)
        p = self.palette
        return p.bold(caller) + p.faint(" >")

    def _format_component(self, value: Any) -> str:
        if not isinstance(value, str) or not value:
            return ""
        return self.palette.bold(f"[{value}]")

    def _format_error_name(self, name: Any) -> str:
        p = self.palette
        return p.faint(p.red(f"{name}="))

    def _format_error_value(self, value: Any) -> str:
        p = self.palette
        return p.bold(p.red(_format_field_value(value)))


def _format_field_value(value: Any) -> str:
    if value is None:
        return "null"
    return stringify(value)
