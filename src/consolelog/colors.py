"""ANSI SGR styling for terminal output."""

import os
from collections.abc import Callable
from typing import TextIO

RESET = "\033[0m"
BOLD = "\033[1m"
FAINT = "\033[2m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"

Style = Callable[[str], str]


def _sgr(code: str) -> Style:
    def style(text: str) -> str:
        if not text:
            return text
        return f"{code}{text}{RESET}"

    return style


def _plain(text: str) -> str:
    return text


def color_enabled(stream: TextIO | None, no_color: bool | None = None) -> bool:
    """
    Decide whether output to ``stream`` should carry ANSI escapes.

    An explicit ``no_color`` wins. Otherwise color is off when ``NO_COLOR``
    is set, when ``TERM`` is ``dumb``, or when the stream is not a terminal.
    """
    if no_color is not None:
        return not no_color
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


class Palette:
    """The styles used by the default renderers.

    With ``enabled=False`` every style is the identity, so renderers can
    apply styles unconditionally.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        style = _sgr if enabled else (lambda code: _plain)
        self.bold = style(BOLD)
        self.faint = style(FAINT)
        self.red = style(RED)
        self.green = style(GREEN)
        self.yellow = style(YELLOW)
