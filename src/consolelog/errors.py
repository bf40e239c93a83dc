"""Exceptions raised by consolelog."""


class ConsoleLogError(Exception):
    """Base class for consolelog errors."""


class DecodeError(ConsoleLogError, ValueError):
    """The input is not a single well-formed JSON object."""

    def __init__(self, cause: Exception | str):
        self.cause = cause
        super().__init__(f"cannot decode event: {cause}")
