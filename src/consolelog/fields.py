"""Canonical field names and formatter registry identifiers."""

from dataclasses import dataclass

FIELD_NAME = "field_name"
FIELD_VALUE = "field_value"


@dataclass(frozen=True)
class FieldNames:
    """
    Names of the well-known fields in a log record.

    The defaults match the keys emitted by zerolog-style JSON loggers. Pass
    ``FieldNames(timestamp="timestamp")`` for producers using the longer key.
    """

    timestamp: str = "time"
    level: str = "level"
    caller: str = "caller"
    component: str = "component"
    message: str = "message"
    error: str = "error"

    def parts_order(self) -> list[str]:
        """Default order of the known fields on an output line."""
        return [self.timestamp, self.level, self.component, self.caller, self.message]

    def known(self) -> set[str]:
        """Names never rendered as arbitrary fields, whatever the parts order."""
        return {self.timestamp, self.level, self.caller, self.component, self.message}


def field_name_id(field: str) -> str:
    """Registry id of the name renderer for one arbitrary field."""
    return f"{field}_{FIELD_NAME}"


def field_value_id(field: str) -> str:
    """Registry id of the value renderer for one arbitrary field."""
    return f"{field}_{FIELD_VALUE}"


DEFAULT_FIELD_NAMES = FieldNames()
