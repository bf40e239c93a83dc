"""Sample output: a structlog logger writing JSON records into a ConsoleWriter."""

import logging
from typing import Any

import structlog

from consolelog.event import stringify
from consolelog.timefmt import RFC822
from consolelog.writer import ConsoleWriter

# structlog names levels after the stdlib; the renderer expects zerolog names
_LEVEL_NAMES = {"warning": "warn", "critical": "fatal", "exception": "error"}


def zerolog_level(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    level = event_dict.get("level")
    event_dict["level"] = _LEVEL_NAMES.get(level, level)
    return event_dict


def join_caller(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    pathname = event_dict.pop("pathname", None)
    lineno = event_dict.pop("lineno", None)
    if pathname:
        event_dict["caller"] = f"{pathname}:{lineno}"
    return event_dict


def new_logger(writer: ConsoleWriter, caller: bool = False) -> Any:
    """
    Build a structlog logger that emits one JSON object per record to ``writer``.

    Args:
        writer: Destination for the JSON records
        caller: Add a ``caller`` field with the call site path and line

    Returns:
        A bound structlog logger
    """
    processors: list[Any] = [
        structlog.processors.add_log_level,
        zerolog_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="time"),
    ]
    if caller:
        processors += [
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.PATHNAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            join_caller,
        ]
    processors += [
        structlog.processors.EventRenamer("message"),
        structlog.processors.JSONRenderer(),
    ]

    return structlog.wrap_logger(
        structlog.WriteLogger(file=writer),
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )


def custom_writer(**kwargs: Any) -> ConsoleWriter:
    """A writer with a long time layout, a plain caller and padded level names."""

    def parts(w: ConsoleWriter) -> None:
        names = w.field_names
        w.parts_order = [names.timestamp, names.level, names.caller, names.message]

    def layout(w: ConsoleWriter) -> None:
        w.time_format = RFC822

    def formatters(w: ConsoleWriter) -> None:
        w.set_formatter(w.field_names.caller, stringify)
        w.set_formatter(w.field_names.level, lambda v: f"{stringify(v):<5}".upper())

    return ConsoleWriter(parts, layout, formatters, **kwargs)


def run(**kwargs: Any) -> None:
    """Emit the sample records through a default and a customized writer."""
    log = new_logger(ConsoleWriter(**kwargs)).bind(pid=37556)

    log.info("Starting listener", listen=":8080")
    log.debug("Connecting to DB", database="myapp", host="localhost:4932")
    log.info("Access", method="GET", path="/users", resp_time=23)
    log.info("Access", method="POST", path="/posts", resp_time=532)
    log.warning("Slow request", method="POST", path="/posts", resp_time=532)
    log.info("Access", method="GET", path="/users", resp_time=10)
    log.error(
        "Database connection lost",
        error="connection reset by peer",
        database="myapp",
        host="localhost:4932",
    )

    custom = new_logger(custom_writer(**kwargs), caller=True)
    custom.info("Custom message", foo="bar")
