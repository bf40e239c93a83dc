import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from consolelog import demo
from consolelog.config import settings
from consolelog.errors import DecodeError
from consolelog.fields import FieldNames
from consolelog.logging import logger
from consolelog.version import get_version_info
from consolelog.writer import ConsoleWriter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="consolelog",
        description="Render newline-delimited JSON log records as colorized lines.",
    )
    parser.add_argument(
        "files", nargs="*", help="NDJSON files to render (default: stdin)"
    )
    parser.add_argument("--demo", action="store_true", help="print sample output")
    parser.add_argument("--time-format", help="strftime layout for timestamps")
    parser.add_argument(
        "--timestamp-field", help="name of the timestamp field (default: time)"
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="FIELD",
        help="never render FIELD as name=value (repeatable)",
    )
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        "--no-color",
        dest="no_color",
        action="store_const",
        const=True,
        default=None,
        help="disable ANSI colors",
    )
    color.add_argument(
        "--color",
        dest="no_color",
        action="store_const",
        const=False,
        help="force ANSI colors even when not writing to a terminal",
    )
    parser.add_argument("--version", action="version", version=get_version_info())
    return parser


def render_lines(lines: Iterable[str], writer: ConsoleWriter, passthrough: TextIO) -> int:
    """
    Render each JSON line through ``writer``.

    Blank lines are skipped. Lines that are not JSON objects are copied to
    ``passthrough`` unchanged.

    Returns:
        Number of lines that could not be decoded
    """
    failed = 0
    for line in lines:
        if not line.strip():
            continue
        try:
            writer.write(line)
        except DecodeError as e:
            failed += 1
            logger.debug("Passing through undecodable line: {error}", error=e)
            passthrough.write(line if line.endswith("\n") else line + "\n")
    return failed


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    kwargs = settings.writer_kwargs()
    if args.time_format:
        kwargs["time_format"] = args.time_format
    if args.timestamp_field:
        kwargs["field_names"] = FieldNames(timestamp=args.timestamp_field)
    if args.exclude:
        kwargs["exclude_fields"] = [*kwargs["exclude_fields"], *args.exclude]
    if args.no_color is not None:
        kwargs["no_color"] = args.no_color

    if args.demo:
        demo.run(**kwargs)
        return 0

    writer = ConsoleWriter(out=sys.stdout, **kwargs)
    failed = 0
    try:
        if not args.files:
            # Same decoding as files: strict UTF-8
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(encoding="utf-8", errors="strict")
            try:
                failed = render_lines(sys.stdin, writer, sys.stdout)
            except UnicodeDecodeError as e:
                logger.error("Cannot read stdin: {error}", error=e)
                return 1
        for path in args.files:
            try:
                with open(path, encoding="utf-8") as f:
                    failed += render_lines(f, writer, sys.stdout)
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Cannot read {path}: {error}", path=path, error=e)
                return 1
    except KeyboardInterrupt:  # pragma: no cover
        return 130

    if failed:
        logger.warning("{count} line(s) were not JSON objects", count=failed)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
