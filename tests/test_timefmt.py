"""Tests for timestamp parsing and layouts."""

from datetime import datetime, timedelta, timezone

import pytest

from consolelog.timefmt import KITCHEN, RFC822, STAMP, format_time, parse_rfc3339


class TestParseRfc3339:
    """Test parse_rfc3339."""

    def test_utc(self):
        """✅ Test a Z suffix parses as UTC."""
        assert parse_rfc3339("1970-01-01T00:00:00Z") == datetime(
            1970, 1, 1, tzinfo=timezone.utc
        )

    def test_offset(self):
        """✅ Test a numeric offset is kept."""
        ts = parse_rfc3339("2024-03-05T15:04:05+02:00")

        assert ts.utcoffset() == timedelta(hours=2)
        assert ts.hour == 15

    def test_fraction(self):
        """✅ Test fractional seconds, including nanoseconds."""
        ts = parse_rfc3339("2024-03-05T15:04:05.123456789Z")

        assert ts.microsecond == 123456

    def test_short_fraction(self):
        """✅ Test a short fraction is scaled to microseconds."""
        assert parse_rfc3339("2024-03-05T15:04:05.5Z").microsecond == 500000

    def test_lowercase_separators(self):
        """✅ Test lowercase t and z are accepted."""
        assert parse_rfc3339("2024-03-05t15:04:05z") is not None

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "yesterday",
            "2024-03-05",
            "2024-03-05T15:04:05",
            "2024-03-05 15:04:05Z",
            "2024-13-05T15:04:05Z",
            "2024-03-05T25:04:05Z",
            "1700000000",
        ],
    )
    def test_invalid(self, value):
        """✅ Test values that are not RFC 3339 timestamps."""
        assert parse_rfc3339(value) is None


class TestFormatTime:
    """Test format_time."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1970-01-01T00:00:00Z", "12:00AM"),
            ("2024-03-05T15:04:05Z", "3:04PM"),
            ("2024-03-05T15:04:05+02:00", "3:04PM"),
            ("2024-03-05T10:30:00Z", "10:30AM"),
            ("2024-03-05T12:01:00Z", "12:01PM"),
        ],
    )
    def test_kitchen(self, value, expected):
        """✅ Test the kitchen layout drops the leading zero of the hour."""
        assert format_time(value, KITCHEN) == expected

    def test_rfc822(self):
        """✅ Test the RFC 822 layout."""
        assert format_time("2024-03-05T15:04:05Z", RFC822) == "05 Mar 24 15:04 UTC"

    def test_stamp(self):
        """✅ Test the stamp layout."""
        assert format_time("2024-03-05T15:04:05Z", STAMP) == "Mar 05 15:04:05"

    def test_passthrough(self):
        """✅ Test unparseable values are returned unchanged."""
        assert format_time("not a time", KITCHEN) == "not a time"

    def test_round_trip_now(self):
        """✅ Test a freshly formatted timestamp renders in the kitchen layout."""
        now = datetime.now(timezone.utc).replace(microsecond=0)
        value = now.isoformat().replace("+00:00", "Z")

        rendered = format_time(value, KITCHEN)

        assert rendered == now.strftime("%I:%M%p").lstrip("0")
        assert datetime.strptime(rendered, "%I:%M%p").minute == now.minute
