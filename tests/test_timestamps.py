"""Tests for ISO-8601 timestamp parsing and its fallback."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from onlycare.normalization.timestamps import (
    fallback_count,
    now_ms,
    parse_iso8601,
    parse_timestamp,
    reset_fallback_count,
    to_epoch_ms,
)

NOV_17_1349_UTC_MS = 1_731_851_340_000


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_zulu_with_microseconds(self) -> None:
        """The backend's usual format parses to the exact instant."""
        assert parse_timestamp("2024-11-17T13:49:00.000000Z") == NOV_17_1349_UTC_MS

    def test_explicit_utc_offset(self) -> None:
        """+00:00 is equivalent to Z."""
        assert parse_timestamp("2024-11-17T13:49:00+00:00") == NOV_17_1349_UTC_MS

    def test_non_utc_offset(self) -> None:
        """Offsets are applied when converting to epoch time."""
        assert parse_timestamp("2024-11-17T13:49:00+05:30") == 1_731_831_540_000

    def test_milliseconds_kept(self) -> None:
        """Fractional seconds contribute whole milliseconds."""
        assert parse_timestamp("2024-11-17T13:49:00.250Z") == NOV_17_1349_UTC_MS + 250

    def test_sub_millisecond_floored(self) -> None:
        """Microseconds below one millisecond are dropped."""
        assert parse_timestamp("2024-11-17T13:49:00.000999Z") == NOV_17_1349_UTC_MS

    def test_epoch_start(self) -> None:
        """The epoch itself maps to zero."""
        assert parse_timestamp("1970-01-01T00:00:00Z") == 0

    def test_malformed_falls_back_to_now(self) -> None:
        """Unparseable input yields the current time."""
        before = now_ms()
        result = parse_timestamp("not-a-date")
        after = now_ms()
        assert before <= result <= after + 1000

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-date",
            "",
            "2024-11-17",  # no time component
            "2024-11-17T13:49:00",  # no offset
            "2024-13-45T99:99:99Z",
            "17/11/2024 13:49",
            None,
            1731851340000,
        ],
    )
    def test_fallback_uses_clock(self, value: object) -> None:
        """Every unusable input is replaced by the clock value."""
        assert parse_timestamp(value, clock=lambda: 42) == 42  # type: ignore[arg-type]

    def test_fallback_is_counted(self) -> None:
        """Each fallback increments the diagnostic counter."""
        reset_fallback_count()
        parse_timestamp("garbage", clock=lambda: 1)
        parse_timestamp(None, clock=lambda: 1)
        parse_timestamp("2024-11-17T13:49:00Z")
        assert fallback_count() == 2

    def test_reset_fallback_count(self) -> None:
        """The counter can be reset."""
        parse_timestamp("garbage", clock=lambda: 1)
        reset_fallback_count()
        assert fallback_count() == 0


class TestHelpers:
    """Tests for the lower-level helpers."""

    def test_parse_iso8601_returns_aware_datetime(self) -> None:
        """Parsed values carry their offset."""
        moment = parse_iso8601("2024-11-17T13:49:00+05:30")
        assert moment.utcoffset() == timedelta(hours=5, minutes=30)

    def test_parse_iso8601_rejects_naive(self) -> None:
        """Offset-less values are rejected."""
        with pytest.raises(ValueError, match="Missing UTC offset"):
            parse_iso8601("2024-11-17T13:49:00")

    def test_to_epoch_ms(self) -> None:
        """Conversion is offset aware."""
        moment = datetime(2024, 11, 17, 19, 19, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert to_epoch_ms(moment) == NOV_17_1349_UTC_MS

    def test_now_ms_tracks_wall_clock(self) -> None:
        """now_ms is close to datetime.now()."""
        expected = to_epoch_ms(datetime.now(UTC))
        assert abs(now_ms() - expected) < 5000
