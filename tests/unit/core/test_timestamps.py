"""Unit tests for timestamp formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from core.timestamps import format_timestamp


def test_format_timestamp_converts_offsets_to_utc() -> None:
    """Offsets should be normalized to a Z-suffixed UTC timestamp."""
    moment = datetime(2024, 1, 15, 14, 0, 0, 123456, tzinfo=timezone(timedelta(hours=3, minutes=30)))

    assert format_timestamp(moment) == "2024-01-15T10:30:00.123Z"


def test_format_timestamp_treats_naive_values_as_utc() -> None:
    """Naive datetimes should be rendered without shifting."""
    assert format_timestamp(datetime(2024, 1, 15)) == "2024-01-15T00:00:00.000Z"
