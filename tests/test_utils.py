"""Tests for date helpers."""

from datetime import date, datetime, timezone

import pytest

from uber_earnings.utils import format_iso_date, from_epoch_seconds, parse_date


def test_parse_date() -> None:
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    with pytest.raises(ValueError):
        parse_date("15/01/2024")


def test_format_iso_date_pads() -> None:
    assert format_iso_date(date(2024, 2, 3)) == "2024-02-03"


def test_from_epoch_seconds() -> None:
    assert from_epoch_seconds(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    with pytest.raises(ValueError, match="out-of-range"):
        from_epoch_seconds(2**62)
