from datetime import datetime, time, timedelta, timezone

import pytest

from src.pointage_system.pointage_system.common.datetime_utils import (
    format_overtime,
    parse_hhmm,
    parse_iso_timestamp,
    to_iso_timestamp,
)
from src.pointage_system.pointage_system.common.validators import parse_leading_int


def test_to_iso_timestamp_is_utc_with_millis():
    paris = timezone(timedelta(hours=1))
    value = datetime(2024, 1, 10, 9, 20, 0, 123456, tzinfo=paris)

    assert to_iso_timestamp(value) == "2024-01-10T08:20:00.123Z"


def test_parse_iso_timestamp_accepts_z_and_naive():
    assert parse_iso_timestamp("2024-01-10T08:20:00.000Z") == datetime(2024, 1, 10, 8, 20, tzinfo=timezone.utc)
    assert parse_iso_timestamp("2024-01-10T08:20:00") == datetime(2024, 1, 10, 8, 20, tzinfo=timezone.utc)


def test_parse_hhmm():
    assert parse_hhmm("08:15") == time(8, 15)


@pytest.mark.parametrize(
    "minutes,expected",
    [(0, "0h00"), (5, "0h05"), (45, "0h45"), (60, "1h00"), (135, "2h15")],
)
def test_format_overtime(minutes, expected):
    assert format_overtime(minutes) == expected


@pytest.mark.parametrize(
    "value,expected",
    [("12", 12), (" 7", 7), ("12AB", 12), ("AB12", None), ("", None), ("-3", -3)],
)
def test_parse_leading_int(value, expected):
    assert parse_leading_int(value) == expected
