import os
from datetime import date, datetime, time

import pytest

from src.shop_payroll.shop_payroll.common.datetime_utils import (
    anchor_hhmm,
    hours_between,
    parse_datetime,
    parse_hhmm,
    parse_range,
)
from src.shop_payroll.shop_payroll.core.exceptions import ValidationError


def test_date_only_end_is_midnight():
    start, end = parse_range("2024-03-01", "2024-03-04")
    assert start == datetime(2024, 3, 1, 0, 0, 0)
    assert end == datetime(2024, 3, 4, 0, 0, 0)


def test_datetime_end_is_kept_as_given():
    _, end = parse_range("2024-03-01", "2024-03-01T12:30:00")
    assert end == datetime(2024, 3, 1, 12, 30)


def test_single_day_range_is_valid():
    start, end = parse_range("2024-03-05", "2024-03-05")
    assert start == end == datetime(2024, 3, 5)


@pytest.mark.parametrize(
    "start_s, end_s",
    [
        ("", "2024-03-01"),
        ("2024-03-01", None),
        ("not-a-date", "2024-03-01"),
        ("2024-03-10", "2024-03-01"),
    ],
)
def test_bad_ranges_are_rejected(start_s, end_s):
    with pytest.raises(ValidationError):
        parse_range(start_s, end_s)


def test_parse_datetime_accepts_date_and_datetime():
    assert parse_datetime("2024-03-01") == datetime(2024, 3, 1)
    assert parse_datetime("2024-03-01T08:15:00") == datetime(2024, 3, 1, 8, 15)


def test_parse_hhmm():
    assert parse_hhmm("09:05") == time(9, 5)
    assert anchor_hhmm(date(2024, 3, 1), "17:30") == datetime(2024, 3, 1, 17, 30)


@pytest.mark.parametrize("value", ["9am", "25:00", "", None, "12:61"])
def test_parse_hhmm_rejects_malformed(value):
    with pytest.raises(ValidationError):
        parse_hhmm(value)


def test_hours_between_is_never_negative():
    assert hours_between(datetime(2024, 1, 1, 9), datetime(2024, 1, 1, 10, 30)) == 1.5
    assert hours_between(datetime(2024, 1, 1, 10), datetime(2024, 1, 1, 9)) == 0.0
    assert hours_between(None, datetime(2024, 1, 1, 9)) == 0.0


def test_offset_is_dropped_without_converting_to_server_zone(tokyo_tz):
    assert os.environ["TZ"] == "Asia/Tokyo"
    assert parse_datetime("2024-03-04T20:00:00+00:00") == datetime(2024, 3, 4, 20, 0)
    assert parse_datetime("2024-03-04T23:30:00Z") == datetime(2024, 3, 4, 23, 30)
    assert parse_datetime("2024-03-04T01:00:00-05:00").date() == date(2024, 3, 4)


def test_non_string_values_are_rejected_as_invalid():
    with pytest.raises(ValidationError):
        parse_datetime(12.5, "punchInDatetime")
    with pytest.raises(ValidationError):
        parse_hhmm(900)
