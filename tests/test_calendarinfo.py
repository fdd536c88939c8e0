import calendar
import datetime

import pytest

from vetero.calendarinfo import (
    day_abbreviation,
    days_in_month_of,
    days_per_month,
    is_leap_year,
    month_name,
)


@pytest.mark.parametrize("year", [1900, 1999, 2000, 2010, 2023, 2024, 2100])
def test_days_per_month_matches_stdlib(year):
    for month in range(1, 13):
        assert days_per_month(year, month) == calendar.monthrange(year, month)[1]


@pytest.mark.parametrize("year", [1600, 1900, 2000, 2001, 2004, 2100, 2400])
def test_leap_year_matches_stdlib(year):
    assert is_leap_year(year) == calendar.isleap(year)


def test_february_depends_on_leap_year():
    assert days_per_month(2024, 2) == 29
    assert days_per_month(2023, 2) == 28


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month(month):
    with pytest.raises(ValueError):
        days_per_month(2010, month)


def test_days_in_month_of_date():
    assert days_in_month_of(datetime.date(2024, 2, 10)) == days_per_month(2024, 2)
    assert days_in_month_of(datetime.datetime(2010, 4, 30, 12, 0)) == 30


def test_day_abbreviations_are_distinct():
    names = [day_abbreviation(day) for day in range(1, 8)]
    assert len(set(names)) == 7
    assert day_abbreviation(1) == "Mon"


def test_month_names_are_distinct():
    names = [month_name(month) for month in range(1, 13)]
    assert len(set(names)) == 12
    assert month_name(1) == "January"


def test_invalid_weekday():
    with pytest.raises(ValueError):
        day_abbreviation(0)


def test_invalid_month_name():
    with pytest.raises(ValueError):
        month_name(13)