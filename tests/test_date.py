# tests/test_date.py

from datetime import date
from unittest.mock import patch

import pytest

import sakacal
from sakacal import FixedClock, InvalidCount, InvalidDay, InvalidMonth, InvalidYear, SakaDate


# --- Construction ---

def test_construct_and_fields():
    d = SakaDate(1932, 12, 26)
    assert (d.year, d.month, d.day) == (1932, 12, 26)
    assert d == (1932, 12, 26)
    assert d == SakaDate(1932, 12, 26)
    assert d != SakaDate(1932, 12, 25)
    assert repr(d) == "SakaDate(1932, 12, 26)"


@pytest.mark.parametrize("ymd, exc", [
    ((-2011, 1, 1), InvalidYear),
    ((1932, 13, 1), InvalidMonth),
    ((1932, 1, 32), InvalidDay),
])
def test_construct_invalid(ymd, exc):
    with pytest.raises(exc):
        SakaDate(*ymd)


def test_today_from_injected_clock():
    clock = FixedClock(date(2011, 3, 17))
    assert SakaDate(clock=clock) == (1932, 12, 26)
    assert SakaDate.today(clock) == (1932, 12, 26)
    assert sakacal.today(clock) == (1932, 12, 26)


def test_today_uses_default_clock():
    with patch("sakacal.core.clock.DEFAULT_CLOCK", FixedClock(date(2024, 3, 21))):
        assert SakaDate() == (1946, 1, 1)


def test_partial_fields_rejected():
    with pytest.raises(TypeError):
        SakaDate(1932, 12)


def test_unknown_day_policy():
    with pytest.raises(ValueError):
        SakaDate(1932, 1, 1, day_policy="round")


def test_alternate_constructors():
    assert SakaDate.from_gregorian(2011, 3, 17) == (1932, 12, 26)
    assert SakaDate.from_date(date(1947, 8, 15)) == (1869, 5, 24)
    d = SakaDate(1932, 12, 26)
    assert SakaDate.from_julian(d.to_julian()) == d


def test_from_gregorian_before_saka_era():
    with pytest.raises(InvalidYear):
        SakaDate.from_gregorian(78, 6, 1)


def test_copy_is_independent():
    d = SakaDate(1932, 1, 1)
    c = d.copy()
    c.add_days(1)
    assert d == (1932, 1, 1)
    assert c == (1932, 1, 2)


# --- Queries ---

def test_phalguna_1932_scenario():
    d = SakaDate(1932, 12, 26)
    assert d.day_of_week() == 4
    assert d.weekday_name() == "Brahaspativara"
    assert d.days_in_month() == 30
    assert sakacal.days_in_month(1932, 12) == 30
    assert d.render_text() == "26, Phalguna 1932"
    assert str(d) == "26, Phalguna 1932"
    assert d.month_name() == "Phalguna"


def test_month_name_argument():
    d = SakaDate(1932, 12, 26)
    assert d.month_name(1) == "Chaitra"
    assert d.month_name(9) == "Agrahayana"
    with pytest.raises(InvalidMonth):
        d.month_name(13)


def test_days_in_month_chaitra():
    assert sakacal.days_in_month(1933, 1) == 30
    assert sakacal.days_in_month(1934, 1) == 31
    assert SakaDate(1932, 1, 1).days_in_month(1934, 1) == 31
    assert sakacal.days_in_month(9999, 12) == 30


def test_to_gregorian():
    d = SakaDate(1932, 12, 26)
    assert d.to_gregorian() == (2011, 3, 17)
    assert d.to_date() == date(2011, 3, 17)
    assert sakacal.to_gregorian(1932, 12, 26).isoformat() == "2011-03-17"


def test_cross_calendar_roundtrip():
    for o in range(date(79, 3, 22).toordinal(), date(9999, 12, 31).toordinal(), 997):
        g = date.fromordinal(o)
        s = sakacal.from_gregorian(g.year, g.month, g.day)
        assert s.to_gregorian() == (g.year, g.month, g.day)


# --- Arithmetic ---

def test_add_and_subtract_months():
    d = SakaDate(1932, 1, 1)
    d.add_months(3)
    assert d == (1932, 4, 1)
    assert d.render_text() == "01, Asadha 1932"
    d.subtract_months(1)
    assert d == (1932, 3, 1)
    assert d.render_text() == "01, Jyaistha 1932"


@pytest.mark.parametrize("start, n, expected", [
    ((1932, 12, 1), 1, (1933, 1, 1)),
    ((1932, 1, 1), 12, (1933, 1, 1)),
    ((1932, 1, 1), 25, (1934, 2, 1)),
    ((1932, 5, 9), 0, (1932, 5, 9)),
])
def test_add_months_carry(start, n, expected):
    d = SakaDate(*start)
    d.add_months(n)
    assert d == expected


@pytest.mark.parametrize("start, n, expected", [
    ((1932, 1, 1), 1, (1931, 12, 1)),
    ((1932, 3, 1), 15, (1930, 12, 1)),
    ((1932, 12, 1), 12, (1931, 12, 1)),
])
def test_subtract_months_borrow(start, n, expected):
    d = SakaDate(*start)
    d.subtract_months(n)
    assert d == expected


def test_add_and_subtract_days():
    d = SakaDate(1932, 12, 1)
    d.add_days(10)
    assert d.render_text() == "11, Phalguna 1932"
    d.subtract_days(5)
    assert d.render_text() == "06, Phalguna 1932"


def test_days_cross_year_and_leap_chaitra():
    d = SakaDate(1933, 1, 1)
    d.subtract_days(1)
    assert d == (1932, 12, 30)
    d = SakaDate(1934, 1, 30)
    d.add_days(1)
    assert d == (1934, 1, 31)
    d.add_days(-31)
    assert d == (1933, 12, 30)


def test_add_and_subtract_years():
    d = SakaDate(1932, 1, 1)
    d.add_years(3)
    assert d == (1935, 1, 1)
    assert d.render_text() == "01, Chaitra 1935"
    d.subtract_years(2)
    assert d.render_text() == "01, Chaitra 1933"


def test_month_shift_keeps_day_by_default():
    d = SakaDate(1932, 2, 31)
    d.add_months(5)
    assert d == (1932, 7, 31)
    assert d.days_in_month() == 30


def test_month_shift_clamp_policy():
    d = SakaDate(1932, 2, 31, day_policy="clamp")
    d.add_months(5)
    assert d == (1932, 7, 30)

    d = SakaDate(1934, 1, 31)
    d.add_years(1, day_policy="clamp")
    assert d == (1935, 1, 30)


@pytest.mark.parametrize("method, n", [
    ("add_days", 1.5),
    ("add_days", "3"),
    ("subtract_days", -1),
    ("add_months", -1),
    ("subtract_months", None),
    ("add_years", True),
    ("subtract_years", -2),
])
def test_invalid_counts(method, n):
    d = SakaDate(1932, 5, 5)
    with pytest.raises(InvalidCount):
        getattr(d, method)(n)
    assert d == (1932, 5, 5)


def test_failed_shift_leaves_date_untouched():
    d = SakaDate(1, 1, 1)
    with pytest.raises(InvalidYear):
        d.subtract_years(1)
    assert d == (1, 1, 1)
    with pytest.raises(InvalidYear):
        d.subtract_months(1)
    assert d == (1, 1, 1)

    d = SakaDate(9999, 12, 1)
    with pytest.raises(InvalidYear):
        d.add_months(1)
    assert d == (9999, 12, 1)


def test_day_of_week_explicit_fields():
    d = SakaDate(1932, 1, 1)
    assert d.day_of_week(1932, 12, 26) == 4
    assert d.day_of_week(day=26, month=12) == 4
    assert d.day_of_week() == sakacal.day_of_week(1932, 1, 1)
    with pytest.raises(InvalidDay):
        d.day_of_week(1932, 12, 32)


def test_add_days_past_gregorian_range():
    d = SakaDate(9921, 10, 10)
    with pytest.raises(InvalidYear):
        d.add_days(1)
    assert d == (9921, 10, 10)
