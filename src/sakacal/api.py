from __future__ import annotations

from typing import Any, Dict, Optional

from .core.clock import Clock
from .core.time import is_leap, julian_to_gregorian
from .core.types import GregorianDate
from .core.validate import validate
from .date import SakaDate
from .engines import calendar as cal
from .engines.saka import new_year_julian
from .render import render_month_grid, render_text

__all__ = [
    "is_leap",
    "today",
    "to_gregorian",
    "from_gregorian",
    "to_julian",
    "from_julian",
    "day_of_week",
    "days_in_month",
    "month_name",
    "weekday_name",
    "render_text",
    "render_month_grid",
    "new_year_day",
    "month_bounds",
]


def today(clock: Optional[Clock] = None) -> SakaDate:
    return SakaDate.today(clock)


def to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    return cal.to_gregorian(year, month, day)


def from_gregorian(year: int, month: int, day: int) -> SakaDate:
    return SakaDate.from_gregorian(year, month, day)


def to_julian(year: int, month: int, day: int) -> float:
    return cal.to_julian(year, month, day)


def from_julian(jd: float) -> SakaDate:
    return SakaDate.from_julian(jd)


def day_of_week(year: int, month: int, day: int) -> int:
    return cal.day_of_week(year, month, day)


def days_in_month(year: int, month: int) -> int:
    return cal.days_in_month(year, month)


def month_name(month: int) -> str:
    return cal.month_name(month)


def weekday_name(year: int, month: int, day: int) -> str:
    return cal.weekday_name(cal.day_of_week(year, month, day))


def new_year_day(year: int) -> GregorianDate:
    """Gregorian date of 1 Chaitra of Saka year `year`."""
    validate(year, 1, 1)
    return julian_to_gregorian(new_year_julian(year))


def month_bounds(year: int, month: int) -> Dict[str, Any]:
    """First and last Gregorian day of a Saka month."""
    n = cal.days_in_month(year, month)
    first_jd = cal.to_julian(year, month, 1)
    return {
        "year": year,
        "month": month,
        "days": n,
        "first_jd": first_jd,
        "last_jd": first_jd + n - 1,
        "first_date": julian_to_gregorian(first_jd),
        "last_date": julian_to_gregorian(first_jd + n - 1),
    }
