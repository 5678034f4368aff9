"""
sakacal.engines.calendar
------------------------
The orchestrator. Validates raw (year, month, day) input and chains the
Saka converter and the Gregorian codec through the Julian day.
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..core.time import add_gregorian_days, gregorian_to_julian, julian_to_gregorian, weekday
from ..core.types import MONTH_NAMES, WEEKDAY_NAMES, GregorianDate
from ..core.validate import check_count, validate, validate_month
from . import arithmetic
from .arithmetic import DayPolicy
from .saka import julian_to_saka, saka_to_julian

log = logging.getLogger(__name__)

SakaTuple = Tuple[int, int, int]


# ---------------------------------------------------------
# Conversion
# ---------------------------------------------------------

def to_julian(year: int, month: int, day: int) -> float:
    validate(year, month, day)
    return saka_to_julian(year, month, day)


def from_julian(jd: float) -> SakaTuple:
    return julian_to_saka(jd)


def to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    g = julian_to_gregorian(to_julian(year, month, day))
    log.debug("saka %04d-%02d-%02d -> gregorian %s", year, month, day, g.isoformat())
    return g


def from_gregorian(year: int, month: int, day: int) -> SakaTuple:
    validate(year, month, day)
    s = julian_to_saka(gregorian_to_julian(year, month, day))
    log.debug("gregorian %04d-%02d-%02d -> saka %s", year, month, day, s)
    return s


# ---------------------------------------------------------
# Calendar queries
# ---------------------------------------------------------

def day_of_week(year: int, month: int, day: int) -> int:
    """0 = Sunday .. 6 = Saturday."""
    return weekday(to_julian(year, month, day))


def days_in_month(year: int, month: int) -> int:
    """Julian-day distance from the 1st of `month` to the 1st of the next month."""
    start = to_julian(year, month, 1)
    if month == 12:
        year, month = year + 1, 1
    else:
        month += 1
    # Unvalidated: Phalguna 9999 is followed by year 10000.
    return int(saka_to_julian(year, month, 1) - start)


def month_name(month: int) -> str:
    return MONTH_NAMES[validate_month(month) - 1]


def weekday_name(dow: int) -> str:
    if isinstance(dow, bool) or not isinstance(dow, int) or not 0 <= dow <= 6:
        raise ValueError(f"Invalid weekday [{dow}].")
    return WEEKDAY_NAMES[dow]


# ---------------------------------------------------------
# Arithmetic (pure; returns new labels)
# ---------------------------------------------------------

def shift_days(year: int, month: int, day: int, n: int) -> SakaTuple:
    """Move by n days through the Gregorian calendar. n may be negative."""
    n = check_count(n, unit="day", allow_negative=True)
    g = to_gregorian(year, month, day)
    g = add_gregorian_days(g.year, g.month, g.day, n)
    return from_gregorian(g.year, g.month, g.day)


def shift_months(year: int, month: int, day: int, n: int, *, policy: DayPolicy = "keep") -> SakaTuple:
    """Move by n months; n < 0 moves backward. Counts are checked by the caller."""
    if n >= 0:
        year, month = arithmetic.add_months(year, month, n)
    else:
        year, month = arithmetic.subtract_months(year, month, -n)
    validate(year, month, day)
    day = arithmetic.resolve_day(year, month, day, policy, days_in_month)
    return year, month, day


def shift_years(year: int, month: int, day: int, n: int, *, policy: DayPolicy = "keep") -> SakaTuple:
    year += n
    validate(year, month, day)
    day = arithmetic.resolve_day(year, month, day, policy, days_in_month)
    return year, month, day
