"""
sakacal.engines.saka
--------------------
Saka date <-> Julian day.

1 Chaitra falls on March 22 of Gregorian year Y + 78 (March 21 when that
year is leap). Chaitra has 30 days (31 in a Gregorian leap year), months
2..6 have 31 days and months 7..12 have 30.

No validation happens here; see sakacal.engines.calendar.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.time import gregorian_to_julian, is_leap, julian_to_gregorian
from ..core.types import SAKA_EPOCH_OFFSET, SAKA_NEW_YEAR_YDAY

LONG_MONTHS = 5     # Vaisakha .. Bhadra
LONG_MONTH_DAYS = 31
SHORT_MONTH_DAYS = 30


def chaitra_length(gyear: int) -> int:
    """Days in Chaitra of the Saka year starting in Gregorian year gyear."""
    return 31 if is_leap(gyear) else 30


def new_year_julian(year: int) -> float:
    """Julian day of 1 Chaitra of Saka year `year`."""
    gyear = year + SAKA_EPOCH_OFFSET
    return gregorian_to_julian(gyear, 3, 21 if is_leap(gyear) else 22)


def saka_to_julian(year: int, month: int, day: int) -> float:
    gyear = year + SAKA_EPOCH_OFFSET
    start = new_year_julian(year)

    if month == 1:
        return start + (day - 1)

    jd = start + chaitra_length(gyear)
    jd += min(month - 2, LONG_MONTHS) * LONG_MONTH_DAYS
    if month >= 8:
        jd += (month - 7) * SHORT_MONTH_DAYS
    return jd + (day - 1)


def julian_to_saka(jd: float) -> Tuple[int, int, int]:
    """
    Julian day -> (year, month, day) in the Saka calendar.

    The year is not range-checked; days before 1 Chaitra 1 give year <= 0.
    """
    jd = math.floor(jd) + 0.5
    gyear = julian_to_gregorian(jd).year
    yday = int(jd - gregorian_to_julian(gyear, 1, 1))
    chaitra = chaitra_length(gyear)
    year = gyear - SAKA_EPOCH_OFFSET

    if yday < SAKA_NEW_YEAR_YDAY:
        # Jan 1 .. Mar 20/21 belong to the previous Saka year. Only the
        # month layout after Chaitra matters here, so this Chaitra length
        # cancels out below.
        year -= 1
        yday += chaitra + LONG_MONTHS * LONG_MONTH_DAYS + 3 * SHORT_MONTH_DAYS + 10 + SAKA_NEW_YEAR_YDAY

    yday -= SAKA_NEW_YEAR_YDAY
    if yday < chaitra:
        return year, 1, yday + 1

    mday = yday - chaitra
    if mday < LONG_MONTHS * LONG_MONTH_DAYS:
        return year, mday // LONG_MONTH_DAYS + 2, mday % LONG_MONTH_DAYS + 1

    mday -= LONG_MONTHS * LONG_MONTH_DAYS
    return year, mday // SHORT_MONTH_DAYS + 7, mday % SHORT_MONTH_DAYS + 1


def month_length(year: int, month: int) -> int:
    """Month length from the fixed layout (same result as the JD delta)."""
    if month == 1:
        return chaitra_length(year + SAKA_EPOCH_OFFSET)
    if month <= 1 + LONG_MONTHS:
        return LONG_MONTH_DAYS
    return SHORT_MONTH_DAYS
