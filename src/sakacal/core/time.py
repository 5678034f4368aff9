from __future__ import annotations

import math

from .types import GREGORIAN_EPOCH, GregorianDate


def is_leap(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# ============================================================
# Gregorian calendar date <-> JD (midnight-aligned, .5 fraction)
# ============================================================

def gregorian_to_julian(year: int, month: int, day: int) -> float:
    """
    Gregorian date -> Julian day at local midnight (x.5).

    No range checks; callers validate first.
    """
    y1 = year - 1
    if month <= 2:
        adj = 0
    elif is_leap(year):
        adj = -1
    else:
        adj = -2
    return (
        (GREGORIAN_EPOCH - 1)
        + 365 * y1
        + y1 // 4
        - y1 // 100
        + y1 // 400
        + (367 * month - 362) // 12
        + adj
        + day
    )


def julian_to_gregorian(jd: float) -> GregorianDate:
    """
    Julian day -> Gregorian date.

    Decomposes the day count since the Gregorian epoch into 400-year,
    100-year, 4-year and single-year cycles.
    """
    wjd = math.floor(jd - 0.5) + 0.5
    depoch = int(wjd - GREGORIAN_EPOCH)

    quadricent, dqc = divmod(depoch, 146097)
    cent, dcent = divmod(dqc, 36524)
    quad, dquad = divmod(dcent, 1461)
    yindex = dquad // 365

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    # Last day of a leap cycle belongs to the year just ended.
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = int(wjd - gregorian_to_julian(year, 1, 1))
    if wjd < gregorian_to_julian(year, 3, 1):
        leapadj = 0
    else:
        leapadj = 1 if is_leap(year) else 2
    month = ((yearday + leapadj) * 12 + 373) // 367
    day = int(wjd - gregorian_to_julian(year, month, 1)) + 1
    return GregorianDate(year, month, day)


def jd_to_jdn(jd: float) -> int:
    """JD (noon-based) -> integer Julian Day Number of the civil day."""
    return int(math.floor(jd + 0.5))


def weekday(jd: float) -> int:
    """Day of week for the civil day containing jd, 0 = Sunday."""
    return (jd_to_jdn(jd) + 1) % 7


def add_gregorian_days(year: int, month: int, day: int, n: int) -> GregorianDate:
    """Step a Gregorian date by n days (n may be negative)."""
    return julian_to_gregorian(gregorian_to_julian(year, month, day) + n)
