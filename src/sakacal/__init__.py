"""sakacal public API.

Saka (Indian national) calendar <-> Gregorian conversion through the Julian day,
plus in-place date arithmetic and plain-text rendering.
"""

from .api import (
    is_leap,
    today,
    to_gregorian,
    from_gregorian,
    to_julian,
    from_julian,
    day_of_week,
    days_in_month,
    month_name,
    weekday_name,
    render_text,
    render_month_grid,
    new_year_day,
    month_bounds,
)
from .core.clock import Clock, FixedClock, SystemClock
from .core.errors import InvalidCount, InvalidDay, InvalidMonth, InvalidYear, SakaError
from .core.types import MONTH_NAMES, WEEKDAY_NAMES, GregorianDate
from .core.validate import validate, validation_error
from .date import SakaDate

__version__ = "0.1.0"

__all__ = [
    "SakaDate",
    "GregorianDate",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "Clock",
    "SystemClock",
    "FixedClock",
    "SakaError",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
    "InvalidCount",
    "validate",
    "validation_error",
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
