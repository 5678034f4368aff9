from __future__ import annotations

from typing import List

from .core.types import MONTH_NAMES
from .core.validate import validate
from .engines.calendar import day_of_week, days_in_month

GRID_HEADER = "Sun  Mon  Tue  Wed  Thu  Fri  Sat"
CELL_WIDTH = 5


def render_text(year: int, month: int, day: int) -> str:
    """'DD, MonthName YYYY', e.g. '26, Phalguna 1932'."""
    validate(year, month, day)
    return f"{day:02d}, {MONTH_NAMES[month - 1]} {year:04d}"


def render_month_grid(year: int, month: int) -> str:
    """
    Seven-column month calendar, weeks starting on Sunday.

        \\n\\tPhalguna [1932]\\n
        \\nSun  Mon  Tue  Wed  Thu  Fri  Sat\\n
          1    2    3    4    5    6    7  \\n
        ...

    Each day occupies a 5-wide cell ('%3d' plus two spaces); a row ends
    after every Saturday.
    """
    validate(year, month, 1)

    start = day_of_week(year, month, 1) % 7
    n_days = days_in_month(year, month)

    parts: List[str] = [f"\n\t{MONTH_NAMES[month - 1]} [{year:04d}]\n", f"\n{GRID_HEADER}\n"]
    parts.append(" " * CELL_WIDTH * start)
    for d in range(1, n_days + 1):
        parts.append(f"{d:3d}  ")
        if (start + d) % 7 == 0:
            parts.append("\n")
    parts.append("\n\n")
    return "".join(parts)
