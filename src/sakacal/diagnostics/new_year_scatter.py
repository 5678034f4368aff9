#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import sakacal
from sakacal.core.types import SAKA_EPOCH_OFFSET


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sakacal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sakacal[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(sakacal.new_year_day(int(Y)).day)
    return years + SAKA_EPOCH_OFFSET, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the March day on which 1 Chaitra falls.")
    p.add_argument("--start-year", type=int, default=1800, help="First Saka year.")
    p.add_argument("--end-year", type=int, default=2000, help="Last Saka year.")
    p.add_argument("--outbase", default="saka_new_year", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.start_year, args.end_year)
    leap = np.array([sakacal.is_leap(int(gy)) for gy in x])

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day of March of 1 Chaitra")
    ax.set_title("Saka new year in the Gregorian calendar")

    ax.scatter(x[~leap], y[~leap], s=14, marker="o", c="tab:blue", alpha=0.6, label="common year (Mar 22)")
    ax.scatter(x[leap], y[leap], s=18, marker="o", facecolors="none", edgecolors="tab:red",
               linewidths=1.0, alpha=0.8, label="leap year (Mar 21)")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
