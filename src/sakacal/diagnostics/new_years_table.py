from __future__ import annotations

import argparse

import sakacal


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the Gregorian date of 1 Chaitra for a range of Saka years.")
    p.add_argument("--from-year", type=int, default=1930)
    p.add_argument("--to-year", type=int, default=1950)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Saka", "1 Chaitra", "Weekday", "Chaitra"]
    colw = [5, 10, 14, 7]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        g = sakacal.new_year_day(Y)
        shown = g.isoformat() if args.dates == "iso" else f"{g.month:02d}-{g.day:02d}"
        row = [
            str(Y),
            shown,
            sakacal.weekday_name(Y, 1, 1),
            str(sakacal.days_in_month(Y, 1)),
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
