from __future__ import annotations

import argparse
import random
from typing import Tuple

from sakacal.core.time import gregorian_to_julian, julian_to_gregorian
from sakacal.core.types import GregorianDate
from sakacal.core.validate import validation_error
from sakacal.engines import calendar as cal
from sakacal.engines.saka import julian_to_saka, month_length, saka_to_julian


def parse_ymd(s: str) -> GregorianDate:
    parts = s.split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got '{s}'")
    g = GregorianDate(*map(int, parts))
    err = validation_error(*g)
    if err is not None:
        raise argparse.ArgumentTypeError(str(err))
    return g


def random_jd(start: GregorianDate, end: GregorianDate) -> float:
    j0 = gregorian_to_julian(*start)
    j1 = gregorian_to_julian(*end)
    return j0 + random.randint(0, int(j1 - j0))


def check_day(jd: float) -> Tuple[bool, str]:
    g = julian_to_gregorian(jd)
    if gregorian_to_julian(*g) != jd:
        return False, f"gregorian codec: jd={jd} -> {g} -> {gregorian_to_julian(*g)}"

    s = julian_to_saka(jd)
    if saka_to_julian(*s) != jd:
        return False, f"saka converter: jd={jd} -> {s} -> {saka_to_julian(*s)}"

    if s[0] >= 1:
        back = cal.to_gregorian(*cal.from_gregorian(*g))
        if back != g:
            return False, f"cross-calendar: {g} -> {s} -> {back}"
        if cal.days_in_month(s[0], s[1]) != month_length(s[0], s[1]):
            return False, f"month length: {s[:2]} jd-delta={cal.days_in_month(s[0], s[1])} layout={month_length(s[0], s[1])}"
    return True, ""


def roundtrip_test(N: int, start: GregorianDate, end: GregorianDate, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0
    for _ in range(N):
        ok, msg = check_day(random_jd(start, end))
        if not ok:
            failures += 1
            print("FAIL", msg)
            if failures >= max_failures:
                break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian <-> JD <-> saka.")
    p.add_argument("--N", type=int, default=20000, help="Number of trials.")
    p.add_argument("--start", type=parse_ymd, default="0100-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=parse_ymd, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start, end = args.start, args.end
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print(f"All {args.N} round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
