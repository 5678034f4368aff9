from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import SakaError

_DATE_RE = re.compile(r"^\d{1,4}-\d{1,2}-\d{1,2}$")

log = logging.getLogger("sakacal")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got '{s}'")
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s  [%(levelname)s]  %(name)s › %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_today(args: argparse.Namespace) -> int:
    import sakacal

    t = sakacal.today()
    print(f"{t}  ({t.weekday_name()})")
    return 0


def cmd_from_greg(args: argparse.Namespace) -> int:
    import sakacal

    s = sakacal.from_gregorian(*args.date)
    if args.tuple:
        print(f"{s.year} {s.month} {s.day}")
    else:
        print(f"{s}  ({s.weekday_name()})")
    return 0


def cmd_to_greg(args: argparse.Namespace) -> int:
    import sakacal

    g = sakacal.to_gregorian(args.year, args.month, args.day)
    print(g.isoformat())
    return 0


def cmd_month(args: argparse.Namespace) -> int:
    import sakacal

    print(sakacal.render_month_grid(args.year, args.month), end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sakacal", description="Saka (Indian national) calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("today", help="Today's Saka date")

    p_from = sub.add_parser("from-greg", help="Gregorian -> Saka")
    p_from.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p_from.add_argument("--tuple", action="store_true", help="Print 'Y M D' instead of text")

    p_to = sub.add_parser("to-greg", help="Saka -> Gregorian")
    p_to.add_argument("year", type=int)
    p_to.add_argument("month", type=int)
    p_to.add_argument("day", type=int)

    p_month = sub.add_parser("month", help="Print a Saka month calendar")
    p_month.add_argument("year", type=int)
    p_month.add_argument("month", type=int)

    sub.add_parser("new-years", help="Print table of Saka new-year dates (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip", "new-year-scatter"], help="Which diagnostic to run")
    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `sakacal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["from-greg"] + list(argv)

    p = build_parser()
    args, rest = p.parse_known_args(argv)
    _setup_logging(args.log_level)

    tool_map = {
        "round-trip": "sakacal.diagnostics.round_trip",
        "new-year-scatter": "sakacal.diagnostics.new_year_scatter",
    }
    handlers = {
        "today": cmd_today,
        "from-greg": cmd_from_greg,
        "to-greg": cmd_to_greg,
        "month": cmd_month,
    }

    if args.cmd not in ("new-years", "diag") and rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        if args.cmd == "new-years":
            return _run_module_main("sakacal.diagnostics.new_years_table", rest)
        if args.cmd == "diag":
            return _run_module_main(tool_map[args.tool], rest)
        return handlers[args.cmd](args)
    except SakaError as e:
        log.debug("rejected input", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
