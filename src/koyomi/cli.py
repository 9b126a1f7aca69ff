from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import re
import sys
from datetime import date


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def _print_json(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2, default=str))


def _format_day(info) -> str:
    ld = info.lunisolar
    parts = [
        f"{info.civil_date.isoformat()} ({info.weekday})",
        f"{info.era}{info.era_year}年",
        f"旧暦 {ld.year}-{ld.month:02d}-{ld.day:02d} {info.lunar_month_name}",
        info.rokuyo,
        f"{info.stem}{info.branch}日",
        f"{info.zodiac}年",
    ]
    if info.sekki:
        parts.append(info.sekki)
    if info.holiday:
        parts.append(info.holiday)
    flags = [n for n, on in (("一粒万倍日", info.hitotubu), ("天赦日", info.tensyabi), ("大明日", info.daimyoubi)) if on]
    if flags:
        parts.append("/".join(flags))
    if info.attributes:
        parts.append(" ".join(f"{k}={v}" for k, v in info.attributes.items()))
    return "  ".join(parts)


def cmd_day(argv: list[str]) -> int:
    import koyomi

    p = argparse.ArgumentParser(prog="koyomi day", description="Gregorian -> Japanese almanac record")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="standard")
    p.add_argument("--json", action="store_true", help="print the flat UI record as JSON")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = koyomi.day_info(_parse_ymd(args.date), calendar=args.calendar, attributes=tuple(args.attr))
    if args.json:
        _print_json(info.to_dict())
    else:
        print(_format_day(info))
    return 0


def cmd_month(argv: list[str]) -> int:
    import koyomi

    p = argparse.ArgumentParser(prog="koyomi month", description="Almanac records for every day of a month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", default="standard")
    p.add_argument("--json", action="store_true")
    args = p.parse_args(argv)

    rows = koyomi.month_info(args.year, args.month, calendar=args.calendar)
    if args.json:
        _print_json([r.to_dict() for r in rows])
    else:
        for r in rows:
            print(_format_day(r))
    return 0


def cmd_rokuyo(argv: list[str]) -> int:
    import koyomi

    p = argparse.ArgumentParser(prog="koyomi rokuyo", description="Days of a month with a given Rokuyo")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("label", help="大安|赤口|先勝|友引|先負|仏滅")
    p.add_argument("--calendar", default="standard")
    args = p.parse_args(argv)

    days = koyomi.find_rokuyo_days(args.year, args.month, args.label, calendar=args.calendar)
    print(" ".join(str(d) for d in days))
    return 0


def cmd_sekki(argv: list[str]) -> int:
    import koyomi

    p = argparse.ArgumentParser(prog="koyomi sekki", description="Next occurrence of a solar term")
    p.add_argument("date", help="reference date YYYY-MM-DD")
    p.add_argument("name", help="solar term, e.g. 立春")
    p.add_argument("--calendar", default="standard")
    args = p.parse_args(argv)

    occ = koyomi.next_sekki(_parse_ymd(args.date), args.name, calendar=args.calendar)
    print(f"{occ.name} {occ.date.isoformat()}")
    return 0


def cmd_holidays(argv: list[str]) -> int:
    import koyomi

    p = argparse.ArgumentParser(prog="koyomi holidays", description="Holidays resolved for a year")
    p.add_argument("year", type=int)
    p.add_argument("--calendar", default="standard")
    args = p.parse_args(argv)

    for d, name in koyomi.holidays_in_year(args.year, calendar=args.calendar):
        print(f"{d.isoformat()}  {name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `koyomi YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="koyomi", description="Japanese almanac (koyomi) toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> almanac record", add_help=False)
    sub.add_parser("month", help="Almanac records for a month", add_help=False)
    sub.add_parser("rokuyo", help="Find days with a given Rokuyo", add_help=False)
    sub.add_parser("sekki", help="Next occurrence of a solar term", add_help=False)
    sub.add_parser("holidays", help="List holidays of a year", add_help=False)

    # diagnostics (no optional deps)
    sub.add_parser("pretty-month", help="Print a Gregorian month grid with Rokuyo labels", add_help=False)

    # diagnostics (optional deps)
    p_diag = sub.add_parser("diag", help="Diagnostics tools (needs koyomi[diagnostics])")
    p_diag.add_argument(
        "tool",
        choices=["sekki-drift", "holiday-diff"],
        help="Which diagnostic to run",
    )

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics (needs koyomi[ephemeris])")
    p_ephem.add_argument(
        "tool",
        choices=["new-moon-offsets"],
        help="Which ephemeris diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    commands = {
        "day": cmd_day,
        "month": cmd_month,
        "rokuyo": cmd_rokuyo,
        "sekki": cmd_sekki,
        "holidays": cmd_holidays,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("koyomi.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "sekki-drift": "koyomi.diagnostics.sekki_drift",
            "holiday-diff": "koyomi.diagnostics.holiday_diff",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "new-moon-offsets": "koyomi.diagnostics.ephem.new_moon_offsets",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
