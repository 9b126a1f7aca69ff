from __future__ import annotations

import argparse
from datetime import date

import koyomi


def dow_header(w: int = 6) -> str:
    return " ".join(n.ljust(w - 1) for n in ("月", "火", "水", "木", "金", "土", "日"))


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * 42)
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_cells(calendar: str, gy: int, gm: int, *, lunar: bool = False) -> list[list[tuple[str, str]]]:
    """Week rows of (top, bottom) cells; bottom shows Rokuyo or lunar m/d."""
    rows = koyomi.month_info(gy, gm, calendar=calendar)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = date(gy, gm, 1).weekday()  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for info in rows:
        mark = "*" if info.holiday else ""
        top = f"{info.civil_date.day:2d}{mark}"
        if lunar:
            bot = f"{info.lunisolar.month:02d}-{info.lunisolar.day:02d}"
        else:
            bot = info.rokuyo
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def gregorian_month_calendar(calendar: str, gy: int, gm: int, *, lunar: bool = False) -> None:
    ey = koyomi.era(gy, calendar=calendar)
    title = f"{gy}-{gm:02d} ({ey.name}{ey.year}年)  [{calendar}]  * = holiday"
    print_grid(title, month_cells(calendar, gy, gm, lunar=lunar))
    for d, name in koyomi.holidays_in_year(gy, calendar=calendar):
        if d.month == gm:
            print(f"  {d.day:2d} {name}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month grid annotated with Rokuyo (or lunar dates) and holidays."
    )
    p.add_argument("--calendar", default="standard", help="standard|heisei (default: standard)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 5)")
    p.add_argument("--lunar", action="store_true", help="show lunar month-day instead of Rokuyo")
    args = p.parse_args(argv)

    if args.greg:
        gy, gm = args.greg
    else:
        today = date.today()
        gy, gm = today.year, today.month

    gregorian_month_calendar(args.calendar, gy, gm, lunar=args.lunar)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
