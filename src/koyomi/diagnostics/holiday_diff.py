#!/usr/bin/env python3
"""
Compare resolved holidays with the jpholiday package (which implements the
Holiday Act including substitute holidays) over a range of years.
"""
from __future__ import annotations

import argparse
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

import koyomi


def _need_jpholiday():
    try:
        import jpholiday
        return jpholiday
    except ImportError as e:
        raise RuntimeError('Need jpholiday. Install: pip install "koyomi[diagnostics]"') from e


Row = Tuple[date, Optional[str], Optional[str]]


def diff_holidays(
    ours: Iterable[Tuple[date, str]],
    theirs: Iterable[Tuple[date, str]],
) -> List[Row]:
    """(date, ours, theirs) for every date where the two disagree on holiday-ness or name."""
    a: Dict[date, str] = dict(ours)
    b: Dict[date, str] = dict(theirs)
    out: List[Row] = []
    for d in sorted(set(a) | set(b)):
        if a.get(d) != b.get(d):
            out.append((d, a.get(d), b.get(d)))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Resolved holidays vs jpholiday.")
    p.add_argument("--calendar", default="standard")
    p.add_argument("--start-year", type=int, default=2020)
    p.add_argument("--end-year", type=int, default=2030)
    args = p.parse_args(argv)

    jpholiday = _need_jpholiday()

    total = 0
    for y in range(args.start_year, args.end_year + 1):
        rows = diff_holidays(
            koyomi.holidays_in_year(y, calendar=args.calendar),
            jpholiday.year_holidays(y),
        )
        total += len(rows)
        for d, ours, theirs in rows:
            print(f"{d.isoformat()}  koyomi={ours or '-':<10}  jpholiday={theirs or '-'}")

    print(f"{total} differing dates in {args.start_year}..{args.end_year}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
