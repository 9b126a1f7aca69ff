#!/usr/bin/env python3
"""
Histogram of mean-new-moon offsets (hours) against true new moons from a
JPL ephemeris, and how often the lunisolar day-1 lands on the wrong date.
"""
from __future__ import annotations

import argparse
from datetime import datetime
from typing import List, Optional, Tuple

from koyomi.engines.astronomy import nearest_preceding_new_moon
from koyomi.ephemeris.moon_phases import true_new_moons


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "koyomi[ephemeris]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "koyomi[ephemeris]"') from e


def mean_new_moon_near(t: datetime) -> datetime:
    """Mean new moon closest to instant t (either side)."""
    ev = nearest_preceding_new_moon(t.year, t.month, t.day)
    candidates = (ev.date, ev.next_new_moon)
    return min(candidates, key=lambda m: abs((m - t).total_seconds()))


def offsets_hours(true_moons: List[datetime]) -> List[Tuple[datetime, float, bool]]:
    """(true instant, mean - true in hours, same calendar date) per true new moon."""
    out = []
    for t in true_moons:
        m = mean_new_moon_near(t)
        out.append((t, (m - t).total_seconds() / 3600.0, m.date() == t.date()))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Mean new moons vs JPL ephemeris new moons (JST).")
    p.add_argument("--year-start", type=int, default=1990)
    p.add_argument("--year-end", type=int, default=2030)
    p.add_argument("--kernel", default="de421.bsp")
    p.add_argument("--bins", type=int, default=60)
    p.add_argument("--out-png", default="new_moon_offsets.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    moons = true_new_moons(datetime(args.year_start, 1, 1), datetime(args.year_end + 1, 1, 1), kernel=args.kernel)
    rows = offsets_hours(moons)
    hours = np.array([h for _, h, _ in rows])
    same = sum(1 for _, _, s in rows if s)

    print(f"new moons: {len(rows)}")
    print(f"offset hours: mean {hours.mean():+.2f}  std {hours.std():.2f}  min {hours.min():+.2f}  max {hours.max():+.2f}")
    print(f"same calendar date: {same}/{len(rows)}")

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.hist(hours, bins=args.bins, color="0.3")
    ax.set_xlabel("mean - true (hours)")
    ax.set_ylabel("count")
    ax.set_title(f"Mean new moon offsets {args.year_start}-{args.year_end}")
    fig.tight_layout()
    fig.savefig(args.out_png, dpi=150)
    print(f"wrote {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
