#!/usr/bin/env python3
"""
Compare the linear quarter-point formula used for solar terms and equinox
holidays with Meeus' mean equinox/solstice series, year by year.
"""
from __future__ import annotations

import argparse
import math
from typing import Dict, List, Optional, Tuple

from koyomi.core.time import from_jdn
from koyomi.engines.astronomy import QUARTER_POINTS, equinox_day


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "koyomi[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "koyomi[diagnostics]"') from e


# Meeus, Astronomical Algorithms, Table 27.C (years 1000..3000), JDE in TT.
_MEEUS_27C: Dict[str, Tuple[float, float, float, float, float]] = {
    "spring": (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
    "summer": (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
    "autumn": (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
    "winter": (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
}

JST_OFFSET_DAYS = 9.0 / 24.0


def quarter_point_jde(year: int, which: str) -> float:
    """Mean quarter point of `year` (JDE, TT)."""
    c0, c1, c2, c3, c4 = _MEEUS_27C[which]
    y = (year - 2000) / 1000.0
    return c0 + c1 * y + c2 * y**2 + c3 * y**3 + c4 * y**4


def jd_to_jst_day(jd: float) -> Tuple[int, int, int]:
    d = from_jdn(math.floor(jd + 0.5 + JST_OFFSET_DAYS))
    return d.year, d.month, d.day


def reference_day(year: int, which: str) -> int:
    """Day of month (JST) of the mean quarter point."""
    return jd_to_jst_day(quarter_point_jde(year, which))[2]


def day_offsets(years: List[int], which: str) -> List[int]:
    """formula day - reference day, per year."""
    return [equinox_day(y, which) - reference_day(y, which) for y in years]  # type: ignore[arg-type]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Quarter-point formula vs mean equinoxes/solstices.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--out", default="sekki_drift.png")
    p.add_argument("--no-plot", action="store_true", help="print the summary only")
    args = p.parse_args(argv)

    np = _need_numpy()
    years = list(range(args.start_year, args.end_year + 1))

    series = {}
    for which, (name, _, _) in QUARTER_POINTS.items():
        off = np.array(day_offsets(years, which), dtype=int)
        series[which] = off
        bad = int(np.count_nonzero(off))
        print(f"{name}: {bad}/{len(years)} years off  (min {off.min():+d}, max {off.max():+d})")

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(10, 4))
    x = np.array(years)
    for i, (which, off) in enumerate(series.items()):
        ax.step(x, off + 0.06 * i, where="mid", label=QUARTER_POINTS[which][0], lw=1.2)
    ax.axhline(0.0, color="0.5", lw=0.8)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("formula - mean (days)")
    ax.set_title("Quarter-point formula drift (JST)")
    ax.legend(loc="best", fontsize=8)
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
