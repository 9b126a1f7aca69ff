"""
koyomi.engines.astronomy
------------------------
Linear approximations of the two astronomical inputs of the almanac:
mean new moons (a fixed reference new moon stepped by a constant synodic
month) and the dates of the 24 solar terms (sekki).

Everything here is a pure function of its arguments.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Literal, Optional, Tuple

from koyomi.core.time import days_between, midnight, normalized_date
from koyomi.core.types import NewMoonEvent, SolarTermDate

# J2000.0 epoch (2000-01-01 12:00) as a Julian Date
JD_J2000 = 2451545.0
J2000_INSTANT = datetime(2000, 1, 1, 12)

# Reference new moon and mean synodic month used by the almanac
REFERENCE_NEW_MOON = datetime(2000, 1, 6)
SYNODIC_MONTH = 29.53059

Quarter = Literal["spring", "summer", "autumn", "winter"]

# (term name, month, C) for the four quarter points
QUARTER_POINTS: Dict[Quarter, Tuple[str, int, float]] = {
    "spring": ("春分", 3, 20.8431),
    "summer": ("夏至", 6, 21.851),
    "autumn": ("秋分", 9, 23.2488),
    "winter": ("冬至", 12, 22.6224),
}


@dataclass(frozen=True)
class SolarTermBase:
    name: str
    base_month: int
    base_day: int
    # Quarter point the term hangs off. Informational: the day correction
    # below does not depend on it.
    reference: Optional[str]


# Calendar order. Quarter points carry reference=None and are computed by
# the quarter-point formula instead of their base day.
SOLAR_TERMS: Tuple[SolarTermBase, ...] = (
    SolarTermBase("小寒", 1, 5, "冬至"),
    SolarTermBase("大寒", 1, 20, "冬至"),
    SolarTermBase("立春", 2, 4, "春分"),
    SolarTermBase("雨水", 2, 19, "春分"),
    SolarTermBase("啓蟄", 3, 5, "春分"),
    SolarTermBase("春分", 3, 20, None),
    SolarTermBase("清明", 4, 5, "春分"),
    SolarTermBase("穀雨", 4, 20, "春分"),
    SolarTermBase("立夏", 5, 5, "夏至"),
    SolarTermBase("小満", 5, 21, "夏至"),
    SolarTermBase("芒種", 6, 6, "夏至"),
    SolarTermBase("夏至", 6, 21, None),
    SolarTermBase("小暑", 7, 7, "夏至"),
    SolarTermBase("大暑", 7, 23, "夏至"),
    SolarTermBase("立秋", 8, 7, "秋分"),
    SolarTermBase("処暑", 8, 23, "秋分"),
    SolarTermBase("白露", 9, 8, "秋分"),
    SolarTermBase("秋分", 9, 23, None),
    SolarTermBase("寒露", 10, 8, "秋分"),
    SolarTermBase("霜降", 10, 23, "秋分"),
    SolarTermBase("立冬", 11, 7, "冬至"),
    SolarTermBase("小雪", 11, 22, "冬至"),
    SolarTermBase("大雪", 12, 7, "冬至"),
    SolarTermBase("冬至", 12, 21, None),
)

SOLAR_TERM_NAMES: Tuple[str, ...] = tuple(t.name for t in SOLAR_TERMS)

_QUARTER_BY_NAME: Dict[str, Quarter] = {v[0]: k for k, v in QUARTER_POINTS.items()}


# ============================================================
# New moons
# ============================================================

def nearest_preceding_new_moon(
    year: int,
    month: int,
    day: int,
    *,
    reference: datetime = REFERENCE_NEW_MOON,
    synodic_month: float = SYNODIC_MONTH,
) -> NewMoonEvent:
    """
    Mean new moon at or before local midnight of (year, month, day).

    Day and month overflow roll into the adjacent month, so probes such as
    (y, m, 0) or (y, 2, 30) are accepted.
    """
    target = midnight(normalized_date(year, month, day))
    cycles = days_between(reference, target) / synodic_month
    complete = math.floor(cycles)

    offset_days = complete * synodic_month
    prev_new_moon = reference + timedelta(days=offset_days)
    next_new_moon = prev_new_moon + timedelta(days=synodic_month)

    jd = JD_J2000 + days_between(J2000_INSTANT, reference) + offset_days
    return NewMoonEvent(julian_date=jd, date=prev_new_moon, next_new_moon=next_new_moon)


# ============================================================
# Solar terms
# ============================================================

def equinox_day(year: int, which: Quarter) -> int:
    """Day of month of a quarter point: floor(C + 0.242194*(y-1980) - floor((y-1980)/4))."""
    _, _, c = QUARTER_POINTS[which]
    dy = year - 1980
    return math.floor(c + 0.242194 * dy - math.floor(dy / 4))


def term_day_correction(year: int) -> int:
    """Uniform leap-year/century shift applied to every non-quarter term."""
    leap = 1 if year % 4 == 0 else 0
    return leap + (year - 2000) // 100 - (year - 2000) // 400


def solar_term_dates(year: int) -> Dict[str, SolarTermDate]:
    """Approximate month/day of all 24 solar terms of `year`, in calendar order."""
    shift = term_day_correction(year)
    out: Dict[str, SolarTermDate] = {}
    for t in SOLAR_TERMS:
        if t.reference is None:
            out[t.name] = SolarTermDate(t.base_month, equinox_day(year, _QUARTER_BY_NAME[t.name]))
        else:
            out[t.name] = SolarTermDate(t.base_month, t.base_day + shift)
    return out
