"""
koyomi.engines.special_days
---------------------------
Sexagenary day cycle and the three lucky-day flags (rekichū).

The flags are simplified heuristics:
  - 一粒万倍日 (hitotubu): day stem is 甲 or 己
  - 天赦日 (tensyabi): day stem is 辛 and lunar month % 12 is 5, 9 or 1
  - 大明日 (daimyoubi): the day is a Sunday or a Thursday
"""

from __future__ import annotations

import calendar as pycal
from datetime import date
from typing import Tuple

from koyomi.core.types import LunisolarDate, SpecialDays

EPOCH_1900 = date(1900, 1, 1)

STEMS: Tuple[str, ...] = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
BRANCHES: Tuple[str, ...] = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")

HITOTUBU_STEMS = (0, 5)
TENSYABI_STEM = 7
TENSYABI_MONTHS = (5, 9, 1)
DAIMYOUBI_WEEKDAYS = (pycal.SUNDAY, pycal.THURSDAY)


def days_since_1900(d: date) -> int:
    return (d - EPOCH_1900).days


def stem_index(d: date) -> int:
    return days_since_1900(d) % 10


def branch_index(d: date) -> int:
    return days_since_1900(d) % 12


def zodiac_index(year: int) -> int:
    """Year branch (eto) of a Gregorian year, 子 for 2020."""
    return (year - 4) % 12


def special_days(d: date, ld: LunisolarDate) -> SpecialDays:
    stem = stem_index(d)
    branch = branch_index(d)
    return SpecialDays(
        stem_index=stem,
        branch_index=branch,
        hitotubu=stem in HITOTUBU_STEMS,
        tensyabi=stem == TENSYABI_STEM and (ld.month % 12) in TENSYABI_MONTHS,
        daimyoubi=d.weekday() in DAIMYOUBI_WEEKDAYS,
    )
