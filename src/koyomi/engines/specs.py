from __future__ import annotations

from typing import Dict, Mapping, Tuple

from ..core.types import CalendarSpec, EngineId
from .astronomy import REFERENCE_NEW_MOON, SYNODIC_MONTH
from .era import ERAS


# ============================================================
# HOLIDAY TABLES
# ============================================================

FIXED_HOLIDAYS: Mapping[Tuple[int, int], str] = {
    (1, 1): "元日",
    (2, 11): "建国記念の日",
    (2, 23): "天皇誕生日",
    (4, 29): "昭和の日",
    (5, 3): "憲法記念日",
    (5, 4): "みどりの日",
    (5, 5): "こどもの日",
    (8, 11): "山の日",
    (11, 3): "文化の日",
    (11, 23): "勤労感謝の日",
}

# (month, nth Monday)
MONDAY_HOLIDAYS: Mapping[Tuple[int, int], str] = {
    (1, 2): "成人の日",
    (7, 3): "海の日",
    (9, 3): "敬老の日",
    (10, 2): "スポーツの日",
}

SPRING_EQUINOX_DAY = "春分の日"
AUTUMN_EQUINOX_DAY = "秋分の日"
CITIZENS_HOLIDAY = "国民の休日"

# Heisei-era names and dates: Emperor's Birthday in December, Sports Day
# under its old name. Mountain Day is listed for every year.
HEISEI_FIXED_HOLIDAYS: Mapping[Tuple[int, int], str] = {
    (1, 1): "元日",
    (2, 11): "建国記念の日",
    (4, 29): "昭和の日",
    (5, 3): "憲法記念日",
    (5, 4): "みどりの日",
    (5, 5): "こどもの日",
    (8, 11): "山の日",
    (11, 3): "文化の日",
    (11, 23): "勤労感謝の日",
    (12, 23): "天皇誕生日",
}

HEISEI_MONDAY_HOLIDAYS: Mapping[Tuple[int, int], str] = {
    (1, 2): "成人の日",
    (7, 3): "海の日",
    (9, 3): "敬老の日",
    (10, 2): "体育の日",
}


# ============================================================
# SPECS
# ============================================================

STANDARD = CalendarSpec(
    id=EngineId("standard", "standard", "1"),
    fixed_holidays=FIXED_HOLIDAYS,
    monday_holidays=MONDAY_HOLIDAYS,
    spring_equinox_holiday=SPRING_EQUINOX_DAY,
    autumn_equinox_holiday=AUTUMN_EQUINOX_DAY,
    citizens_holiday=CITIZENS_HOLIDAY,
    eras=ERAS,
    reference_new_moon=REFERENCE_NEW_MOON,
    synodic_month=SYNODIC_MONTH,
    meta={"description": "Current holiday law, Reiwa era table"},
)

HEISEI = STANDARD.tweak(
    id=EngineId("standard", "heisei", "1"),
    fixed_holidays=HEISEI_FIXED_HOLIDAYS,
    monday_holidays=HEISEI_MONDAY_HOLIDAYS,
    meta={"description": "Heisei-era holiday names and dates"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "standard": STANDARD,
    "heisei": HEISEI,
}
