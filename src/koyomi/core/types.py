from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

RokuyoLabel = Literal["大安", "赤口", "先勝", "友引", "先負", "仏滅"]

@dataclass(frozen=True)
class EngineId:
    family: Literal["standard", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class NewMoonEvent:
    """Approximate (mean) new moon preceding a probe date, and the one after it."""
    julian_date: float
    date: datetime
    next_new_moon: datetime

    @property
    def day(self) -> date:
        return self.date.date()

    @property
    def next_day(self) -> date:
        return self.next_new_moon.date()

@dataclass(frozen=True)
class LunisolarDate:
    year: int
    month: int  # 1..12, no leap months
    day: int    # 1 on the governing new moon's date

@dataclass(frozen=True)
class SolarTermDate:
    month: int
    day: int

    def in_year(self, year: int) -> date:
        return date(year, self.month, self.day)

@dataclass(frozen=True)
class SolarTermOccurrence:
    date: date
    name: str

@dataclass(frozen=True)
class Era:
    name: str
    start_year: int
    end_year: int  # inclusive; the last era's bound is synthetic
    start: date    # accession date

@dataclass(frozen=True)
class EraYear:
    name: str
    year: int

@dataclass(frozen=True)
class SpecialDays:
    stem_index: int
    branch_index: int
    hitotubu: bool   # 一粒万倍日
    tensyabi: bool   # 天赦日
    daimyoubi: bool  # 大明日

@dataclass(frozen=True)
class CalendarDayInfo:
    civil_date: date
    weekday: str
    lunar_month_name: str
    era: str
    era_year: int
    stem: str
    branch: str
    zodiac: str
    sekki: str
    lunisolar: LunisolarDate
    rokuyo: RokuyoLabel
    holiday: str
    hitotubu: bool
    tensyabi: bool
    daimyoubi: bool
    attributes: Optional[Dict[str, Any]] = None
    # instant of the mean new moon before this day under the engine's own model
    mean_new_moon: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Flat record in the shape the calendar UI reads."""
        out: Dict[str, Any] = {
            "week": self.weekday,
            "inreki": self.lunar_month_name,
            "gengo": self.era,
            "wareki": self.era_year,
            "zyusi": self.stem,
            "zyunisi": self.branch,
            "eto": self.zodiac,
            "sekki": self.sekki,
            "kyurekiy": self.lunisolar.year,
            "kyurekim": self.lunisolar.month,
            "kyurekid": self.lunisolar.day,
            "rokuyou": self.rokuyo,
            "holiday": self.holiday,
            "hitotubuflg": self.hitotubu,
            "tensyabiflg": self.tensyabi,
            "daimyoubiflg": self.daimyoubi,
        }
        if self.attributes:
            out.update(self.attributes)
        return out

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a JapaneseCalendar."""
    id: EngineId
    fixed_holidays: Mapping[Tuple[int, int], str]
    # (month, week_index) -> name, week_index 2 means days 8..14
    monday_holidays: Mapping[Tuple[int, int], str]
    spring_equinox_holiday: str
    autumn_equinox_holiday: str
    citizens_holiday: str
    eras: Tuple[Era, ...]
    reference_new_moon: datetime
    synodic_month: float
    meta: dict

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)
