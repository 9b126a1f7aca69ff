"""
koyomi.engines.calendar
-----------------------
The Orchestrator. Binds the new-moon, solar-term, era, holiday and
lucky-day resolvers into one per-date CalendarDayInfo record.

Each JapaneseCalendar owns its caches (new-moon anchors per month, solar
term tables per year, holidays per date). They only grow; share an
instance between threads only behind a lock.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from koyomi.core.time import check_date, check_month, month_dates
from koyomi.core.types import (
    CalendarDayInfo,
    CalendarSpec,
    EngineId,
    EraYear,
    LunisolarDate,
    SolarTermOccurrence,
)
from koyomi.engines.era import era_for
from koyomi.engines.holidays import HolidayResolver
from koyomi.engines.lunisolar import LunisolarConverter
from koyomi.engines.rokuyo import check_rokuyo, rokuyo_for
from koyomi.engines.sekki import SekkiLookup
from koyomi.engines.special_days import BRANCHES, STEMS, special_days, zodiac_index

LOGGER = logging.getLogger(__name__)

# Indexed by date.weekday() (Monday=0)
WEEKDAY_NAMES = ("月", "火", "水", "木", "金", "土", "日")

LUNAR_MONTH_NAMES = (
    "睦月", "如月", "弥生", "卯月", "皐月", "水無月",
    "文月", "葉月", "長月", "神無月", "霜月", "師走",
)


class JapaneseCalendar:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.id: EngineId = spec.id
        self.lunisolar = LunisolarConverter(
            reference=spec.reference_new_moon,
            synodic_month=spec.synodic_month,
        )
        self.sekki = SekkiLookup()
        self.holidays = HolidayResolver(
            spec.fixed_holidays,
            spec.monday_holidays,
            spring_equinox=spec.spring_equinox_holiday,
            autumn_equinox=spec.autumn_equinox_holiday,
            citizens=spec.citizens_holiday,
        )

    # ---------------------------------------------------------
    # Single-concern lookups
    # ---------------------------------------------------------

    def to_lunisolar(self, d: date) -> LunisolarDate:
        return self.lunisolar.to_lunisolar(d)

    def sekki_for(self, d: date) -> Optional[str]:
        return self.sekki.sekki_for(d)

    def next_sekki(self, reference: date, name: str) -> SolarTermOccurrence:
        return self.sekki.next_occurrence(reference, name)

    def era_for(self, year: int) -> EraYear:
        return era_for(year, self.spec.eras)

    def holiday_for(self, year: int, month: int, day: int, weekday: int) -> Optional[str]:
        return self.holidays.holiday_for(year, month, day, weekday)

    # ---------------------------------------------------------
    # Aggregate records
    # ---------------------------------------------------------

    def info_for(self, d: date) -> CalendarDayInfo:
        check_date(d)
        ld = self.lunisolar.to_lunisolar(d)
        sd = special_days(d, ld)
        ey = self.era_for(d.year)
        holiday = self.holidays.holiday_on(d)

        return CalendarDayInfo(
            civil_date=d,
            weekday=WEEKDAY_NAMES[d.weekday()],
            lunar_month_name=LUNAR_MONTH_NAMES[ld.month - 1],
            era=ey.name,
            era_year=ey.year,
            stem=STEMS[sd.stem_index],
            branch=BRANCHES[sd.branch_index],
            zodiac=BRANCHES[zodiac_index(d.year)],
            sekki=self.sekki.sekki_for(d) or "",
            lunisolar=ld,
            rokuyo=rokuyo_for(ld),
            holiday=holiday or "",
            hitotubu=sd.hitotubu,
            tensyabi=sd.tensyabi,
            daimyoubi=sd.daimyoubi,
            mean_new_moon=self.lunisolar.mean_new_moon(d).date,
        )

    def month_info(self, year: int, month: int) -> List[CalendarDayInfo]:
        return [self.info_for(d) for d in month_dates(year, month)]

    def year_info(self, year: int) -> Dict[int, List[CalendarDayInfo]]:
        LOGGER.debug("computing year %d (%s)", year, self.id.name)
        return {m: self.month_info(year, m) for m in range(1, 13)}

    def find_rokuyo_days(self, year: int, month: int, label: str) -> List[int]:
        """Day numbers of `month` whose Rokuyo is `label`."""
        check_rokuyo(label)
        check_month(year, month)
        return [i.civil_date.day for i in self.month_info(year, month) if i.rokuyo == label]

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "synodic_month": self.spec.synodic_month,
            "reference_new_moon": self.spec.reference_new_moon.isoformat(),
            "eras": [e.name for e in self.spec.eras],
            "meta": dict(self.spec.meta),
        }
