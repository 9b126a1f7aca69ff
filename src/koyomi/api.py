from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import CalendarDayInfo, CalendarSpec, EraYear, LunisolarDate, SolarTermOccurrence
from .core.time import check_ymd
from .attributes.registry import compute_attributes, list_attributes
from .engines.era import era_for_date
from .engines.factory import make_calendar as _make_calendar
from .engines.rokuyo import rokuyo_for

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(name: str = "standard") -> CalendarEngine:
    return _reg().get(name)

def make_calendar(spec: CalendarSpec) -> CalendarEngine:
    return _make_calendar(spec)

def register_calendar(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def day_info(
    d: date,
    *,
    calendar: str = "standard",
    attributes: Sequence[str] = (),
) -> CalendarDayInfo:
    info = _reg().get(calendar).info_for(d)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def lunisolar_date(d: date, *, calendar: str = "standard") -> LunisolarDate:
    return _reg().get(calendar).to_lunisolar(d)

def rokuyo(d: date, *, calendar: str = "standard") -> str:
    return rokuyo_for(lunisolar_date(d, calendar=calendar))

def holiday(year: int, month: int, day: int, *, calendar: str = "standard") -> Optional[str]:
    d = check_ymd(year, month, day)
    return _reg().get(calendar).holiday_for(year, month, day, d.weekday())

def holidays_in_year(year: int, *, calendar: str = "standard") -> List[Tuple[date, str]]:
    return _reg().get(calendar).holidays.holidays_in_year(year)

def era(year: int, *, calendar: str = "standard") -> EraYear:
    return _reg().get(calendar).era_for(year)

def era_on(d: date, *, calendar: str = "standard") -> EraYear:
    return era_for_date(d, _reg().get(calendar).spec.eras)

def next_sekki(reference: date, name: str, *, calendar: str = "standard") -> SolarTermOccurrence:
    return _reg().get(calendar).next_sekki(reference, name)

# ============================================================
# Month/year-level API
# ============================================================

def month_info(year: int, month: int, *, calendar: str = "standard") -> List[CalendarDayInfo]:
    return _reg().get(calendar).month_info(year, month)

def year_info(year: int, *, calendar: str = "standard") -> Dict[int, List[CalendarDayInfo]]:
    return _reg().get(calendar).year_info(year)

def find_rokuyo_days(year: int, month: int, label: str, *, calendar: str = "standard") -> List[int]:
    return _reg().get(calendar).find_rokuyo_days(year, month, label)
