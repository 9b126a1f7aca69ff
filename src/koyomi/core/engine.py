from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Protocol

from .types import CalendarDayInfo, CalendarSpec, LunisolarDate, SolarTermOccurrence, EraYear

class CalendarEngine(Protocol):
    spec: CalendarSpec
    holidays: Any

    def info(self) -> Dict[str, Any]: ...
    def info_for(self, d: date) -> CalendarDayInfo: ...
    def month_info(self, year: int, month: int) -> List[CalendarDayInfo]: ...
    def year_info(self, year: int) -> Dict[int, List[CalendarDayInfo]]: ...
    def find_rokuyo_days(self, year: int, month: int, label: str) -> List[int]: ...
    def next_sekki(self, reference: date, name: str) -> SolarTermOccurrence: ...
    def holiday_for(self, year: int, month: int, day: int, weekday: int) -> Optional[str]: ...
    def to_lunisolar(self, d: date) -> LunisolarDate: ...
    def era_for(self, year: int) -> EraYear: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
