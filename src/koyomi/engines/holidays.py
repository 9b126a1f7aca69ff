"""
koyomi.engines.holidays
-----------------------
National holidays: fixed dates, "nth Monday" holidays, the two equinox
days and the citizens' holiday (国民の休日).

The citizens' holiday is only tested on Mondays, and a holiday falling on a
Sunday does not move to the next day. Both are approximations of the
Holiday Act that callers relying on exact closures should keep in mind.
"""

from __future__ import annotations

import calendar as pycal
import logging
from datetime import date, timedelta
from typing import Dict, List, Mapping, Optional, Tuple

from koyomi.core.errors import InputError
from koyomi.core.time import check_ymd
from koyomi.engines.astronomy import equinox_day

LOGGER = logging.getLogger(__name__)


class HolidayResolver:
    def __init__(
        self,
        fixed: Mapping[Tuple[int, int], str],
        mondays: Mapping[Tuple[int, int], str],
        *,
        spring_equinox: str,
        autumn_equinox: str,
        citizens: str,
    ):
        self.fixed = dict(fixed)
        self.mondays = dict(mondays)
        self.spring_equinox = spring_equinox
        self.autumn_equinox = autumn_equinox
        self.citizens = citizens
        self._cache: Dict[Tuple[int, int, int], Optional[str]] = {}

    # ---------------------------------------------------------
    # Building blocks
    # ---------------------------------------------------------

    def _fixed(self, month: int, day: int) -> Optional[str]:
        return self.fixed.get((month, day))

    def _monday(self, month: int, day: int, weekday: int) -> Optional[str]:
        if weekday != pycal.MONDAY:
            return None
        for (m, week), name in self.mondays.items():
            if m == month and (week - 1) * 7 < day <= week * 7:
                return name
        return None

    def _equinox(self, year: int, month: int, day: int) -> Optional[str]:
        # Evaluated afresh on every call; nothing is shared with the sekki tables.
        if month == 3 and day == equinox_day(year, "spring"):
            return self.spring_equinox
        if month == 9 and day == equinox_day(year, "autumn"):
            return self.autumn_equinox
        return None

    def _is_bridge_end(self, year: int, d: date) -> bool:
        """Neighbour test of the citizens' holiday: fixed holiday or equinox day."""
        if self._fixed(d.month, d.day) is not None:
            return True
        return self._equinox(year, d.month, d.day) is not None

    # ---------------------------------------------------------
    # Public
    # ---------------------------------------------------------

    def holiday_for(self, year: int, month: int, day: int, weekday: int) -> Optional[str]:
        """
        Holiday name of a date, or None. `weekday` uses date.weekday() numbering
        (Monday=0).
        """
        d = check_ymd(year, month, day)
        if not 0 <= weekday <= 6:
            raise InputError(f"weekday must be in 0..6, got {weekday}")

        key = (year, month, day)
        if key in self._cache:
            return self._cache[key]

        name = self._fixed(month, day)
        if name is None:
            name = self._monday(month, day, weekday)
        if name is None:
            name = self._equinox(year, month, day)

        if name is None and weekday == pycal.MONDAY:
            yesterday = d - timedelta(days=1)
            tomorrow = d + timedelta(days=1)
            if self._is_bridge_end(year, yesterday) and self._is_bridge_end(year, tomorrow):
                name = self.citizens

        self._cache[key] = name
        return name

    def holiday_on(self, d: date) -> Optional[str]:
        return self.holiday_for(d.year, d.month, d.day, d.weekday())

    def holidays_in_year(self, year: int) -> List[Tuple[date, str]]:
        out: List[Tuple[date, str]] = []
        d = date(year, 1, 1)
        while d.year == year:
            name = self.holiday_on(d)
            if name is not None:
                out.append((d, name))
            d += timedelta(days=1)
        LOGGER.debug("%d holidays resolved for %d", len(out), year)
        return out
