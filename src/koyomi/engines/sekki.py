"""
koyomi.engines.sekki
--------------------
Solar-term (sekki) lookup over the per-year tables of
koyomi.engines.astronomy.solar_term_dates.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional

from koyomi.core.errors import NotFoundError
from koyomi.core.time import check_date
from koyomi.core.types import SolarTermDate, SolarTermOccurrence
from koyomi.engines.astronomy import SOLAR_TERM_NAMES, solar_term_dates

LOGGER = logging.getLogger(__name__)


class SekkiLookup:
    def __init__(self):
        self._tables: Dict[int, Dict[str, SolarTermDate]] = {}

    def table(self, year: int) -> Dict[str, SolarTermDate]:
        tab = self._tables.get(year)
        if tab is None:
            LOGGER.debug("building solar term table for %d", year)
            tab = solar_term_dates(year)
            self._tables[year] = tab
        return tab

    def sekki_for(self, d: date) -> Optional[str]:
        for name, td in self.table(d.year).items():
            if td.month == d.month and td.day == d.day:
                return name
        return None

    def next_occurrence(self, reference: date, name: str) -> SolarTermOccurrence:
        """Soonest date of term `name` on or after `reference`."""
        if name not in SOLAR_TERM_NAMES:
            raise NotFoundError(f"Unknown solar term '{name}'. Available: {list(SOLAR_TERM_NAMES)}")
        check_date(reference)

        this_year = self.table(reference.year)[name].in_year(reference.year)
        if this_year >= reference:
            return SolarTermOccurrence(date=this_year, name=name)

        y = reference.year + 1
        return SolarTermOccurrence(date=self.table(y)[name].in_year(y), name=name)
