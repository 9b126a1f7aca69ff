from __future__ import annotations

from datetime import date
from typing import Sequence

from koyomi.core.types import Era, EraYear

# Non-overlapping by year; a transition year belongs to the new era.
ERAS = (
    Era("明治", 1868, 1911, date(1868, 1, 25)),
    Era("大正", 1912, 1925, date(1912, 7, 30)),
    Era("昭和", 1926, 1988, date(1926, 12, 25)),
    Era("平成", 1989, 2018, date(1989, 1, 8)),
    Era("令和", 2019, 2100, date(2019, 5, 1)),  # end year is a placeholder
)


def era_for(year: int, table: Sequence[Era] = ERAS) -> EraYear:
    """
    Era name and era-relative year of a Gregorian year.

    Years outside the table fall back to the last era, counted from its
    start year (so 1800 gives a negative 令和 year). Never raises.
    """
    for era in table:
        if era.start_year <= year <= era.end_year:
            return EraYear(era.name, year - era.start_year + 1)
    last = table[-1]
    return EraYear(last.name, year - last.start_year + 1)


def era_for_date(d: date, table: Sequence[Era] = ERAS) -> EraYear:
    """Like era_for, but switching eras on the accession day itself."""
    for era in reversed(table):
        if d >= era.start:
            return EraYear(era.name, d.year - era.start_year + 1)
    last = table[-1]
    return EraYear(last.name, d.year - last.start_year + 1)


def format_wareki(ey: EraYear, *, gannen: bool = False) -> str:
    if gannen and ey.year == 1:
        return f"{ey.name}元年"
    return f"{ey.name}{ey.year}年"
