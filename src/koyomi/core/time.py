from __future__ import annotations
import calendar as pycal
from datetime import date, datetime, timedelta

from .errors import InputError

SECONDS_PER_DAY = 86400.0

# Years for which the linear new-moon and solar-term approximations still land
# on real calendar dates (including the neighbouring months the converter probes
# and the next-year rollover of solar-term lookups).
MIN_YEAR = 1600
MAX_YEAR = 2900


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)


def check_date(d: date) -> date:
    return check_ymd(d.year, d.month, d.day)


def check_ymd(year: int, month: int, day: int) -> date:
    """Build a date from components, failing fast on anything out of range."""
    if not 1 <= month <= 12:
        raise InputError(f"month must be in 1..12, got {month}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InputError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
    last = pycal.monthrange(year, month)[1]
    if not 1 <= day <= last:
        raise InputError(f"day must be in 1..{last} for {year}-{month:02d}, got {day}")
    return date(year, month, day)


def check_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise InputError(f"month must be in 1..12, got {month}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InputError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")


def normalized_date(year: int, month: int, day: int) -> date:
    """
    Overflow-tolerant date construction.

    Month overflow rolls the year, day overflow rolls into the adjacent
    month: normalized_date(2023, 2, 30) == date(2023, 3, 2),
    normalized_date(2024, 13, 1) == date(2025, 1, 1),
    normalized_date(2024, 3, 0) == date(2024, 2, 29).
    """
    y = year + (month - 1) // 12
    m = (month - 1) % 12 + 1
    return date(y, m, 1) + timedelta(days=day - 1)


def midnight(d: date) -> datetime:
    return datetime(d.year, d.month, d.day)


def days_between(start: datetime, end: datetime) -> float:
    """Signed real number of days from start to end."""
    return (end - start).total_seconds() / SECONDS_PER_DAY


def days_in_month(year: int, month: int) -> int:
    check_month(year, month)
    return pycal.monthrange(year, month)[1]


def month_dates(year: int, month: int) -> list[date]:
    n = days_in_month(year, month)
    return [date(year, month, d) for d in range(1, n + 1)]


def prev_month(year: int, month: int) -> tuple[int, int]:
    return (year - 1, 12) if month == 1 else (year, month - 1)


def next_month(year: int, month: int) -> tuple[int, int]:
    return (year + 1, 1) if month == 12 else (year, month + 1)


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1
