# tests/test_holidays.py

import calendar as pycal
import pytest
from datetime import date

from koyomi.core.errors import InputError
from koyomi.engines.holidays import HolidayResolver
from koyomi.engines.specs import (
    AUTUMN_EQUINOX_DAY,
    CITIZENS_HOLIDAY,
    FIXED_HOLIDAYS,
    MONDAY_HOLIDAYS,
    SPRING_EQUINOX_DAY,
)

MON, TUE, WED, THU, FRI, SAT, SUN = range(7)


def make_resolver(fixed=FIXED_HOLIDAYS, mondays=MONDAY_HOLIDAYS) -> HolidayResolver:
    return HolidayResolver(
        fixed,
        mondays,
        spring_equinox=SPRING_EQUINOX_DAY,
        autumn_equinox=AUTUMN_EQUINOX_DAY,
        citizens=CITIZENS_HOLIDAY,
    )


@pytest.fixture
def hol():
    return make_resolver()


def test_weekday_convention_matches_datetime():
    assert pycal.MONDAY == MON == date(2024, 1, 1).weekday()


def test_fixed_holidays(hol):
    assert hol.holiday_for(2024, 1, 1, MON) == "元日"
    assert hol.holiday_for(2024, 5, 5, SUN) == "こどもの日"
    assert hol.holiday_for(2024, 11, 23, SAT) == "勤労感謝の日"


def test_coming_of_age_day_is_second_monday(hol):
    assert hol.holiday_for(2024, 1, 8, MON) == "成人の日"
    assert hol.holiday_for(2024, 1, 15, MON) != "成人の日"
    assert hol.holiday_for(2024, 1, 15, MON) is None


@pytest.mark.parametrize(
    "ymd, name",
    [
        ((2024, 7, 15), "海の日"),
        ((2024, 9, 16), "敬老の日"),
        ((2024, 10, 14), "スポーツの日"),
    ],
)
def test_floating_mondays(hol, ymd, name):
    assert hol.holiday_for(*ymd, MON) == name


def test_floating_needs_a_monday(hol):
    assert hol.holiday_for(2024, 7, 16, TUE) is None


def test_equinox_days(hol):
    assert hol.holiday_for(2024, 3, 20, WED) == "春分の日"
    assert hol.holiday_for(2024, 9, 22, SUN) == "秋分の日"
    assert hol.holiday_for(2025, 9, 23, TUE) == "秋分の日"
    assert hol.holiday_for(2024, 3, 21, THU) is None


def test_may_2025(hol):
    # 5/4 falls on a Sunday and the following Monday is already a named holiday
    assert hol.holiday_for(2025, 5, 3, SAT) == "憲法記念日"
    assert hol.holiday_for(2025, 5, 4, SUN) == "みどりの日"
    assert hol.holiday_for(2025, 5, 5, MON) == "こどもの日"


def test_no_substitute_holiday_transfer(hol):
    # Known approximation: a Sunday holiday does not move to Monday.
    assert hol.holiday_for(2024, 9, 23, MON) is None
    assert hol.holiday_for(2025, 5, 6, TUE) is None


def test_citizens_holiday_between_two_fixed_days():
    fixed = {k: v for k, v in FIXED_HOLIDAYS.items() if k != (5, 4)}
    hol = make_resolver(fixed=fixed)
    # 2026-05-04 is a Monday between 憲法記念日 and こどもの日
    assert date(2026, 5, 4).weekday() == MON
    assert hol.holiday_for(2026, 5, 4, MON) == "国民の休日"
    assert make_resolver().holiday_for(2026, 5, 4, MON) == "みどりの日"


def test_citizens_holiday_next_to_equinox():
    # 2016-03-20 (Sun) is the formula's spring equinox
    hol = make_resolver(fixed={(3, 22): "テスト記念日"})
    assert date(2016, 3, 21).weekday() == MON
    assert hol.holiday_for(2016, 3, 21, MON) == "国民の休日"
    assert make_resolver().holiday_for(2016, 3, 21, MON) is None


def test_citizens_holiday_only_on_mondays():
    # 2021-05-04 sits between 5/3 and 5/5 but is a Tuesday
    fixed = {k: v for k, v in FIXED_HOLIDAYS.items() if k != (5, 4)}
    hol = make_resolver(fixed=fixed)
    assert date(2021, 5, 4).weekday() == TUE
    assert hol.holiday_for(2021, 5, 4, TUE) is None


def test_result_is_memoized(hol):
    assert hol.holiday_for(2024, 1, 8, MON) == "成人の日"
    assert (2024, 1, 8) in hol._cache
    # once resolved, the cached value wins
    assert hol.holiday_for(2024, 1, 8, TUE) == "成人の日"


@pytest.mark.parametrize(
    "args",
    [
        (2024, 13, 1, MON),
        (2024, 0, 1, MON),
        (2024, 4, 31, MON),
        (2024, 1, 1, 7),
        (2024, 1, 1, -1),
    ],
)
def test_malformed_input(hol, args):
    with pytest.raises(InputError):
        hol.holiday_for(*args)


def test_holidays_in_year_2024(hol):
    rows = hol.holidays_in_year(2024)
    assert rows[0] == (date(2024, 1, 1), "元日")
    assert len(rows) == 16
    assert (date(2024, 3, 20), "春分の日") in rows
    assert [d for d, _ in rows] == sorted(d for d, _ in rows)


def test_weekday_validated_after_cached_lookup(hol):
    assert hol.holiday_for(2024, 1, 1, MON) == "元日"
    with pytest.raises(InputError):
        hol.holiday_for(2024, 1, 1, 9)


def test_year_outside_supported_range(hol):
    with pytest.raises(InputError):
        hol.holiday_for(9999, 1, 1, pycal.FRIDAY)
    with pytest.raises(InputError):
        hol.holidays_in_year(1500)
