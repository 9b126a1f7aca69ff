# tests/test_calendar.py

import pytest
from datetime import date

from koyomi.core.errors import InputError, NotFoundError
from koyomi.core.types import LunisolarDate
from koyomi.engines.factory import make_calendar
from koyomi.engines.rokuyo import ROKUYO
from koyomi.engines.specs import STANDARD


@pytest.fixture
def cal():
    return make_calendar(STANDARD)


def test_new_years_day_2024(cal):
    info = cal.info_for(date(2024, 1, 1))
    assert info.weekday == "月"
    assert (info.era, info.era_year) == ("令和", 6)
    assert info.zodiac == "辰"
    assert info.holiday == "元日"
    assert info.lunisolar == LunisolarDate(2023, 12, 21)
    assert info.lunar_month_name == "師走"
    assert info.rokuyo == "友引"
    assert (info.stem, info.branch) == ("甲", "寅")
    assert info.sekki == ""
    assert info.hitotubu is True
    assert info.tensyabi is False
    assert info.daimyoubi is False


def test_empty_strings_for_absent_values(cal):
    info = cal.info_for(date(2024, 1, 2))
    assert info.holiday == ""
    assert info.sekki == ""


def test_sekki_and_holiday_on_equinox(cal):
    info = cal.info_for(date(2024, 3, 20))
    assert info.sekki == "春分"
    assert info.holiday == "春分の日"


def test_info_for_is_idempotent(cal):
    d = date(2024, 5, 5)
    a = cal.info_for(d)
    b = cal.info_for(d)
    assert a == b
    assert a.to_dict() == b.to_dict()


def test_to_dict_shape(cal):
    rec = cal.info_for(date(2024, 1, 1)).to_dict()
    assert set(rec) == {
        "week", "inreki", "gengo", "wareki", "zyusi", "zyunisi", "eto", "sekki",
        "kyurekiy", "kyurekim", "kyurekid", "rokuyou", "holiday",
        "hitotubuflg", "tensyabiflg", "daimyoubiflg",
    }
    assert rec["kyurekid"] == 21
    assert rec["gengo"] == "令和"
    assert rec["wareki"] == 6


def test_month_info(cal):
    rows = cal.month_info(2024, 2)
    assert len(rows) == 29
    assert [r.civil_date.day for r in rows] == list(range(1, 30))


def test_year_info_has_24_solar_terms(cal):
    for year in (2024, 2025):
        yi = cal.year_info(year)
        assert sorted(yi) == list(range(1, 13))
        days = [r for rows in yi.values() for r in rows]
        assert len(days) == (366 if year == 2024 else 365)
        assert sum(1 for r in days if r.sekki) == 24


def test_find_rokuyo_days(cal):
    assert 15 in cal.find_rokuyo_days(2024, 1, "赤口")

    seen = []
    for label in ROKUYO:
        days = cal.find_rokuyo_days(2024, 1, label)
        for d in days:
            assert cal.info_for(date(2024, 1, d)).rokuyo == label
        seen.extend(days)
    assert sorted(seen) == list(range(1, 32))


def test_find_rokuyo_days_unknown_label(cal):
    with pytest.raises(NotFoundError):
        cal.find_rokuyo_days(2024, 1, "吉日")


def test_next_sekki(cal):
    occ = cal.next_sekki(date(2024, 1, 1), "立春")
    assert occ.date == date(2024, 2, 5)


def test_info_describes_spec(cal):
    info = cal.info()
    assert info["id"]["name"] == "standard"
    assert info["eras"][-1] == "令和"


@pytest.mark.parametrize("d", [date(1600, 1, 1), date(2900, 12, 31)])
def test_edge_of_supported_range(cal, d):
    info = cal.info_for(d)
    assert 1 <= info.lunisolar.day <= 30
    assert len(cal.month_info(d.year, d.month)) == 31


@pytest.mark.parametrize("d", [date(1, 1, 1), date(1599, 12, 31), date(2901, 1, 1), date(9999, 12, 1)])
def test_outside_supported_range(cal, d):
    with pytest.raises(InputError):
        cal.info_for(d)
    with pytest.raises(InputError):
        cal.to_lunisolar(d)
    with pytest.raises(InputError):
        cal.month_info(d.year, d.month)


def test_next_sekki_range(cal):
    # rolls over into 2901, whose 大暑 is shifted to July 30
    assert cal.next_sekki(date(2900, 12, 31), "大暑").date == date(2901, 7, 30)
    with pytest.raises(InputError):
        cal.next_sekki(date(3100, 1, 1), "大暑")
