# tests/test_special_days.py

import pytest
from datetime import date

from koyomi.core.types import LunisolarDate
from koyomi.engines.special_days import (
    BRANCHES,
    STEMS,
    branch_index,
    days_since_1900,
    special_days,
    stem_index,
    zodiac_index,
)

LD = LunisolarDate(1900, 3, 1)


def test_epoch():
    d = date(1900, 1, 1)
    assert days_since_1900(d) == 0
    assert STEMS[stem_index(d)] == "甲"
    assert BRANCHES[branch_index(d)] == "子"


def test_day_2000_01_01():
    d = date(2000, 1, 1)
    assert days_since_1900(d) == 36524
    assert stem_index(d) == 4
    assert branch_index(d) == 8


@pytest.mark.parametrize("day, expected", [(1, True), (2, False), (6, True), (11, True), (16, True), (17, False)])
def test_hitotubu_on_kinoe_and_tsuchinoto(day, expected):
    assert special_days(date(1900, 1, day), LD).hitotubu is expected


@pytest.mark.parametrize("month, expected", [(5, True), (9, True), (1, True), (6, False), (12, False)])
def test_tensyabi(month, expected):
    # 1900-01-08 is a 辛 day
    d = date(1900, 1, 8)
    assert STEMS[stem_index(d)] == "辛"
    assert special_days(d, LunisolarDate(1900, month, 1)).tensyabi is expected


def test_tensyabi_needs_kanoto():
    assert special_days(date(1900, 1, 9), LunisolarDate(1900, 5, 1)).tensyabi is False


def test_daimyoubi_sunday_and_thursday():
    assert special_days(date(1900, 1, 4), LD).daimyoubi is True   # Thursday
    assert special_days(date(1900, 1, 7), LD).daimyoubi is True   # Sunday
    assert special_days(date(1900, 1, 1), LD).daimyoubi is False  # Monday
    assert special_days(date(2024, 1, 6), LD).daimyoubi is False  # Saturday


def test_zodiac():
    assert BRANCHES[zodiac_index(2020)] == "子"
    assert BRANCHES[zodiac_index(2024)] == "辰"
    assert BRANCHES[zodiac_index(1900)] == "子"
