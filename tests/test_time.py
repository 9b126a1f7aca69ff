# tests/test_time.py

import pytest
import random
from datetime import date

from koyomi.core.errors import InputError
from koyomi.core.time import (
    MAX_YEAR,
    MIN_YEAR,
    check_date,
    check_ymd,
    day_of_year,
    days_in_month,
    from_jdn,
    next_month,
    normalized_date,
    prev_month,
    to_jdn,
)


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(2000):
        jdn_in = random.randint(1721426, 5373484)
        assert to_jdn(from_jdn(jdn_in)) == jdn_in


def test_known_epochs():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert to_jdn(date(2024, 1, 1)) == 2460311


def test_normalized_date():
    assert normalized_date(2023, 2, 30) == date(2023, 3, 2)
    assert normalized_date(2024, 3, 0) == date(2024, 2, 29)
    assert normalized_date(2024, 13, 1) == date(2025, 1, 1)
    assert normalized_date(2024, 0, 28) == date(2023, 12, 28)


@pytest.mark.parametrize("ymd", [(2024, 0, 1), (2024, 13, 1), (2023, 2, 29), (2024, 1, 0), (0, 1, 1)])
def test_check_ymd_rejects(ymd):
    with pytest.raises(InputError):
        check_ymd(*ymd)


def test_month_helpers():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert prev_month(2024, 1) == (2023, 12)
    assert next_month(2024, 12) == (2025, 1)
    assert day_of_year(date(2024, 12, 31)) == 366


def test_supported_year_range():
    assert check_ymd(MIN_YEAR, 1, 1) == date(MIN_YEAR, 1, 1)
    assert check_ymd(MAX_YEAR, 12, 31) == date(MAX_YEAR, 12, 31)
    with pytest.raises(InputError):
        check_ymd(MIN_YEAR - 1, 12, 31)
    with pytest.raises(InputError):
        check_ymd(MAX_YEAR + 1, 1, 1)
    with pytest.raises(InputError):
        check_date(date(9999, 12, 31))
