# tests/test_diagnostics.py

from datetime import date

import pytest

from koyomi.diagnostics.holiday_diff import diff_holidays
from koyomi.diagnostics.pretty_month import month_cells
from koyomi.diagnostics.sekki_drift import day_offsets, quarter_point_jde, reference_day


def test_meeus_epoch_value():
    assert quarter_point_jde(2000, "spring") == pytest.approx(2451623.80984)


def test_reference_day_2024():
    assert reference_day(2024, "spring") == 20
    assert day_offsets([2024], "spring") == [0]


def test_diff_holidays():
    ours = [(date(2024, 1, 1), "元日"), (date(2024, 2, 12), "振替休日")]
    theirs = [(date(2024, 1, 1), "元日"), (date(2024, 2, 11), "建国記念の日")]
    rows = diff_holidays(ours, theirs)
    assert rows == [
        (date(2024, 2, 11), None, "建国記念の日"),
        (date(2024, 2, 12), "振替休日", None),
    ]


def test_month_cells_shape():
    weeks = month_cells("standard", 2024, 1)
    assert all(len(wk) == 7 for wk in weeks)
    # 2024-01-01 is a Monday
    assert weeks[0][0][0].strip() == "1*"
