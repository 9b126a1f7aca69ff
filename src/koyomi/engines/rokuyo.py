from __future__ import annotations

from typing import Dict, Tuple

from koyomi.core.errors import NotFoundError
from koyomi.core.types import LunisolarDate, RokuyoLabel

# Indexed by (lunar month + lunar day) % 6
ROKUYO: Tuple[RokuyoLabel, ...] = ("大安", "赤口", "先勝", "友引", "先負", "仏滅")

ROKUYO_READINGS: Dict[RokuyoLabel, str] = {
    "大安": "taian",
    "赤口": "shakku",
    "先勝": "sensho",
    "友引": "tomobiki",
    "先負": "senbu",
    "仏滅": "butsumetsu",
}


def rokuyo_index(month: int, day: int) -> int:
    return (month + day) % 6


def rokuyo_for(ld: LunisolarDate) -> RokuyoLabel:
    return ROKUYO[rokuyo_index(ld.month, ld.day)]


def check_rokuyo(label: str) -> RokuyoLabel:
    if label not in ROKUYO:
        raise NotFoundError(f"Unknown rokuyo '{label}'. Available: {list(ROKUYO)}")
    return label  # type: ignore[return-value]
