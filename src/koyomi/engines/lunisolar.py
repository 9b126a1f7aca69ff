"""
koyomi.engines.lunisolar
------------------------
Approximate kyūreki (old calendar) dates from mean new moons.

A lunisolar month starts on the calendar date of a mean new moon and is
labelled with the Gregorian year/month in which that new moon falls. There
is no leap-month insertion and no winter-solstice year start, so the labels
drift from the authentic calendar by up to a month.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Tuple

from koyomi.core.time import check_date, next_month, prev_month
from koyomi.core.types import LunisolarDate, NewMoonEvent
from koyomi.engines.astronomy import REFERENCE_NEW_MOON, SYNODIC_MONTH, nearest_preceding_new_moon

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthAnchors:
    """New moons bracketing one Gregorian month."""
    previous: NewMoonEvent  # preceding the 28th of the previous month
    current: NewMoonEvent   # preceding the 1st of this month
    next: NewMoonEvent      # preceding the 1st of next month, i.e. the last one inside this month
    # every new moon dated inside this month, oldest first; a 31-day month can hold two
    inside: Tuple[NewMoonEvent, ...] = ()

    def governing(self, d: date) -> NewMoonEvent:
        """Latest anchor whose calendar date is on or before d."""
        for anchor in (*reversed(self.inside), self.current, self.previous):
            if anchor.day <= d:
                return anchor
        return self.previous


class LunisolarConverter:
    """Gregorian -> approximate lunisolar date, with per-month anchor cache."""

    def __init__(
        self,
        *,
        reference: datetime = REFERENCE_NEW_MOON,
        synodic_month: float = SYNODIC_MONTH,
    ):
        self.reference = reference
        self.synodic_month = synodic_month
        self._anchors: Dict[Tuple[int, int], MonthAnchors] = {}

    def _new_moon(self, year: int, month: int, day: int) -> NewMoonEvent:
        return nearest_preceding_new_moon(
            year, month, day, reference=self.reference, synodic_month=self.synodic_month
        )

    def anchors(self, year: int, month: int) -> MonthAnchors:
        key = (year, month)
        cached = self._anchors.get(key)
        if cached is not None:
            return cached

        py, pm = prev_month(year, month)
        ny, nm = next_month(year, month)
        current = self._new_moon(year, month, 1)
        nxt = self._new_moon(ny, nm, 1)

        inside = []
        ev = current
        while ev.day < nxt.day:
            # probing the day after a new moon returns that new moon
            after = ev.next_day
            ev = self._new_moon(after.year, after.month, after.day + 1)
            inside.append(ev)

        anchors = MonthAnchors(
            previous=self._new_moon(py, pm, 28),
            current=current,
            next=nxt,
            inside=tuple(inside),
        )
        LOGGER.debug("new moon anchors %04d-%02d: %s / %s / %s", year, month,
                     anchors.previous.day, anchors.current.day, anchors.next.day)
        self._anchors[key] = anchors
        return anchors

    def mean_new_moon(self, d: date) -> NewMoonEvent:
        """Mean new moon at or before the midnight that starts d."""
        return self._new_moon(d.year, d.month, d.day)

    def governing_new_moon(self, d: date) -> NewMoonEvent:
        return self.anchors(d.year, d.month).governing(d)

    def to_lunisolar(self, d: date) -> LunisolarDate:
        check_date(d)
        anchor = self.governing_new_moon(d)
        nm = anchor.day
        return LunisolarDate(year=nm.year, month=nm.month, day=(d - nm).days + 1)
