"""
True new moons from a JPL kernel via skyfield.

Requires optional deps:
  pip install "koyomi[ephemeris]"
The kernel (de421.bsp by default) is downloaded by skyfield on first use.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List

from . import require_ephemeris

JST = timezone(timedelta(hours=9))


def true_new_moons(start: datetime, end: datetime, *, kernel: str = "de421.bsp") -> List[datetime]:
    """Instants of true new moons in [start, end), as naive JST datetimes."""
    require_ephemeris()
    from skyfield import almanac
    from skyfield.api import load

    ts = load.timescale()
    eph = load(kernel)
    t0 = ts.from_datetime(start.replace(tzinfo=JST))
    t1 = ts.from_datetime(end.replace(tzinfo=JST))
    times, phases = almanac.find_discrete(t0, t1, almanac.moon_phases(eph))

    out: List[datetime] = []
    for t, phase in zip(times, phases):
        if int(phase) == 0:
            out.append(t.utc_datetime().astimezone(JST).replace(tzinfo=None))
    return out
