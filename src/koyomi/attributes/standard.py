from __future__ import annotations
from datetime import datetime
from typing import Any, Dict

from ..core.time import day_of_year, days_between
from ..engines.astronomy import nearest_preceding_new_moon
from ..engines.rokuyo import ROKUYO_READINGS
from .registry import register_attribute, jdn

def julian_day(info) -> Dict[str, Any]:
    return {"jdn": jdn(info)}

def moon_age(info) -> Dict[str, Any]:
    # Age at local noon, measured from the mean new moon preceding that day.
    d = info.civil_date
    nm = info.mean_new_moon
    if nm is None:
        nm = nearest_preceding_new_moon(d.year, d.month, d.day).date
    noon = datetime(d.year, d.month, d.day, 12)
    return {"moon_age": round(days_between(nm, noon), 2)}

def doy(info) -> Dict[str, Any]:
    return {"day_of_year": day_of_year(info.civil_date)}

def rokuyo_reading(info) -> Dict[str, Any]:
    return {"rokuyo_reading": ROKUYO_READINGS[info.rokuyo]}

register_attribute("jdn", julian_day)
register_attribute("moon_age", moon_age)
register_attribute("day_of_year", doy)
register_attribute("rokuyo_reading", rokuyo_reading)
