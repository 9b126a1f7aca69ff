"""
koyomi.engines.factory
----------------------
Transforms CalendarSpec data into live, executable calendar objects.
"""

from __future__ import annotations
from koyomi.core.types import CalendarSpec
from koyomi.engines.calendar import JapaneseCalendar


def make_calendar(spec: CalendarSpec) -> JapaneseCalendar:
    """The universal entry point."""
    if not isinstance(spec, CalendarSpec):
        raise TypeError(f"Unknown spec type: {type(spec)}")
    if not spec.eras:
        raise ValueError("spec.eras must contain at least one era")
    if spec.synodic_month <= 0:
        raise ValueError("spec.synodic_month must be positive")
    return JapaneseCalendar(spec)
