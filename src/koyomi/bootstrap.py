from __future__ import annotations
from koyomi.core.engine import EngineRegistry
from koyomi.engines.specs import ALL_SPECS
from koyomi.engines.factory import make_calendar

def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_calendar(spec)
    return EngineRegistry(engines)
