"""koyomi public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry and standard attributes on import
from . import api_init as _api_init  # noqa: F401
from .attributes import standard as _standard_attributes  # noqa: F401

from .api import (
    day_info,
    lunisolar_date,
    rokuyo,
    holiday,
    holidays_in_year,
    era,
    era_on,
    next_sekki,
    month_info,
    year_info,
    find_rokuyo_days,
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
    list_attributes,
)
from .core.errors import KoyomiError, InputError, NotFoundError
from .core.types import CalendarDayInfo, LunisolarDate

__all__ = [
    "day_info",
    "lunisolar_date",
    "rokuyo",
    "holiday",
    "holidays_in_year",
    "era",
    "era_on",
    "next_sekki",
    "month_info",
    "year_info",
    "find_rokuyo_days",
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "list_attributes",
    "KoyomiError",
    "InputError",
    "NotFoundError",
    "CalendarDayInfo",
    "LunisolarDate",
]
