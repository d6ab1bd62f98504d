"""ddate public API.

Discordian calendar dates for anything that looks like a civil date.
Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard attributes on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    as_civil,
    day_info,
    discordian_date,
    list_attributes,
    to_poee,
)
from .attributes.registry import register_attribute
from .core.calendar import convert, holyday
from .core.engine import DateLike, DiscordianMixin, YearDayLike
from .core.errors import DdateError, InvalidInputError
from .core.format import format_date, ordinalize
from .core.time import is_leap_year
from .core.types import CivilDate, DayInfo, DiscordianDate

__all__ = [
    "as_civil",
    "day_info",
    "discordian_date",
    "list_attributes",
    "to_poee",
    "register_attribute",
    "convert",
    "holyday",
    "DateLike",
    "DiscordianMixin",
    "YearDayLike",
    "DdateError",
    "InvalidInputError",
    "format_date",
    "ordinalize",
    "is_leap_year",
    "CivilDate",
    "DayInfo",
    "DiscordianDate",
]
