from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Sequence, Union

from .attributes.registry import compute_attributes, list_attributes as _list_attributes
from .core.calendar import convert, holyday
from .core.engine import DateLike, YearDayLike
from .core.format import format_date
from .core.types import CivilDate, DayInfo, DiscordianDate

DateInput = Union[CivilDate, YearDayLike, DateLike]

def as_civil(d: Any) -> CivilDate:
    """Normalize a CivilDate, a year/day_of_year/is_leap object or a date-like value."""
    if isinstance(d, CivilDate):
        return d
    if isinstance(d, YearDayLike):
        return CivilDate(d.year, d.day_of_year, bool(d.is_leap))
    if isinstance(d, DateLike):
        return CivilDate.from_date(d)
    raise TypeError(
        f"Expected a date-like value (year/month/day or year/day_of_year/is_leap), "
        f"got {type(d).__name__}"
    )

def discordian_date(d: DateInput) -> DiscordianDate:
    return convert(as_civil(d))

def to_poee(d: DateInput, *, celebrate: bool = False) -> str:
    """Canonical Discordian string for a civil date."""
    return format_date(discordian_date(d), celebrate=celebrate)

def day_info(d: DateInput, *, attributes: Sequence[str] = ()) -> DayInfo:
    civil = as_civil(d)
    dd = convert(civil)
    info = DayInfo(civil=civil, discordian=dd, holyday=holyday(dd))
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def list_attributes() -> List[str]:
    return _list_attributes()
