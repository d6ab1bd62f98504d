from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .types import DiscordianDate


@runtime_checkable
class YearDayLike(Protocol):
    """Minimal capability needed for a conversion: year, ordinal day and leap flag."""
    @property
    def year(self) -> int: ...
    @property
    def day_of_year(self) -> int: ...
    @property
    def is_leap(self) -> bool: ...


@runtime_checkable
class DateLike(Protocol):
    """Anything shaped like datetime.date."""
    @property
    def year(self) -> int: ...
    @property
    def month(self) -> int: ...
    @property
    def day(self) -> int: ...


class DiscordianMixin:
    """
    Adds Discordian accessors to any class exposing year, day_of_year and is_leap.

    The host class is not subclassed from anything else; the mixin only reads
    those three attributes.
    """

    def discordian(self) -> "DiscordianDate":
        from .calendar import convert
        return convert(self)

    def to_poee(self, *, celebrate: bool = False) -> str:
        from .format import format_date
        return format_date(self.discordian(), celebrate=celebrate)
