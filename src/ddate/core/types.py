from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import SEASON_DAYS, SEASONS, WEEKDAYS, WEEK_DAYS
from .engine import DateLike, DiscordianMixin
from .errors import InvalidInputError
from .time import is_leap_year, ordinal_day, ymd_from_ordinal

@dataclass(frozen=True)
class CivilDate(DiscordianMixin):
    year: int
    day_of_year: int
    is_leap: bool

    @classmethod
    def of(cls, year: int, day_of_year: int) -> "CivilDate":
        return cls(year, day_of_year, is_leap_year(year))

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "CivilDate":
        return cls(year, ordinal_day(year, month, day), is_leap_year(year))

    @classmethod
    def from_date(cls, d: DateLike) -> "CivilDate":
        return cls.from_ymd(d.year, d.month, d.day)

    def to_ymd(self) -> Tuple[int, int, int]:
        return ymd_from_ordinal(self.year, self.day_of_year)

@dataclass(frozen=True)
class DiscordianDate:
    yold: int
    season: Optional[int]         # 0..4, None on St. Tib's Day
    day_of_season: Optional[int]  # 1..73, None on St. Tib's Day
    is_st_tibs_day: bool = False

    def __post_init__(self) -> None:
        if self.is_st_tibs_day:
            if self.season is not None or self.day_of_season is not None:
                raise InvalidInputError("St. Tib's Day has no season or day_of_season")
            return
        if self.season is None or self.day_of_season is None:
            raise InvalidInputError("season and day_of_season are required except on St. Tib's Day")
        if not 0 <= self.season < len(SEASONS):
            raise InvalidInputError(f"season {self.season} outside 0..{len(SEASONS) - 1}")
        if not 1 <= self.day_of_season <= SEASON_DAYS:
            raise InvalidInputError(f"day_of_season {self.day_of_season} outside 1..{SEASON_DAYS}")

    @property
    def day_of_year(self) -> int:
        """Leap-adjusted day count 1..365 (0 on St. Tib's Day); drives the weekday."""
        if self.is_st_tibs_day:
            return 0
        return self.season * SEASON_DAYS + self.day_of_season

    @property
    def season_name(self) -> Optional[str]:
        return None if self.season is None else SEASONS[self.season]

    @property
    def weekday(self) -> Optional[int]:
        if self.is_st_tibs_day:
            return None
        return (self.day_of_year - 1) % WEEK_DAYS

    @property
    def weekday_name(self) -> Optional[str]:
        wd = self.weekday
        return None if wd is None else WEEKDAYS[wd]

    def __str__(self) -> str:
        from .format import format_date
        return format_date(self)

@dataclass(frozen=True)
class DayInfo:
    civil: CivilDate
    discordian: DiscordianDate
    holyday: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
