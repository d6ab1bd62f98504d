from __future__ import annotations
from typing import Optional

from .constants import (
    APOSTLE_HOLYDAY,
    APOSTLES,
    CURSE_OF_GREYFACE,
    SEASON_DAYS,
    SEASON_HOLYDAY,
    SEASON_HOLYDAYS,
    ST_TIBS_DAY,
)
from .engine import YearDayLike
from .errors import InvalidInputError
from .types import DiscordianDate


def convert(civil: YearDayLike) -> DiscordianDate:
    """
    Map a civil (year, day-of-year, leap flag) triple to its Discordian date.

    Leap-year day 60 (Feb 29) is St. Tib's Day and belongs to no season; later
    leap-year days are shifted down by one so every season keeps 73 days.
    """
    doy = civil.day_of_year
    leap = bool(civil.is_leap)
    upper = 366 if leap else 365
    if not 1 <= doy <= upper:
        kind = "leap" if leap else "common"
        raise InvalidInputError(
            f"day_of_year {doy} outside 1..{upper} for {kind} year {civil.year}"
        )

    yold = civil.year + CURSE_OF_GREYFACE
    if leap and doy == ST_TIBS_DAY:
        return DiscordianDate(yold=yold, season=None, day_of_season=None, is_st_tibs_day=True)

    n = doy - 1 if leap and doy > ST_TIBS_DAY else doy
    return DiscordianDate(
        yold=yold,
        season=(n - 1) // SEASON_DAYS,
        day_of_season=(n - 1) % SEASON_DAYS + 1,
    )


def holyday_kind(dd: DiscordianDate) -> Optional[str]:
    if dd.is_st_tibs_day:
        return None
    if dd.day_of_season == APOSTLE_HOLYDAY:
        return "apostle"
    if dd.day_of_season == SEASON_HOLYDAY:
        return "season"
    return None


def holyday(dd: DiscordianDate) -> Optional[str]:
    """Name of the holyday falling on dd, if any."""
    kind = holyday_kind(dd)
    if kind == "apostle":
        return APOSTLES[dd.season]
    if kind == "season":
        return SEASON_HOLYDAYS[dd.season]
    return None


def civil_day_of_year(season: int, day_of_season: int, *, leap: bool) -> int:
    """Civil day-of-year of a seasonal day (used by the diagnostics grids)."""
    n = season * SEASON_DAYS + day_of_season
    if leap and n >= ST_TIBS_DAY:
        n += 1
    return n
