from __future__ import annotations

from .types import DiscordianDate


def ordinalize(num: int) -> str:
    """1 -> '1st', 12 -> '12th', 23 -> '23rd'."""
    if 10 <= num % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(num % 10, "th")
    return f"{num}{suffix}"


def format_date(dd: DiscordianDate, *, celebrate: bool = False) -> str:
    if dd.is_st_tibs_day:
        return f"St. Tib's Day, the YOLD {dd.yold}"

    text = (
        f"{dd.weekday_name}, the {ordinalize(dd.day_of_season)} day of "
        f"{dd.season_name} in the YOLD {dd.yold}"
    )
    if celebrate:
        from .calendar import holyday
        name = holyday(dd)
        if name is not None:
            text += f"\nCelebrate {name}"
    return text
