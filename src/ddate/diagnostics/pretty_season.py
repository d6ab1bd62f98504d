from __future__ import annotations

from datetime import date
import argparse
from typing import List, Optional, Tuple

import ddate
from ddate.core.calendar import civil_day_of_year
from ddate.core.constants import SEASON_DAYS, SEASONS, ST_TIBS_DAY, WEEKDAYS, WEEK_DAYS
from ddate.core.time import is_leap_year, ymd_from_ordinal


def dow_header(w: int = 6) -> str:
    # Setting Orange and Prickle-Prickle do not fit; abbreviate all names alike.
    return " ".join(name[:w].ljust(w) for name in WEEKDAYS)


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: List[List[Tuple[str, str]]], footer: Optional[str] = None) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk).rstrip())
        print(" ".join(c[1] for c in wk).rstrip())
    if footer:
        print(footer)
    print()


def season_weeks(year: int, season: int) -> List[List[Tuple[str, str]]]:
    """Rows of 5-day weeks; each cell shows day-of-season over civil MM-DD."""
    leap = is_leap_year(year)
    weeks: List[List[Tuple[str, str]]] = []
    wk: List[Tuple[str, str]] = []

    first = ddate.convert(ddate.CivilDate(year, civil_day_of_year(season, 1, leap=leap), leap))
    for _ in range(first.weekday):
        wk.append(cell("", ""))
    for k in range(1, SEASON_DAYS + 1):
        _, m, d = ymd_from_ordinal(year, civil_day_of_year(season, k, leap=leap))
        wk.append(cell(f"{k:2d}", f"{m:02d}-{d:02d}"))
        if len(wk) == WEEK_DAYS:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < WEEK_DAYS:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def season_calendar(year: int, season: int) -> None:
    leap = is_leap_year(year)
    weeks = season_weeks(year, season)
    yold = ddate.convert(ddate.CivilDate.of(year, 1)).yold
    footer = None
    if leap and season == 0:
        _, m, d = ymd_from_ordinal(year, ST_TIBS_DAY)
        footer = f"St. Tib's Day ({m:02d}-{d:02d}) falls between the 59th and 60th day of Chaos."
    print_grid(f"{SEASONS[season]}  YOLD {yold}  (civil {year})", weeks, footer)


def _season_index(s: str) -> int:
    if s.isdigit() and 0 <= int(s) < len(SEASONS):
        return int(s)
    for i, name in enumerate(SEASONS):
        if name.lower() == s.lower() or name.split()[-1].lower() == s.lower():
            return i
    raise argparse.ArgumentTypeError(f"unknown season '{s}'. Available: {list(SEASONS)}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Discordian season calendars with civil dates.")
    p.add_argument("--year", type=int, default=date.today().year, help="Civil year (default: current)")
    p.add_argument(
        "--season",
        type=_season_index,
        action="append",
        default=[],
        help="Season name or index 0-4 (repeatable; default: all five)",
    )
    args = p.parse_args(argv)

    seasons = args.season or range(len(SEASONS))
    for s in seasons:
        season_calendar(args.year, s)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
