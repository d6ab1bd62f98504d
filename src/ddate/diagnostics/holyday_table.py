from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

from ddate.core.calendar import civil_day_of_year
from ddate.core.constants import (
    APOSTLE_HOLYDAY,
    APOSTLES,
    CURSE_OF_GREYFACE,
    SEASON_HOLYDAY,
    SEASON_HOLYDAYS,
)
from ddate.core.time import is_leap_year, iso_label, ymd_from_ordinal


def holyday_dates(year: int) -> List[Tuple[str, Tuple[int, int, int]]]:
    """All ten holydays of a civil year in calendar order, as (name, (y, m, d))."""
    leap = is_leap_year(year)
    out: List[Tuple[str, Tuple[int, int, int]]] = []
    for s in range(len(APOSTLES)):
        for day, name in ((APOSTLE_HOLYDAY, APOSTLES[s]), (SEASON_HOLYDAY, SEASON_HOLYDAYS[s])):
            doy = civil_day_of_year(s, day, leap=leap)
            out.append((name, ymd_from_ordinal(year, doy)))
    return out


def mmdd(ymd: Tuple[int, int, int]) -> str:
    return f"{ymd[1]:02d}-{ymd[2]:02d}"


def main(argv: list[str] | None = None) -> int:
    this_year = date.today().year
    p = argparse.ArgumentParser(description="Print the civil dates of the Discordian holydays.")
    p.add_argument("--from-year", type=int, default=this_year)
    p.add_argument("--to-year", type=int, default=None, help="Last civil year (default: --from-year)")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    Y0 = args.from_year
    Y1 = Y0 if args.to_year is None else args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(ymd: Tuple[int, int, int]) -> str:
        return mmdd(ymd) if args.dates == "mmdd" else iso_label(*ymd)

    names = [name for name, _ in holyday_dates(Y0)]
    # widest labels come from either end of the range (negative years carry a sign)
    datew = max(len(fmt((y, 12, 31))) for y in (Y0, Y1))
    yw = max(5, len(str(Y0)), len(str(Y1)))
    yoldw = max(5, len(str(Y0 + CURSE_OF_GREYFACE)), len(str(Y1 + CURSE_OF_GREYFACE)))
    colw = [max(len(n), datew) for n in names]
    header = f"{'Year':<{yw}} {'YOLD':<{yoldw}} " + "  ".join(n.ljust(w) for n, w in zip(names, colw))
    print(header)
    print("-" * len(header))
    for y in range(Y0, Y1 + 1):
        cells = [fmt(ymd).ljust(w) for (_, ymd), w in zip(holyday_dates(y), colw)]
        print(f"{y:<{yw}d} {y + CURSE_OF_GREYFACE:<{yoldw}d} " + "  ".join(cells))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
