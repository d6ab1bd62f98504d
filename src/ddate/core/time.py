from __future__ import annotations
from typing import Tuple

from .errors import InvalidInputError

# Days before the first of each month in a common year.
_CUM_DAYS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap rule (valid for year 0 and negative years)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidInputError(f"month {month} outside 1..12")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def ordinal_day(year: int, month: int, day: int) -> int:
    """Day-of-year (1-based) of a proleptic Gregorian date."""
    last = days_in_month(year, month)
    if not 1 <= day <= last:
        raise InvalidInputError(f"day {day} outside 1..{last} for {year:04d}-{month:02d}")
    n = _CUM_DAYS[month - 1] + day
    if month > 2 and is_leap_year(year):
        n += 1
    return n


def ymd_from_ordinal(year: int, day_of_year: int) -> Tuple[int, int, int]:
    """Inverse of ordinal_day."""
    span = days_in_year(year)
    if not 1 <= day_of_year <= span:
        raise InvalidInputError(f"day_of_year {day_of_year} outside 1..{span} for year {year}")
    month = 1
    rest = day_of_year
    while rest > days_in_month(year, month):
        rest -= days_in_month(year, month)
        month += 1
    return year, month, rest


def iso_label(year: int, month: int, day: int) -> str:
    """ISO-like label that also covers years outside datetime's 1..9999."""
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"
