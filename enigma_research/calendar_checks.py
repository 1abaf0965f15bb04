"""Calendar checks used when building control groups."""

from __future__ import annotations

_MONTHS_WITH_31 = frozenset({2, 3, 5, 7, 8, 10, 12})
_MONTHS_WITH_30 = frozenset({1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12})


def is_leap_year(year: int) -> bool:
    """Tell whether a year is a leap year in the Gregorian calendar."""
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def day_fits_in_month(day: int, month: int, year: int) -> bool:
    """Tell whether the day number can occur in the given month and year."""
    return (
        day < 29
        or (day == 29 and month != 2)
        or (day == 30 and month in _MONTHS_WITH_30)
        or (day == 31 and month in _MONTHS_WITH_31)
        or (is_leap_year(year) and day < 30)
    )