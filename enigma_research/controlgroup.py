"""Construction of control groups by recombining the data of input items."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass

from .calendar_checks import day_fits_in_month
from .randomization import shuffle


@dataclass(frozen=True)
class DateTimeHms:
    """A date and time with daylight-saving and zone offsets."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    greg: bool = True
    dst: float = 0.0
    tzone: float = 0.0


@dataclass(frozen=True)
class StandardInputItem:
    """One data item for research: identification, location and moment."""

    id: str
    name: str
    geo_longitude: float
    geo_latitude: float
    date_time: DateTimeHms


def _take_month(months: MutableSequence[int], day: int, year: int) -> int:
    """Remove and return the first month the day fits in, or 0 if there is none."""
    for index, month in enumerate(months):
        if day_fits_in_month(day, month, year):
            del months[index]
            return month
    return 0


def create_control_data(
    input_items: Iterable[StandardInputItem], sequence: int
) -> list[StandardInputItem]:
    """Return one control set built from shuffled parts of the input items."""
    items = list(input_items)
    years = shuffle([item.date_time.year for item in items])
    months = shuffle([item.date_time.month for item in items])
    days = shuffle(sorted((item.date_time.day for item in items), reverse=True))
    hours = shuffle([item.date_time.hour for item in items])
    minutes = shuffle([item.date_time.minute for item in items])
    seconds = shuffle([item.date_time.second for item in items])
    dsts = shuffle([item.date_time.dst for item in items])
    latitudes = shuffle([item.geo_latitude for item in items])
    longitudes = shuffle([item.geo_longitude for item in items])

    control_items: list[StandardInputItem] = []
    parts = zip(years, days, hours, minutes, seconds, dsts, latitudes, longitudes)
    for counter, (year, day, hour, minute, second, dst, lat, lon) in enumerate(parts):
        month = _take_month(months, day, year)
        date_time = DateTimeHms(
            year=year, month=month, day=day, hour=hour, minute=minute, second=second, dst=dst
        )
        control_items.append(
            StandardInputItem(
                id=f"{sequence}-{counter}",
                name=f"Controldata {sequence}-{counter}",
                geo_longitude=lon,
                geo_latitude=lat,
                date_time=date_time,
            )
        )
    return control_items


def create_multiple_control_data(
    input_items: Iterable[StandardInputItem], multiplicity: int
) -> list[StandardInputItem]:
    """Return multiplicity control sets, one after the other."""
    items = list(input_items)
    result: list[StandardInputItem] = []
    for sequence in range(multiplicity):
        result.extend(create_control_data(items, sequence))
    return result