"""Historical time zone information from the IANA time zone database."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .controlgroup import DateTimeHms


def actual_time_zone(moment: DateTimeHms, tz_indication: str) -> tuple[str, int]:
    """Return the zone abbreviation and its offset from UTC in seconds at a local moment.

    Raises ValueError for an unknown time zone indication or an invalid date.
    """
    try:
        zone = ZoneInfo(tz_indication)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown time zone: {tz_indication!r}") from exc
    local = datetime(
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        tzinfo=zone,
    )
    offset = local.utcoffset()
    name = local.tzname() or ""
    seconds = int(offset.total_seconds()) if offset is not None else 0
    return name, seconds