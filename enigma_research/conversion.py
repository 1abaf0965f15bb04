"""Conversions between declination and ecliptic longitude."""

from __future__ import annotations

import math

from .mathextra import deg_to_rad, rad_to_deg


def declination_to_longitude(obliquity: float, declination: float) -> float:
    """Return the ecliptic longitude, in [0, 360), that has the given declination.

    Raises ValueError when the declination exceeds the obliquity in size.
    """
    ratio = math.sin(deg_to_rad(declination)) / math.sin(deg_to_rad(obliquity))
    if abs(ratio) > 1.0:
        raise ValueError(
            f"declination {declination} cannot be reached with obliquity {obliquity}"
        )
    result = rad_to_deg(math.asin(ratio))
    if result > 360.0:
        result -= 360.0
    if result < 0.0:
        result += 360.0
    return result