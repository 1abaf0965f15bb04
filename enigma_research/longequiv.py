"""Longitude equivalents of declinations."""

from __future__ import annotations

from collections.abc import Iterable

from .conversion import declination_to_longitude
from .positions import DoublePosition, SinglePosition


def _equivalent(longitude: float, declination: float, obliquity: float) -> float:
    if abs(declination) > obliquity:  # out of bounds: mirror back within the obliquity
        oob_part = abs(declination) - obliquity
        declination = obliquity - oob_part if declination > 0 else oob_part - obliquity

    candidate1 = declination_to_longitude(obliquity, declination)
    if candidate1 < 0.0:
        candidate1 += 360.0

    candidate2 = (180.0 if longitude < 180.0 else 540.0) - candidate1
    if candidate2 > 360.0:
        candidate2 -= 360.0
    if candidate2 < 0.0:
        candidate2 += 360.0

    if abs(candidate2 - longitude) < abs(candidate1 - longitude):
        return candidate2
    return candidate1


def calc_equivalents(
    positions: Iterable[DoublePosition], obliquity: float
) -> list[SinglePosition]:
    """Return the longitude equivalent for each (longitude, declination) position."""
    return [
        SinglePosition(id=pos.id, position=_equivalent(pos.position1, pos.position2, obliquity))
        for pos in positions
    ]