"""Simple positions of chart points, identified by an integer id."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SinglePosition:
    """One position value (longitude, declination, ...) for a point."""

    id: int
    position: float


@dataclass(frozen=True)
class DoublePosition:
    """Two position values for a point, e.g. longitude and declination."""

    id: int
    position1: float
    position2: float