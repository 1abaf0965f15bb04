"""Midpoints in longitude (or right ascension) and occupied midpoints on a dial."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .positions import SinglePosition


@dataclass(frozen=True)
class Midpoint:
    """The midpoint of two positions."""

    point1: SinglePosition
    point2: SinglePosition
    position: float


@dataclass(frozen=True)
class OccupiedMidpoint:
    """A midpoint of two base positions that is occupied by a focus point."""

    base_pos1: SinglePosition
    base_pos2: SinglePosition
    focus_point: SinglePosition
    orb: float
    exactness: float


def effective_midpoint(
    position1: SinglePosition, position2: SinglePosition, dial_size: float
) -> float:
    """Return the midpoint on the shorter arc between two positions on a dial."""
    half_dial = dial_size / 2
    small_pos = min(position1.position, position2.position)
    large_pos = max(position1.position, position2.position)
    if large_pos - small_pos >= half_dial:
        first, last = large_pos, small_pos
    else:
        first, last = small_pos, large_pos
    diff = last - first
    if diff < 0.0:
        diff += dial_size
    midpoint = diff / 2 + first
    if midpoint >= dial_size:
        midpoint -= dial_size
    return midpoint


def calc_midpoints(points: Sequence[SinglePosition]) -> list[Midpoint]:
    """Return the midpoints of all pairs of points on a 360-degree circle."""
    return [
        Midpoint(point1=first, point2=second, position=effective_midpoint(first, second, 360.0))
        for i, first in enumerate(points)
        for second in points[i + 1 :]
    ]


def _reduce_to_dial(position: float, dial_size: float) -> float:
    while position >= dial_size:
        position -= dial_size
    return position


def calc_occupied_midpoints(
    points: Iterable[SinglePosition], dial_size: float, orb: float
) -> list[OccupiedMidpoint]:
    """Return the midpoints that are occupied by a point within orb on the dial.

    Positions are reduced to the dial first; a midpoint also counts as occupied
    by a point half a dial away. Exactness is a percentage.
    """
    if dial_size <= 0.0:
        raise ValueError(f"dial size must be positive, got {dial_size}")
    if orb <= 0.0:
        raise ValueError(f"orb must be positive, got {orb}")

    in_dial = [SinglePosition(id=p.id, position=_reduce_to_dial(p.position, dial_size)) for p in points]
    half_dial = dial_size / 2.0

    occupied: list[OccupiedMidpoint] = []
    for i, first in enumerate(in_dial):
        for second in in_dial[i + 1 :]:
            midpoint = effective_midpoint(first, second, dial_size)
            for candidate in in_dial:
                candidate1 = candidate.position
                candidate2 = candidate1 - half_dial
                if candidate2 < 0.0:
                    candidate2 = candidate1 + half_dial
                actual_orb = min(abs(candidate1 - midpoint), abs(candidate2 - midpoint))
                if actual_orb <= orb:
                    occupied.append(
                        OccupiedMidpoint(
                            base_pos1=first,
                            base_pos2=second,
                            focus_point=candidate,
                            orb=actual_orb,
                            exactness=(1 - actual_orb / orb) * 100.0,
                        )
                    )
    return occupied