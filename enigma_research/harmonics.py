"""Harmonic positions."""

from __future__ import annotations

from collections.abc import Iterable

from .positions import SinglePosition
from .ranges import value_to_range


def calc_harmonics(
    positions: Iterable[SinglePosition], harmonic_nr: float
) -> list[SinglePosition]:
    """Multiply every position by the harmonic number and reduce to [0, 360)."""
    return [
        SinglePosition(id=pos.id, position=value_to_range(pos.position * harmonic_nr, 0.0, 360.0))
        for pos in positions
    ]