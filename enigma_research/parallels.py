"""Parallels and contra-parallels in declination."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .positions import SinglePosition


@dataclass(frozen=True)
class MatchedParallel:
    """A parallel (same side) or contra-parallel (opposite sides) of two declinations."""

    pos1: SinglePosition
    pos2: SinglePosition
    orb: float
    parallel: bool


def calc_parallels(
    positions: Sequence[SinglePosition], orb: float
) -> list[MatchedParallel]:
    """Return parallels and contra-parallels between all pairs within orb."""
    matches: list[MatchedParallel] = []
    for i, first in enumerate(positions):
        for second in positions[i + 1 :]:
            decl1, decl2 = first.position, second.position
            distance = abs(abs(decl1) - abs(decl2))
            if distance <= orb:
                same_side = (decl1 >= 0.0 and decl2 >= 0.0) or (decl1 <= 0.0 and decl2 <= 0.0)
                matches.append(
                    MatchedParallel(pos1=first, pos2=second, orb=distance, parallel=same_side)
                )
    return matches