"""Midpoints in declination."""

from __future__ import annotations

from collections.abc import Sequence

from .midpoints import OccupiedMidpoint
from .positions import SinglePosition


def calc_decl_midpoints(
    positions: Sequence[SinglePosition], orb: float
) -> list[OccupiedMidpoint]:
    """Return declination midpoints occupied by a position within orb.

    Exactness runs from 0.0 (edge of orb) to 1.0 (exact).
    """
    if orb <= 0.0:
        raise ValueError(f"orb must be positive, got {orb}")
    occupied: list[OccupiedMidpoint] = []
    for i, first in enumerate(positions):
        for second in positions[i + 1 :]:
            midpoint = (first.position + second.position) / 2.0
            for candidate in positions:
                actual_orb = abs(midpoint - candidate.position)
                if actual_orb <= orb:
                    occupied.append(
                        OccupiedMidpoint(
                            base_pos1=first,
                            base_pos2=second,
                            focus_point=candidate,
                            orb=actual_orb,
                            exactness=1 - actual_orb / orb,
                        )
                    )
    return occupied