"""Aspects between pairs of positions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .positions import SinglePosition

_FULL_CIRCLE = 360.0


@dataclass(frozen=True)
class ConfigPoint:
    """Configured orb factor (in percent) for a chart point."""

    point: int
    orb_factor: float
    glyph: str = ""


@dataclass(frozen=True)
class ConfigAspect:
    """Configured orb factor (in percent) and angular distance for an aspect."""

    aspect: int
    orb_factor: float
    distance: float
    glyph: str = ""


@dataclass(frozen=True)
class ActualAspect:
    """An aspect found between two positions."""

    pos1: SinglePosition
    pos2: SinglePosition
    aspect: int
    orb: float
    exactness: int


def calc_aspects(
    points: Sequence[SinglePosition],
    aspects: Iterable[int],
    config_points: Iterable[ConfigPoint],
    config_aspects: Iterable[ConfigAspect],
    base_orb: float,
) -> list[ActualAspect]:
    """Return every aspect, from the given aspect ids, that occurs between two points.

    The orb for a pair is the larger of the two point orb factors times the
    aspect orb factor (both in percent) times base_orb. Points without a
    configuration have an orb factor of zero; aspects without a configuration
    are not searched. Exactness runs from 0 (edge of orb) to 100 (exact).
    """
    point_factors: dict[int, float] = {}
    for cfg_point in config_points:
        point_factors[cfg_point.point] = cfg_point.orb_factor
    aspect_configs: dict[int, ConfigAspect] = {}
    for cfg_aspect in config_aspects:
        aspect_configs[cfg_aspect.aspect] = cfg_aspect
    aspect_ids = list(aspects)

    found: list[ActualAspect] = []
    for i, first in enumerate(points):
        for second in points[i + 1 :]:
            distance1 = abs(first.position - second.position)
            distance2 = _FULL_CIRCLE - distance1
            point_factor = max(
                point_factors.get(first.id, 0.0), point_factors.get(second.id, 0.0)
            )
            for aspect in aspect_ids:
                config = aspect_configs.get(aspect)
                if config is None:
                    continue
                orb = ((point_factor * config.orb_factor) / 10000) * base_orb
                delta = min(abs(distance1 - config.distance), abs(distance2 - config.distance))
                if delta > orb:
                    continue
                exactness = 100 if orb == 0 else 100 - int((delta / orb) * 100)
                found.append(
                    ActualAspect(
                        pos1=first,
                        pos2=second,
                        aspect=aspect,
                        orb=delta,
                        exactness=exactness,
                    )
                )
    return found