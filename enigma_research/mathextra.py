"""Angle conversions and conversions between rectangular and polar coordinates."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

_SMALLEST_POSITIVE = math.ulp(0.0)


@dataclass(frozen=True)
class PolarCoordinates:
    """Polar coordinates: longitude (phi), latitude (theta) and radius, angles in radians."""

    phi: float
    theta: float
    r: float


@dataclass(frozen=True)
class RectAngCoordinates:
    """Rectangular (cartesian) coordinates."""

    x: float
    y: float
    z: float


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180.0 / math.pi


def _require_three(values: Sequence[float], kind: str) -> tuple[float, float, float]:
    if len(values) != 3:
        raise ValueError(f"invalid input for {kind} values: expected 3 values, got {len(values)}")
    first, second, third = values
    return float(first), float(second), float(third)


def rectangular_to_polar(coordinates: RectAngCoordinates) -> PolarCoordinates:
    """Convert rectangular coordinates to polar coordinates."""
    x, y, z = coordinates.x, coordinates.y, coordinates.z
    r = math.sqrt(x**2 + y**2 + z**2)
    if r == 0:
        r = _SMALLEST_POSITIVE
    if x == 0:
        x = _SMALLEST_POSITIVE
    return PolarCoordinates(phi=math.atan2(y, x), theta=math.asin(z / r), r=r)


def rectangular_to_polar_values(values: Sequence[float]) -> tuple[float, float, float]:
    """Convert (x, y, z) to (phi, theta, r)."""
    x, y, z = _require_three(values, "rectangular")
    polar = rectangular_to_polar(RectAngCoordinates(x, y, z))
    return polar.phi, polar.theta, polar.r


def polar_to_rectangular(coordinates: PolarCoordinates) -> RectAngCoordinates:
    """Convert polar coordinates to rectangular coordinates."""
    phi, theta, r = coordinates.phi, coordinates.theta, coordinates.r
    return RectAngCoordinates(
        x=r * math.cos(theta) * math.cos(phi),
        y=r * math.cos(theta) * math.sin(phi),
        z=r * math.sin(theta),
    )


def polar_to_rectangular_values(values: Sequence[float]) -> tuple[float, float, float]:
    """Convert (phi, theta, r) to (x, y, z)."""
    phi, theta, r = _require_three(values, "polar")
    rect = polar_to_rectangular(PolarCoordinates(phi, theta, r))
    return rect.x, rect.y, rect.z