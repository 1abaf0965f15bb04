"""Positions of hypothetical bodies calculated from orbital elements."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass

from .mathextra import (
    PolarCoordinates,
    RectAngCoordinates,
    deg_to_rad,
    polar_to_rectangular,
    rad_to_deg,
    rectangular_to_polar,
)

_JD_1900 = 2415020.5
_DAYS_PER_CENTURY = 36525.0


class OrbitalBody(enum.Enum):
    """Bodies whose positions are derived from orbital elements."""

    EARTH = "earth"
    PERSEPHONE_RAM = "persephone_ram"
    HERMES_RAM = "hermes_ram"
    DEMETER_RAM = "demeter_ram"


class ObserverPosition(enum.Enum):
    """Position of the observer."""

    GEOCENTRIC = "geocentric"
    TOPOCENTRIC = "topocentric"
    HELIOCENTRIC = "heliocentric"


@dataclass(frozen=True)
class OrbitDefinition:
    """Orbital elements; each element tuple holds terms for T^0, T^1 and T^2."""

    mean_anomaly: tuple[float, float, float]
    eccentric_anomaly: tuple[float, float, float]
    semi_major_axis: float
    argument_perihelion: tuple[float, float, float]
    asc_node: tuple[float, float, float]
    inclination: tuple[float, float, float]


_NO_TERMS = (0.0, 0.0, 0.0)

_ORBITS = {
    OrbitalBody.EARTH: OrbitDefinition(
        mean_anomaly=(358.47584, 35999.0498, -0.00015),
        eccentric_anomaly=(0.016751, -0.41e-4, 0.0),
        semi_major_axis=1.00000013,
        argument_perihelion=(101.22083, 1.71918, 0.00045),
        asc_node=_NO_TERMS,
        inclination=_NO_TERMS,
    ),
    OrbitalBody.PERSEPHONE_RAM: OrbitDefinition(
        mean_anomaly=(295.0, 60.0, 0.0),
        eccentric_anomaly=_NO_TERMS,
        semi_major_axis=71.137866,
        argument_perihelion=_NO_TERMS,
        asc_node=_NO_TERMS,
        inclination=_NO_TERMS,
    ),
    OrbitalBody.HERMES_RAM: OrbitDefinition(
        mean_anomaly=(134.7, 50.0, 0.0),
        eccentric_anomaly=_NO_TERMS,
        semi_major_axis=80.331954,
        argument_perihelion=_NO_TERMS,
        asc_node=_NO_TERMS,
        inclination=_NO_TERMS,
    ),
    OrbitalBody.DEMETER_RAM: OrbitDefinition(
        mean_anomaly=(114.6, 40.0, 0.0),
        eccentric_anomaly=_NO_TERMS,
        semi_major_axis=93.216975,
        argument_perihelion=_NO_TERMS,
        asc_node=(125.0, 0.0, 0.0),
        inclination=(5.5, 0.0, 0.0),
    ),
}


def orbit_definition(body: OrbitalBody) -> OrbitDefinition:
    """Return the orbital elements for a body; ValueError for unknown bodies."""
    try:
        return _ORBITS[body]
    except (KeyError, TypeError):
        raise ValueError(f"unrecognized body for orbit definition: {body!r}") from None


def century_fraction(jd_ut: float) -> float:
    """Julian centuries since 1900 January 0.5."""
    return (jd_ut - _JD_1900) / _DAYS_PER_CENTURY


def process_terms(fraction_t: float, elements: Sequence[float]) -> float:
    """Evaluate a quadratic polynomial in T."""
    c0, c1, c2 = elements
    return c0 + c1 * fraction_t + c2 * fraction_t * fraction_t


def ecc_anomaly_from_kepler(mean_anomaly: float, eccentricity: float) -> float:
    """Approximate the eccentric anomaly by iterating Kepler's equation five times."""
    ecc_anomaly = mean_anomaly
    for _ in range(5):
        ecc_anomaly = mean_anomaly + eccentricity * math.sin(ecc_anomaly)
    return ecc_anomaly


def polar_true_anomaly(
    orbit: OrbitDefinition, ecc_anomaly: float, eccentricity: float
) -> PolarCoordinates:
    """Return the true anomaly vector in polar coordinates."""
    x = orbit.semi_major_axis * (math.cos(ecc_anomaly) - eccentricity)
    y = orbit.semi_major_axis * math.sin(ecc_anomaly) * math.sqrt(1 - eccentricity * eccentricity)
    return rectangular_to_polar(RectAngCoordinates(x, y, 0.0))


def reduce_to_ecliptic(
    true_anomaly: PolarCoordinates, orbit: OrbitDefinition, fraction_t: float
) -> tuple[float, float, float]:
    """Return (semi axis in degrees, inclination in radians, node in radians)."""
    semi_axis = rad_to_deg(true_anomaly.phi) + process_terms(fraction_t, orbit.argument_perihelion)
    node = deg_to_rad(process_terms(fraction_t, orbit.asc_node))
    factor_v_deg = semi_axis + rad_to_deg(node)
    if factor_v_deg < 0.0:
        factor_v_deg += 360.0
    factor_v_rad = deg_to_rad(factor_v_deg)

    inclination = deg_to_rad(process_terms(fraction_t, orbit.inclination))
    semi_axis = math.atan(math.cos(inclination) * math.tan(factor_v_rad - node))
    if semi_axis < math.pi:
        semi_axis += math.pi
    semi_axis = rad_to_deg(semi_axis + node)
    if abs(factor_v_deg - semi_axis) > 10.0:
        semi_axis -= 180.0
    return semi_axis, inclination, node


def rect_ang_helio_coordinates(
    semi_axis: float,
    inclination: float,
    ecc_anomaly: float,
    eccentricity: float,
    mean_anomaly: float,
    orbit: OrbitDefinition,
) -> RectAngCoordinates:
    """Return heliocentric rectangular coordinates."""
    phi = deg_to_rad(semi_axis)
    if phi < 0.0:
        phi += math.pi * 2
    theta = math.atan(math.sin(phi - mean_anomaly) * math.tan(inclination))
    r = deg_to_rad(orbit.semi_major_axis) * (1 - eccentricity * math.cos(ecc_anomaly))
    return polar_to_rectangular(PolarCoordinates(phi=phi, theta=theta, r=r))


def ecliptic_helio_position(fraction_t: float, orbit: OrbitDefinition) -> RectAngCoordinates:
    """Return the ecliptic heliocentric position as rectangular coordinates."""
    mean_anomaly = deg_to_rad(process_terms(fraction_t, orbit.mean_anomaly))
    if mean_anomaly < 0.0:
        mean_anomaly += math.pi * 2
    eccentricity = process_terms(fraction_t, orbit.eccentric_anomaly)
    ecc_anomaly = ecc_anomaly_from_kepler(mean_anomaly, eccentricity)
    true_anomaly = polar_true_anomaly(orbit, ecc_anomaly, eccentricity)
    semi_axis, inclination, node = reduce_to_ecliptic(true_anomaly, orbit, fraction_t)
    return rect_ang_helio_coordinates(
        semi_axis, inclination, ecc_anomaly, eccentricity, node, orbit
    )


def _define_position(polar: PolarCoordinates) -> tuple[float, float, float]:
    longitude = rad_to_deg(polar.phi)
    if longitude < 0.0:
        longitude += 360.0
    return longitude, rad_to_deg(polar.theta), rad_to_deg(polar.r)


def calculate(
    body: OrbitalBody, jd_ut: float, observer_position: ObserverPosition
) -> tuple[float, float, float]:
    """Return longitude, latitude and distance of a body.

    Geocentric and topocentric give the same result, given the distances involved.
    """
    fraction_t = century_fraction(jd_ut)
    planet = ecliptic_helio_position(fraction_t, orbit_definition(body))
    if observer_position in (ObserverPosition.GEOCENTRIC, ObserverPosition.TOPOCENTRIC):
        earth = ecliptic_helio_position(fraction_t, orbit_definition(OrbitalBody.EARTH))
        planet = RectAngCoordinates(
            x=planet.x - earth.x,
            y=planet.y - earth.y,
            z=planet.z - earth.z,
        )
    return _define_position(rectangular_to_polar(planet))