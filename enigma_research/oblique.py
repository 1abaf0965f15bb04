"""Oblique longitude ("true place") according to the School of Ram."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable
from dataclasses import dataclass

from .mathextra import deg_to_rad, rad_to_deg
from .ranges import value_to_range


@dataclass(frozen=True)
class CelestialPosition:
    """Position and speeds of a celestial point in several coordinate systems."""

    point: int
    longitude: float
    latitude: float = 0.0
    longitude_speed: float = 0.0
    latitude_speed: float = 0.0
    right_ascension: float = 0.0
    right_ascension_speed: float = 0.0
    declination: float = 0.0
    declination_speed: float = 0.0
    distance: float = 0.0
    distance_speed: float = 0.0
    azimuth: float = 0.0
    altitude: float = 0.0


def south_point(armc: float, obliquity: float, geo_lat: float) -> tuple[float, float]:
    """Return ecliptic longitude and latitude of the south point."""
    decl_sp = -(90.0 - geo_lat)
    arsp = armc
    if geo_lat < 0.0:
        arsp = value_to_range(armc + 180.0, 0.0, 360.0)
        decl_sp = -90.0 - geo_lat

    sin_sp = math.sin(deg_to_rad(arsp))
    cos_arsp = math.cos(deg_to_rad(arsp))
    cos_eps = math.cos(deg_to_rad(obliquity))
    sin_eps = math.sin(deg_to_rad(obliquity))
    tan_decl = math.tan(deg_to_rad(decl_sp))
    sin_decl = math.sin(deg_to_rad(decl_sp))
    cos_decl = math.cos(deg_to_rad(decl_sp))

    long_sp = rad_to_deg(math.atan2(sin_sp * cos_eps + tan_decl * sin_eps, cos_arsp))
    long_sp = value_to_range(long_sp, 0.0, 360.0)
    lat_sp = rad_to_deg(math.asin(sin_decl * cos_eps - cos_decl * sin_eps * sin_sp))
    return long_sp, lat_sp


def is_rising(long_south_point: float, long_point: float) -> bool:
    """Tell whether a point lies in the rising half, east of the south point."""
    diff = long_point - long_south_point
    if diff < 0.0:
        diff += 360.0
    if diff >= 360.0:
        diff -= 360.0
    return diff < 180.0


def oblique_longitude(
    longitude: float,
    latitude: float,
    ayanamsha_offset: float,
    long_south_point: float,
    lat_south_point: float,
) -> float:
    """Return the oblique longitude of one point, tropical, in [0, 360)."""
    abs_lat_sp = abs(lat_south_point)
    long_pl = longitude + ayanamsha_offset
    lat_pl = latitude
    s = abs(long_south_point - long_pl) / 2.0
    tan_s = math.tan(deg_to_rad(s))
    q = math.sin(deg_to_rad(abs_lat_sp - lat_pl)) / math.sin(deg_to_rad(abs_lat_sp + lat_pl))
    v = rad_to_deg(math.atan(tan_s * q)) - s
    absolute_v = abs(value_to_range(abs(v), -90.0, 90.0))

    if is_rising(long_south_point, long_pl):
        corrected_v = absolute_v if lat_pl < 0.0 else -absolute_v
    else:
        corrected_v = absolute_v if lat_pl > 0.0 else -absolute_v
    return value_to_range(long_pl + corrected_v, 0.0, 360.0)


def oblique_longitudes(
    points: Iterable[CelestialPosition],
    armc: float,
    obliquity: float,
    geo_lat: float,
    ayanamsha_offset: float,
) -> list[CelestialPosition]:
    """Return copies of the points with their longitude replaced by the oblique longitude."""
    long_sp, lat_sp = south_point(armc, obliquity, geo_lat)
    return [
        dataclasses.replace(
            point,
            longitude=oblique_longitude(
                point.longitude, point.latitude, ayanamsha_offset, long_sp, lat_sp
            )
            - ayanamsha_offset,
        )
        for point in points
    ]