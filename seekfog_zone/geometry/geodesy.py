"""
Geodesy Module
==============

Spherical-Earth helpers on (lon, lat) decimal degrees.

Design:
- Great-circle formulas for distance, bearing, midpoint
- Local equirectangular offsets for building shapes around a point
  (valid for the sub-200 km scales used in play)
- Pure functions, numpy-vectorised where rings are produced
"""

import math
from typing import Tuple

import numpy as np

from seekfog_clues.schemas import LonLat

EARTH_RADIUS_M = 6371008.8

# Equirectangular scale factors (metres per degree)
METERS_PER_DEG_LON_EQUATOR = 111320.0
METERS_PER_DEG_LAT = 110574.0

# Below this cos(lat) a longitude offset is meaningless (pole)
_MIN_COS_LAT = 1e-9


def distance_m(a: LonLat, b: LonLat) -> float:
    """Haversine great-circle distance in metres."""
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(h)))


def bearing_deg(a: LonLat, b: LonLat) -> float:
    """
    Initial great-circle bearing from a to b.

    Returns:
        Degrees clockwise from north, normalised to (-180, 180]
    """
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlon = math.radians(b.lon - a.lon)
    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    return wrap_180(math.degrees(math.atan2(y, x)))


def wrap_180(angle: float) -> float:
    """Wrap an angle in degrees to (-180, 180]."""
    a = math.fmod(angle, 360.0)
    if a > 180.0:
        a -= 360.0
    elif a <= -180.0:
        a += 360.0
    return a


def midpoint(a: LonLat, b: LonLat) -> LonLat:
    """Great-circle midpoint of segment a-b."""
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    lon1 = math.radians(a.lon)
    dlon = math.radians(b.lon - a.lon)

    bx = math.cos(lat2) * math.cos(dlon)
    by = math.cos(lat2) * math.sin(dlon)
    lat = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by ** 2),
    )
    lon = lon1 + math.atan2(by, math.cos(lat1) + bx)
    return LonLat(lon=wrap_180(math.degrees(lon)), lat=math.degrees(lat))


def degrees_per_meter(lat: float) -> Tuple[float, float]:
    """
    Equirectangular (lon, lat) degrees per metre at a latitude.

    Raises:
        ValueError: At the poles, where longitude degrees are unbounded
    """
    cos_lat = math.cos(math.radians(lat))
    if cos_lat < _MIN_COS_LAT:
        raise ValueError(f"Equirectangular frame undefined at latitude {lat}")
    return (
        1.0 / (METERS_PER_DEG_LON_EQUATOR * cos_lat),
        1.0 / METERS_PER_DEG_LAT,
    )


def offset(origin: LonLat, east_m: float, north_m: float) -> Tuple[float, float]:
    """Displace origin by metres east/north in its local frame."""
    dlon, dlat = degrees_per_meter(origin.lat)
    return (origin.lon + east_m * dlon, origin.lat + north_m * dlat)


def offsets(origin: LonLat, east_m: np.ndarray, north_m: np.ndarray) -> np.ndarray:
    """
    Vectorised offset().

    Args:
        origin: Frame origin
        east_m: (N,) metres east
        north_m: (N,) metres north

    Returns:
        (N, 2) array of (lon, lat)
    """
    dlon, dlat = degrees_per_meter(origin.lat)
    return np.column_stack((
        origin.lon + np.asarray(east_m, dtype=float) * dlon,
        origin.lat + np.asarray(north_m, dtype=float) * dlat,
    ))
