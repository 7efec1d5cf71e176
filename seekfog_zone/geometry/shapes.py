"""
Geometric Shapes Module
========================

Constraint shapes on (lon, lat) - NO state, NO side effects.

Design:
- Shapes are shapely polygons (immutable geometry objects)
- Disk: regular N-gon in the local equirectangular frame of its center
- Bisector half-plane: bounded quadrilateral on one side of the
  perpendicular bisector of a-b, built in the metric frame at the midpoint
  so both sides share the same edge
- World boundary: fixed lon/lat rectangle used as the universal set
"""

import math
from typing import Tuple

import numpy as np
from shapely.geometry import LineString, Polygon, box
from shapely.geometry.polygon import orient

from seekfog_clues.schemas import LonLat
from seekfog_zone.geometry.geodesy import bearing_deg, distance_m, midpoint, offsets

WORLD_BOUNDS: Tuple[float, float, float, float] = (-180.0, -90.0, 180.0, 90.0)

DEFAULT_DISK_STEPS = 64
DEFAULT_HALF_PLANE_WIDTH_M = 100_000.0
DEFAULT_BISECTOR_LINE_HALF_LENGTH_M = 10_000.0

# Points closer than this are treated as coincident
MIN_SEPARATION_M = 1e-6


def disk(center: LonLat, radius_m: float, steps: int = DEFAULT_DISK_STEPS) -> Polygon:
    """
    Regular polygon approximating a circle on the ground.

    Args:
        center: Circle center
        radius_m: Radius in metres
        steps: Vertex count

    Returns:
        Counter-clockwise polygon; empty polygon if radius_m <= 0

    Raises:
        ValueError: Non-finite radius, steps < 3, or center at a pole
    """
    if not math.isfinite(radius_m):
        raise ValueError(f"radius_m must be finite, got {radius_m}")
    if steps < 3:
        raise ValueError(f"Disk needs at least 3 steps, got {steps}")
    if radius_m <= 0:
        return Polygon()

    theta = np.linspace(0.0, 2.0 * np.pi, steps, endpoint=False)
    ring = offsets(center, radius_m * np.cos(theta), radius_m * np.sin(theta))
    return Polygon(ring)


def bisector_half_plane(
    a: LonLat,
    b: LonLat,
    side_toward_b: bool = True,
    half_width_m: float = DEFAULT_HALF_PLANE_WIDTH_M,
) -> Polygon:
    """
    Bounded stand-in for the half-plane on one side of the bisector of a-b.

    The quadrilateral's back edge lies on the perpendicular bisector
    (centered on the geodesic midpoint, 2 * half_width_m long) and it extends
    half_width_m forward, toward b or toward a.

        side_toward_b=True, a south of b:

            front_left ---------- front_right
                |                      |
                |          b           |
            left ------- mid ------- right     <- bisector
                           a

    Args:
        a: First reference point
        b: Second reference point
        side_toward_b: Keep the side containing b (else the side with a)
        half_width_m: Half-width and depth of the quadrilateral

    Returns:
        Counter-clockwise quadrilateral

    Raises:
        ValueError: If a and b coincide (no bisector exists)
    """
    if distance_m(a, b) < MIN_SEPARATION_M:
        raise ValueError(f"Bisector undefined for coincident points {a.to_list()}")

    mid = midpoint(a, b)
    theta = math.radians(bearing_deg(mid, b))
    if not side_toward_b:
        theta += math.pi

    # Unit vectors in (east, north) metres
    fwd = np.array([math.sin(theta), math.cos(theta)])
    left = np.array([-math.cos(theta), math.sin(theta)])

    w = half_width_m
    corners = np.array([
        left * w,
        -left * w,
        -left * w + fwd * w,
        left * w + fwd * w,
    ])
    return Polygon(offsets(mid, corners[:, 0], corners[:, 1]))


def bisector_line(
    a: LonLat,
    b: LonLat,
    half_length_m: float = DEFAULT_BISECTOR_LINE_HALF_LENGTH_M,
) -> LineString:
    """
    Perpendicular bisector of a-b as a segment, for overlays.

    Raises:
        ValueError: If a and b coincide
    """
    if distance_m(a, b) < MIN_SEPARATION_M:
        raise ValueError(f"Bisector undefined for coincident points {a.to_list()}")

    mid = midpoint(a, b)
    theta = math.radians(bearing_deg(mid, b))
    ends = np.array([half_length_m, -half_length_m])
    # Along the bisector = perpendicular to the bearing
    return LineString(offsets(mid, -ends * math.cos(theta), ends * math.sin(theta)))


def world_boundary(bounds: Tuple[float, float, float, float] = WORLD_BOUNDS) -> Polygon:
    """Universal set: (min_lon, min_lat, max_lon, max_lat) rectangle, CCW."""
    return box(*bounds, ccw=True)


def play_area(center: LonLat, radius_m: float, steps: int = DEFAULT_DISK_STEPS) -> Polygon:
    """
    The game's fixed playing-area disk.

    Raises:
        ValueError: If radius_m <= 0 (there is no playing area)
    """
    area = disk(center, radius_m, steps)
    if area.is_empty:
        raise ValueError(f"Play area radius must be > 0, got {radius_m}")
    return area


def play_area_mask(
    center: LonLat,
    radius_m: float,
    steps: int = DEFAULT_DISK_STEPS,
    bounds: Tuple[float, float, float, float] = WORLD_BOUNDS,
) -> Polygon:
    """
    World rectangle with the playing-area disk punched out.

    Outer ring counter-clockwise, hole clockwise, ready for fill renderers.

    Raises:
        ValueError: If radius_m <= 0 (there is no playing area)
    """
    area = play_area(center, radius_m, steps)
    outer = world_boundary(bounds)
    return orient(Polygon(outer.exterior.coords, [area.exterior.coords]), sign=1.0)
