"""
Geometry Layer
==============

Bounded Context: Spatial primitives for the deduction engine.

Responsibilities:
- Great-circle helpers (distance, bearing, midpoint, local offsets)
- Constraint shapes (disk, bisector half-plane, world boundary)
- Feasible-region value type and boolean operations
- NO clue semantics, NO history

Design Philosophy:
- Pure functions where possible
- Immutable values (shapely geometries, frozen dataclasses)
- Boolean operations degrade instead of raising
"""

from seekfog_zone.geometry.geodesy import bearing_deg, distance_m, midpoint
from seekfog_zone.geometry.shapes import (
    WORLD_BOUNDS,
    bisector_half_plane,
    bisector_line,
    disk,
    play_area,
    play_area_mask,
    world_boundary,
)
from seekfog_zone.geometry.region import (
    FeasibleRegion,
    RegionState,
    difference,
    intersect,
)

__all__ = [
    "bearing_deg",
    "distance_m",
    "midpoint",
    "WORLD_BOUNDS",
    "bisector_half_plane",
    "bisector_line",
    "disk",
    "play_area",
    "play_area_mask",
    "world_boundary",
    "FeasibleRegion",
    "RegionState",
    "difference",
    "intersect",
]
