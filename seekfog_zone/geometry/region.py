"""
Region Module
=============

Feasible-region value type and the boolean operations that fold clues
into it.

Design:
- FeasibleRegion is immutable: UNCONSTRAINED | BOUNDED(geometry) | EMPTY
- intersect/difference never raise: a clipping failure is logged and the
  step is a no-op (the input region is returned unchanged)
- Results with (near) zero area collapse to EMPTY
- The world boundary stands in for "everything" whenever an operation
  starts from UNCONSTRAINED
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from shapely.errors import GEOSException
from shapely.geometry import GeometryCollection, MultiPolygon, Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from seekfog_clues.logging import LogEvent, create_logger
from seekfog_clues.schemas import LonLat
from seekfog_zone.geometry.shapes import WORLD_BOUNDS, world_boundary

logger = create_logger("region")

DEFAULT_AREA_EPSILON = 1e-12  # square degrees


class RegionState(str, Enum):
    """Feasible region states."""
    UNCONSTRAINED = "unconstrained"  # no clues yet: anywhere
    BOUNDED = "bounded"              # concrete polygon set
    EMPTY = "empty"                  # contradictory clues: nowhere


@dataclass(frozen=True)
class FeasibleRegion:
    """
    Set of locations consistent with every clue folded so far.

    Attributes:
        state: RegionState
        geometry: Polygon/MultiPolygon when BOUNDED, else None

    Invariants:
        - geometry is set (and non-empty) iff state == BOUNDED
    """

    state: RegionState
    geometry: Optional[BaseGeometry] = None

    def __post_init__(self):
        """Validate state/geometry pairing."""
        if self.state == RegionState.BOUNDED:
            if self.geometry is None or self.geometry.is_empty:
                raise ValueError("BOUNDED region requires a non-empty geometry")
        elif self.geometry is not None:
            raise ValueError(f"{self.state.value} region cannot carry a geometry")

    @classmethod
    def unconstrained(cls) -> "FeasibleRegion":
        return cls(state=RegionState.UNCONSTRAINED)

    @classmethod
    def empty(cls) -> "FeasibleRegion":
        return cls(state=RegionState.EMPTY)

    @classmethod
    def bounded(
        cls,
        geometry: BaseGeometry,
        area_epsilon: float = DEFAULT_AREA_EPSILON,
    ) -> "FeasibleRegion":
        """
        Wrap a clipping result, collapsing degenerate results to EMPTY.

        Non-polygonal parts (slivers reduced to lines/points) are dropped.
        """
        polygonal = polygonal_part(geometry)
        if polygonal.is_empty or polygonal.area <= area_epsilon:
            return cls.empty()
        return cls(state=RegionState.BOUNDED, geometry=polygonal)

    @property
    def is_unconstrained(self) -> bool:
        return self.state == RegionState.UNCONSTRAINED

    @property
    def is_bounded(self) -> bool:
        return self.state == RegionState.BOUNDED

    @property
    def is_empty(self) -> bool:
        return self.state == RegionState.EMPTY

    @property
    def area(self) -> float:
        """Planar area in square degrees (inf when unconstrained)."""
        if self.is_unconstrained:
            return float("inf")
        if self.is_empty:
            return 0.0
        return self.geometry.area

    def contains(self, point: LonLat) -> bool:
        """Whether a location is still possible."""
        if self.is_unconstrained:
            return True
        if self.is_empty:
            return False
        return self.geometry.contains(Point(point.lon, point.lat))

    def equals(self, other: "FeasibleRegion", tolerance: float = 1e-9) -> bool:
        """Same state and, when bounded, geometrically equal within tolerance."""
        if self.state != other.state:
            return False
        if not self.is_bounded:
            return True
        return self.geometry.symmetric_difference(other.geometry).area <= tolerance


def polygonal_part(geometry: BaseGeometry) -> BaseGeometry:
    """Keep only the areal parts of a geometry."""
    if geometry is None or geometry.is_empty:
        return Polygon()
    if isinstance(geometry, (Polygon, MultiPolygon)):
        return geometry
    if isinstance(geometry, GeometryCollection):
        parts = [
            g for g in geometry.geoms
            if isinstance(g, (Polygon, MultiPolygon)) and not g.is_empty
        ]
        return unary_union(parts) if parts else Polygon()
    return Polygon()


def _repair(geometry: BaseGeometry) -> BaseGeometry:
    """Repair self-intersections the usual way (zero-width buffer)."""
    if geometry.is_valid:
        return geometry
    return geometry.buffer(0)


def _base(region: FeasibleRegion, bounds: Tuple[float, float, float, float]) -> BaseGeometry:
    if region.is_unconstrained:
        return world_boundary(bounds)
    return region.geometry


def intersect(
    region: FeasibleRegion,
    shape: BaseGeometry,
    area_epsilon: float = DEFAULT_AREA_EPSILON,
    bounds: Tuple[float, float, float, float] = WORLD_BOUNDS,
) -> FeasibleRegion:
    """
    Restrict region to shape ("target is inside shape").

    - UNCONSTRAINED -> shape (clipped to the world boundary)
    - BOUNDED       -> region ∩ shape, EMPTY if disjoint
    - EMPTY         -> EMPTY

    Clipping failures leave region unchanged.
    """
    if region.is_empty:
        return region
    try:
        result = _repair(_base(region, bounds)).intersection(_repair(shape))
    except (GEOSException, ValueError) as e:
        logger.error(
            event=LogEvent.REGION_OP_FAILED,
            message="intersect failed; step ignored",
            metadata={'operation': 'intersect', 'state': region.state.value},
            exc_info=e,
        )
        return region
    return FeasibleRegion.bounded(result, area_epsilon)


def difference(
    region: FeasibleRegion,
    shape: BaseGeometry,
    area_epsilon: float = DEFAULT_AREA_EPSILON,
    bounds: Tuple[float, float, float, float] = WORLD_BOUNDS,
) -> FeasibleRegion:
    """
    Remove shape from region ("target is not inside shape").

    - UNCONSTRAINED -> world boundary - shape
    - BOUNDED       -> region - shape, EMPTY if nothing remains
    - EMPTY         -> EMPTY

    Clipping failures leave region unchanged.
    """
    if region.is_empty:
        return region
    try:
        result = _repair(_base(region, bounds)).difference(_repair(shape))
    except (GEOSException, ValueError) as e:
        logger.error(
            event=LogEvent.REGION_OP_FAILED,
            message="difference failed; step ignored",
            metadata={'operation': 'difference', 'state': region.state.value},
            exc_info=e,
        )
        return region
    return FeasibleRegion.bounded(result, area_epsilon)
