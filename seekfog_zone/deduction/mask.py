"""
Fog Mask Module
===============

Derives the area to obscure from a feasible region:

    UNCONSTRAINED -> None (nothing to hide)
    BOUNDED       -> world boundary - region
    EMPTY         -> whole world boundary (contradiction, still drawable)

Rings follow the fill convention renderers expect: exteriors
counter-clockwise, holes clockwise.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from shapely.errors import GEOSException
from shapely.geometry import MultiPolygon, Point, Polygon, mapping
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient

from seekfog_clues.logging import LogEvent, create_logger
from seekfog_clues.schemas import LonLat
from seekfog_zone.config import DEFAULT_CONFIG, EngineConfig
from seekfog_zone.geometry.region import FeasibleRegion, polygonal_part
from seekfog_zone.geometry.shapes import world_boundary

logger = create_logger("mask")


def orient_rings(geometry: BaseGeometry) -> BaseGeometry:
    """Exterior rings CCW, interior rings CW, for Polygon or MultiPolygon."""
    if isinstance(geometry, Polygon):
        return orient(geometry, sign=1.0)
    if isinstance(geometry, MultiPolygon):
        return MultiPolygon([orient(p, sign=1.0) for p in geometry.geoms])
    raise TypeError(f"Expected Polygon or MultiPolygon, got {geometry.geom_type}")


@dataclass(frozen=True)
class FogMask:
    """
    Area to obscure on the map.

    Attributes:
        geometry: Polygon (world ring with the feasible region as holes)
            or MultiPolygon when the remainder is split
        is_full: True when the whole world is obscured (contradiction)
    """

    geometry: BaseGeometry
    is_full: bool = False

    @property
    def area(self) -> float:
        return self.geometry.area

    def covers(self, point: LonLat) -> bool:
        """Whether a location is obscured."""
        return self.geometry.intersects(Point(point.lon, point.lat))

    def to_geojson(self) -> Dict[str, Any]:
        """GeoJSON Feature."""
        return {
            'type': 'Feature',
            'geometry': mapping(self.geometry),
            'properties': {'full': self.is_full},
        }

    def to_feature_collection(self) -> Dict[str, Any]:
        """GeoJSON FeatureCollection holding the single mask feature."""
        return {
            'type': 'FeatureCollection',
            'features': [self.to_geojson()],
        }


def mask(region: FeasibleRegion, config: EngineConfig = DEFAULT_CONFIG) -> Optional[FogMask]:
    """
    Derive the fog mask for a feasible region.

    Returns:
        FogMask, or None when there is nothing to obscure (unconstrained,
        region covering the whole world, or a failed clipping step)
    """
    world = world_boundary(config.world_bounds)

    if region.is_unconstrained:
        return None

    if region.is_empty:
        logger.debug(
            event=LogEvent.MASK_DERIVED,
            message="Contradiction; obscuring whole world",
            metadata={'state': region.state.value},
        )
        return FogMask(geometry=orient_rings(world), is_full=True)

    try:
        remainder = polygonal_part(world.difference(region.geometry))
    except (GEOSException, ValueError) as e:
        logger.error(
            event=LogEvent.MASK_FAILED,
            message="Mask derivation failed; no mask produced",
            metadata={'state': region.state.value},
            exc_info=e,
        )
        return None

    if remainder.is_empty or remainder.area <= config.area_epsilon:
        return None

    logger.debug(
        event=LogEvent.MASK_DERIVED,
        message="Mask derived",
        metadata={'state': region.state.value, 'area': remainder.area},
    )
    return FogMask(geometry=orient_rings(remainder), is_full=False)
