"""
Bisector Overlays
=================

Debug overlay for comparative clues: the bisector segment each one folded
along, plus its two reference points and their midpoint.

                 point_b
                    *
      ------------- mid -------------   <- bisector, 2 * half length
                    *
                 point_a

Output is a GeoJSON FeatureCollection, one LineString and three Points per
clue. Clues whose points are missing, invalid or coincident are left out.
"""

from typing import Any, Dict, Iterable, List

from shapely.geometry import Point, mapping

from seekfog_clues.logging import LogEvent, create_logger
from seekfog_clues.schemas import Clue, ClueKind, LonLat
from seekfog_zone.config import DEFAULT_CONFIG, EngineConfig
from seekfog_zone.deduction.fold import order_history
from seekfog_zone.geometry.geodesy import midpoint
from seekfog_zone.geometry.shapes import bisector_line

logger = create_logger("overlays")


def _feature(geometry, clue_id: str, role: str) -> Dict[str, Any]:
    return {
        'type': 'Feature',
        'geometry': mapping(geometry),
        'properties': {'clue_id': clue_id, 'role': role},
    }


def bisector_overlays(
    history: Iterable[Clue],
    config: EngineConfig = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """
    Build bisector overlays for the comparative clues in a history.

    Args:
        history: Resolved clues, any order (non-comparative clues ignored)
        config: Supplies bisector_line_half_length_m

    Returns:
        GeoJSON FeatureCollection; feature properties carry clue_id and
        role ("bisector", "point_a", "point_b" or "mid")
    """
    features: List[Dict[str, Any]] = []

    for clue in order_history(history):
        if clue.kind != ClueKind.COMPARATIVE_DISTANCE:
            continue
        try:
            a = LonLat.from_sequence(clue.params.get('point_a'))
            b = LonLat.from_sequence(clue.params.get('point_b'))
            line = bisector_line(a, b, config.bisector_line_half_length_m)
        except ValueError as e:
            logger.debug(
                event=LogEvent.CLUE_SKIPPED,
                message="No bisector overlay for clue",
                metadata={'clue_id': clue.id, 'reason': str(e)},
            )
            continue

        mid = midpoint(a, b)
        features.append(_feature(line, clue.id, 'bisector'))
        features.append(_feature(Point(a.lon, a.lat), clue.id, 'point_a'))
        features.append(_feature(Point(b.lon, b.lat), clue.id, 'point_b'))
        features.append(_feature(Point(mid.lon, mid.lat), clue.id, 'mid'))

    return {
        'type': 'FeatureCollection',
        'features': features,
    }
