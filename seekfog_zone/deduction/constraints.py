"""
Clue -> Constraint Mapping
==========================

Each clue kind maps to one shape plus the operator that folds it:

    kind                    outcome  shape                              operator
    PROXIMITY               True     disk(center, radius_m)             INTERSECT
    PROXIMITY               False    disk(center, radius_m)             DIFFERENCE
    COMPARATIVE_DISTANCE    True     half-plane toward point_b          INTERSECT
    COMPARATIVE_DISTANCE    False    half-plane toward point_a          INTERSECT
    EXCLUSION_BY_REFERENCE  any      disk(destination, |ref - dest|)    DIFFERENCE

The operator is fixed by kind + outcome. A comparative clue always
intersects: its two outcomes are complementary half-planes.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping

from shapely.geometry.base import BaseGeometry

from seekfog_clues.schemas import Clue, ClueKind, LonLat
from seekfog_zone.config import DEFAULT_CONFIG, EngineConfig
from seekfog_zone.geometry.geodesy import distance_m
from seekfog_zone.geometry.shapes import bisector_half_plane, disk


class MalformedClueError(ValueError):
    """Raised when a clue's geometry parameters are missing or invalid"""
    pass


class FoldOperator(str, Enum):
    """How a constraint shape combines with the feasible region."""
    INTERSECT = "intersect"
    DIFFERENCE = "difference"


@dataclass(frozen=True)
class Constraint:
    """
    Shape derived from exactly one clue.

    Attributes:
        clue_id: Source clue
        shape: Polygon in (lon, lat)
        operator: INTERSECT (target inside shape) or DIFFERENCE (outside)
    """

    clue_id: str
    shape: BaseGeometry
    operator: FoldOperator


def _point(params: Mapping[str, Any], key: str) -> LonLat:
    if params.get(key) is None:
        raise MalformedClueError(f"missing parameter '{key}'")
    try:
        return LonLat.from_sequence(params[key])
    except ValueError as e:
        raise MalformedClueError(f"parameter '{key}': {e}") from e


def _number(params: Mapping[str, Any], key: str) -> float:
    value = params.get(key)
    if value is None:
        raise MalformedClueError(f"missing parameter '{key}'")
    if isinstance(value, bool):
        raise MalformedClueError(f"parameter '{key}' must be numeric, got bool")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedClueError(f"parameter '{key}' must be numeric, got {value!r}") from e
    if not math.isfinite(number):
        raise MalformedClueError(f"parameter '{key}' must be finite, got {value!r}")
    return number


def _proximity(clue: Clue, config: EngineConfig) -> Constraint:
    center = _point(clue.params, "center")
    radius_m = _number(clue.params, "radius_m")
    return Constraint(
        clue_id=clue.id,
        shape=disk(center, radius_m, config.disk_steps),
        operator=FoldOperator.INTERSECT if clue.outcome else FoldOperator.DIFFERENCE,
    )


def _comparative_distance(clue: Clue, config: EngineConfig) -> Constraint:
    a = _point(clue.params, "point_a")
    b = _point(clue.params, "point_b")
    return Constraint(
        clue_id=clue.id,
        shape=bisector_half_plane(a, b, side_toward_b=clue.outcome,
                                  half_width_m=config.half_plane_width_m),
        operator=FoldOperator.INTERSECT,
    )


def _exclusion_by_reference(clue: Clue, config: EngineConfig) -> Constraint:
    destination = _point(clue.params, "destination")
    reference = _point(clue.params, "reference_point")
    return Constraint(
        clue_id=clue.id,
        shape=disk(destination, distance_m(reference, destination), config.disk_steps),
        operator=FoldOperator.DIFFERENCE,
    )


_BUILDERS: Dict[ClueKind, Callable[[Clue, EngineConfig], Constraint]] = {
    ClueKind.PROXIMITY: _proximity,
    ClueKind.COMPARATIVE_DISTANCE: _comparative_distance,
    ClueKind.EXCLUSION_BY_REFERENCE: _exclusion_by_reference,
}


def constraint_for(clue: Clue, config: EngineConfig = DEFAULT_CONFIG) -> Constraint:
    """
    Map a clue to its constraint.

    Args:
        clue: Resolved clue
        config: Geometry construction parameters

    Returns:
        Constraint (shape + fold operator)

    Raises:
        MalformedClueError: Missing/invalid params or degenerate geometry
            (coincident comparison points, center at a pole)
    """
    builder = _BUILDERS.get(clue.kind)
    if builder is None:
        raise MalformedClueError(f"no constraint mapping for kind {clue.kind!r}")
    try:
        return builder(clue, config)
    except MalformedClueError:
        raise
    except ValueError as e:
        raise MalformedClueError(str(e)) from e
