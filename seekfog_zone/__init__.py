"""
Seekfog Zone
============

Bounded Context: Spatial deduction for hide-and-seek.

Design Philosophy:
- Separation of Concerns: Geometry and Deduction separated
- Pure functions: fold(history) -> region, mask(region) -> fog
- Pragmatismo > Purismo: shapely does the clipping, we don't reinvent it

Architecture:

    seekfog_zone/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── geodesy.py     # distance, bearing, midpoint, local offsets
    │   ├── shapes.py      # disk, bisector half-plane, world boundary
    │   └── region.py      # FeasibleRegion, intersect, difference
    │
    ├── deduction/         # Clue semantics (stateless)
    │   ├── constraints.py # Clue -> Constraint
    │   ├── fold.py        # history -> FeasibleRegion
    │   ├── mask.py        # FeasibleRegion -> FogMask
    │   ├── engine.py      # deduce() = fold + mask
    │   └── overlays.py    # bisector debug overlays
    │
    └── config.py          # EngineConfig

Usage:

    from seekfog_clues import Clue, ClueKind
    from seekfog_zone import deduce

    history = [
        Clue(id="q-1", kind=ClueKind.PROXIMITY, outcome=True, sequence=1,
             params={'center': [-2.70, 53.76], 'radius_m': 8046}),
        Clue(id="q-2", kind=ClueKind.COMPARATIVE_DISTANCE, outcome=False, sequence=2,
             params={'point_a': [-2.70, 53.76], 'point_b': [-2.69, 53.77]}),
    ]

    result = deduce(history)
    if result.mask is not None:
        feature = result.mask.to_geojson()
"""

# Configuration
from seekfog_zone.config import DEFAULT_CONFIG, EngineConfig

# Geometry Layer (immutable, stateless)
from seekfog_zone.geometry import (
    FeasibleRegion,
    RegionState,
    bisector_half_plane,
    bisector_line,
    difference,
    disk,
    intersect,
    play_area,
    play_area_mask,
    world_boundary,
)

# Deduction Layer (stateless)
from seekfog_zone.deduction import (
    DeductionResult,
    bisector_overlays,
    FogMask,
    FoldOperator,
    MalformedClueError,
    constraint_for,
    deduce,
    fold,
    fold_with_report,
    mask,
)

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "EngineConfig",
    # Geometry
    "FeasibleRegion",
    "RegionState",
    "bisector_half_plane",
    "bisector_line",
    "difference",
    "disk",
    "intersect",
    "play_area",
    "play_area_mask",
    "world_boundary",
    # Deduction
    "DeductionResult",
    "bisector_overlays",
    "FogMask",
    "FoldOperator",
    "MalformedClueError",
    "constraint_for",
    "deduce",
    "fold",
    "fold_with_report",
    "mask",
]

__version__ = "0.1.0"
