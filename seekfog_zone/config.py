"""
Configuration schema for the deduction engine.

Geometry construction parameters shared by every fold: disk resolution,
bisector quadrilateral size, world boundary and the area below which a
region counts as empty.
"""

import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from seekfog_zone.geometry.region import DEFAULT_AREA_EPSILON
from seekfog_zone.geometry.shapes import (
    DEFAULT_BISECTOR_LINE_HALF_LENGTH_M,
    DEFAULT_DISK_STEPS,
    DEFAULT_HALF_PLANE_WIDTH_M,
    WORLD_BOUNDS,
)


@dataclass(frozen=True)
class EngineConfig:
    """
    Deduction engine configuration.

    Immutable after construction (frozen dataclass).
    """

    disk_steps: int = DEFAULT_DISK_STEPS
    half_plane_width_m: float = DEFAULT_HALF_PLANE_WIDTH_M
    bisector_line_half_length_m: float = DEFAULT_BISECTOR_LINE_HALF_LENGTH_M
    world_bounds: Tuple[float, float, float, float] = WORLD_BOUNDS
    area_epsilon: float = DEFAULT_AREA_EPSILON

    def __post_init__(self):
        """Validate engine configuration."""
        if not 8 <= self.disk_steps <= 4096:
            raise ValueError(
                f"disk_steps must be in [8, 4096], got {self.disk_steps}"
            )

        if not (math.isfinite(self.half_plane_width_m) and self.half_plane_width_m > 0):
            raise ValueError(
                f"half_plane_width_m must be > 0, got {self.half_plane_width_m}"
            )

        if not (
            math.isfinite(self.bisector_line_half_length_m)
            and self.bisector_line_half_length_m > 0
        ):
            raise ValueError(
                f"bisector_line_half_length_m must be > 0, "
                f"got {self.bisector_line_half_length_m}"
            )

        bounds = tuple(float(v) for v in self.world_bounds)
        if len(bounds) != 4:
            raise ValueError(
                f"world_bounds must be [min_lon, min_lat, max_lon, max_lat], "
                f"got {self.world_bounds}"
            )
        min_lon, min_lat, max_lon, max_lat = bounds
        if not (min_lon < max_lon and min_lat < max_lat):
            raise ValueError(f"world_bounds must have positive extent, got {bounds}")
        object.__setattr__(self, 'world_bounds', bounds)

        if not self.area_epsilon >= 0:
            raise ValueError(
                f"area_epsilon must be >= 0, got {self.area_epsilon}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """
        Build from a mapping (unknown keys are rejected).

        Raises:
            ValueError: On unknown keys or invalid values
        """
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown engine config keys: {sorted(unknown)}. "
                f"Valid keys: {sorted(known)}"
            )
        if "world_bounds" in data:
            data["world_bounds"] = tuple(data["world_bounds"])
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "EngineConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            disk_steps: 64
            half_plane_width_m: 100000
            bisector_line_half_length_m: 10000
            world_bounds: [-180, -90, 180, 90]
            area_epsilon: 1.0e-12
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)


DEFAULT_CONFIG = EngineConfig()
