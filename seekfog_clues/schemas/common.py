"""
Common Schema Types
==================

Bounded Context: Shared Data Structures

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- Type Safety: All fields explicitly typed
- Serialization: to_list() for GeoJSON export
- Validation: Constructor validates invariants

Types:
- LonLat: Geographic position in decimal degrees
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class LonLat:
    """
    Immutable geographic position (GeoJSON axis order).

    Attributes:
        lon: Longitude in decimal degrees
        lat: Latitude in decimal degrees

    Invariants:
        - both finite
        - -180 <= lon <= 180
        - -90 <= lat <= 90

    Example:
        >>> LonLat(lon=-2.7034, lat=53.7577).to_list()
        [-2.7034, 53.7577]
    """
    lon: float
    lat: float

    def __post_init__(self):
        """Validate invariants."""
        if not (math.isfinite(self.lon) and math.isfinite(self.lat)):
            raise ValueError(f"LonLat must be finite, got ({self.lon}, {self.lat})")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude must be in [-180, 180], got {self.lon}")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude must be in [-90, 90], got {self.lat}")

    @classmethod
    def from_sequence(cls, value: Sequence[float]) -> 'LonLat':
        """Build from a ``[lon, lat]`` pair.

        Raises:
            ValueError: If value is not a numeric pair or out of range
        """
        if isinstance(value, LonLat):
            return value
        try:
            lon, lat = value
            return cls(lon=float(lon), lat=float(lat))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid [lon, lat] pair {value!r}: {e}") from e

    def to_list(self) -> List[float]:
        """Serialize to GeoJSON position."""
        return [self.lon, self.lat]

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lon, self.lat)
