"""
Clue Schema
===========

Bounded Context: Clue Data Structures

A clue is one resolved yes/no spatial question. The enclosing game produces
clues; the deduction engine consumes an ordered list of them.

Design:
- ClueKind: which spatial question was asked
- Clue: immutable record {id, kind, params, outcome, sequence}
- Identity fields are validated at construction; geometry parameters are
  validated when the clue is mapped to a constraint, so a clue with bad
  params can still sit in a history and be skipped there.

Params by kind (canonical keys):
    PROXIMITY:              center [lon, lat], radius_m
    COMPARATIVE_DISTANCE:   point_a [lon, lat], point_b [lon, lat]
    EXCLUSION_BY_REFERENCE: destination [lon, lat], reference_point [lon, lat]
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping


class ClueKind(str, Enum):
    """Spatial question kinds understood by the deduction engine."""
    PROXIMITY = "PROXIMITY"
    COMPARATIVE_DISTANCE = "COMPARATIVE_DISTANCE"
    EXCLUSION_BY_REFERENCE = "EXCLUSION_BY_REFERENCE"


@dataclass(frozen=True)
class Clue:
    """
    Immutable resolved clue.

    Attributes:
        id: Caller-assigned identifier (unique within a history)
        kind: ClueKind
        outcome: Resolved answer (True = yes / inside / closer to point_b)
        sequence: Total order key (timestamp or monotonic counter)
        params: Kind-specific geometry parameters (see module docstring)

    Invariants:
        - id is non-empty
        - outcome is a bool
        - sequence is a finite number

    Example:
        >>> clue = Clue(
        ...     id="q-1",
        ...     kind=ClueKind.PROXIMITY,
        ...     params={'center': [0.0, 0.0], 'radius_m': 1000},
        ...     outcome=True,
        ...     sequence=1,
        ... )
    """
    id: str
    kind: ClueKind
    outcome: bool
    sequence: float
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate identity fields and normalise kind/params."""
        if not self.id:
            raise ValueError("Clue id cannot be empty")

        try:
            kind = ClueKind(self.kind)
        except ValueError as e:
            raise ValueError(
                f"Invalid clue kind: {self.kind!r}. "
                f"Must be one of {[k.value for k in ClueKind]}"
            ) from e
        object.__setattr__(self, 'kind', kind)

        if not isinstance(self.outcome, bool):
            raise ValueError(f"Clue outcome must be bool, got {type(self.outcome).__name__}")

        if (
            isinstance(self.sequence, bool)
            or not isinstance(self.sequence, (int, float))
            or not math.isfinite(self.sequence)
        ):
            raise ValueError(f"Clue sequence must be a finite number, got {self.sequence!r}")

        params = self.params if self.params is not None else {}
        if not isinstance(params, Mapping):
            raise ValueError(f"Clue params must be a mapping, got {type(params).__name__}")
        object.__setattr__(self, 'params', dict(params))

    @property
    def sort_key(self):
        """Fold order: sequence first, id as a stable tiebreak."""
        return (self.sequence, self.id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'id': self.id,
            'kind': self.kind.value,
            'params': dict(self.params),
            'outcome': self.outcome,
            'sequence': self.sequence,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Clue':
        """Deserialize from dict.

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(
                id=str(data['id']),
                kind=data['kind'],
                params=data.get('params') or {},
                outcome=data['outcome'],
                sequence=data['sequence'],
            )
        except KeyError as e:
            raise ValueError(f"Missing required Clue field: {e}") from e
