"""
Seekfog Clue Schemas
====================

Bounded Context: Data Structures

Immutable, typed data structures for clues fed to the deduction engine.

Design:
- Frozen dataclasses (immutability)
- to_dict() / from_dict() for serialization
- Record adapter for stored question rows

Public API
----------
    LonLat: Geographic position (lon, lat)
    ClueKind: Enum (PROXIMITY, COMPARATIVE_DISTANCE, EXCLUSION_BY_REFERENCE)
    Clue: Resolved clue
    clue_from_record / clues_from_records: Stored question rows -> Clues
"""

from .common import LonLat
from .clue import Clue, ClueKind
from .records import (
    CATEGORY_KINDS,
    clue_from_record,
    clues_from_records,
    parse_answer,
)

__all__ = [
    'LonLat',
    'Clue',
    'ClueKind',
    'CATEGORY_KINDS',
    'clue_from_record',
    'clues_from_records',
    'parse_answer',
]
