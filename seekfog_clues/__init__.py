"""
Seekfog Clues
=============

Bounded Context: Clue data and observability for the deduction engine.

Architecture:

    seekfog_clues/
    ├── schemas/           # Immutable clue types + stored-row adapter
    └── logging/           # Structured JSON logging (LogEvent taxonomy)

Example:
    >>> from seekfog_clues import Clue, ClueKind
    >>> clue = Clue(
    ...     id="q-1",
    ...     kind=ClueKind.PROXIMITY,
    ...     outcome=True,
    ...     sequence=1,
    ...     params={'center': [0.0, 0.0], 'radius_m': 1000},
    ... )
"""

from .schemas import (
    LonLat,
    Clue,
    ClueKind,
    clue_from_record,
    clues_from_records,
)
from .logging import LogEvent, StructuredLogger, create_logger

__all__ = [
    # Schemas
    'LonLat',
    'Clue',
    'ClueKind',
    'clue_from_record',
    'clues_from_records',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]

__version__ = "0.1.0"
