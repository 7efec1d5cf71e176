"""
Shared fixtures: clue factories for each kind.
"""

import pytest

from seekfog_clues.schemas import Clue, ClueKind


@pytest.fixture
def proximity():
    """Factory for PROXIMITY clues."""
    def _make(clue_id, sequence, center=(0.0, 0.0), radius_m=1000.0, outcome=True):
        return Clue(
            id=clue_id,
            kind=ClueKind.PROXIMITY,
            outcome=outcome,
            sequence=sequence,
            params={'center': list(center), 'radius_m': radius_m},
        )
    return _make


@pytest.fixture
def comparative():
    """Factory for COMPARATIVE_DISTANCE clues."""
    def _make(clue_id, sequence, point_a=(0.0, 0.0), point_b=(0.0, 1.0), outcome=True):
        return Clue(
            id=clue_id,
            kind=ClueKind.COMPARATIVE_DISTANCE,
            outcome=outcome,
            sequence=sequence,
            params={'point_a': list(point_a), 'point_b': list(point_b)},
        )
    return _make


@pytest.fixture
def exclusion():
    """Factory for EXCLUSION_BY_REFERENCE clues."""
    def _make(clue_id, sequence, destination=(0.0, 0.0), reference_point=(0.0, 0.01),
              outcome=False):
        return Clue(
            id=clue_id,
            kind=ClueKind.EXCLUSION_BY_REFERENCE,
            outcome=outcome,
            sequence=sequence,
            params={
                'destination': list(destination),
                'reference_point': list(reference_point),
            },
        )
    return _make
