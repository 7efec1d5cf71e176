"""
Question Record Adapter
=======================

Bounded Context: Translation from stored game questions to Clues

The game stores each asked question as a row (category, free-form params,
answer text, status, creation time). Only answered questions of the three
deduction categories feed the engine.

Row shape:
    {
        "id": "8c1e...",
        "category": "radar" | "thermometer" | "travel_agent" | ...,
        "params": {...},              # legacy keys, see _PARAM_RENAMES
        "answer_text": "YES" | "NO" | "HOTTER" | "COLDER" | ...,
        "status": "answered" | "pending" | ...,
        "created_at": "2026-03-01T12:00:00Z"
    }
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping

from ..logging import LogEvent, create_logger
from .clue import Clue, ClueKind

logger = create_logger("records")

ANSWERED_STATUS = "answered"

CATEGORY_KINDS: Dict[str, ClueKind] = {
    "RADAR": ClueKind.PROXIMITY,
    "THERMOMETER": ClueKind.COMPARATIVE_DISTANCE,
    "TRAVEL_AGENT": ClueKind.EXCLUSION_BY_REFERENCE,
}

# Stored key -> canonical key, per kind
_PARAM_RENAMES: Dict[ClueKind, Dict[str, str]] = {
    ClueKind.PROXIMITY: {"radius": "radius_m"},
    ClueKind.COMPARATIVE_DISTANCE: {"start": "point_a", "end": "point_b"},
    ClueKind.EXCLUSION_BY_REFERENCE: {"dest": "destination", "seekerLoc": "reference_point"},
}

_AFFIRMATIVE_ANSWERS = ("YES", "HOTTER")


def parse_answer(answer_text: Any) -> bool:
    """YES/HOTTER anywhere in the answer text means True."""
    text = str(answer_text or "").upper()
    return any(token in text for token in _AFFIRMATIVE_ANSWERS)


def parse_timestamp_ms(value: Any) -> float:
    """
    Convert an ISO 8601 timestamp (or epoch milliseconds) to epoch ms.

    Naive timestamps are taken as UTC.

    Raises:
        ValueError: If value cannot be interpreted
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp() * 1000.0


def canonical_params(kind: ClueKind, params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Rename stored param keys to canonical ones; canonical keys win.

    Raises:
        ValueError: If params is not a mapping
    """
    if params is None:
        params = {}
    if not isinstance(params, Mapping):
        raise ValueError(f"Question params must be a mapping, got {type(params).__name__}")
    result = dict(params)
    for stored, canonical in _PARAM_RENAMES[kind].items():
        if stored in result:
            value = result.pop(stored)
            result.setdefault(canonical, value)
    return result


def clue_from_record(row: Mapping[str, Any]) -> Clue:
    """
    Translate one stored question row into a Clue.

    Args:
        row: Stored question (see module docstring)

    Returns:
        Clue with canonical params and sequence = creation time in epoch ms

    Raises:
        ValueError: Unsupported category, missing id/timestamp
    """
    category = str(row.get("category") or "").upper()
    if category not in CATEGORY_KINDS:
        raise ValueError(
            f"Unsupported question category: {row.get('category')!r}. "
            f"Must be one of {sorted(CATEGORY_KINDS)}"
        )
    kind = CATEGORY_KINDS[category]

    if "created_at" in row and row["created_at"] is not None:
        sequence = parse_timestamp_ms(row["created_at"])
    elif "sequence" in row:
        sequence = row["sequence"]
    else:
        raise ValueError(f"Question {row.get('id')!r} has no created_at or sequence")

    return Clue(
        id=str(row.get("id") or ""),
        kind=kind,
        outcome=parse_answer(row.get("answer_text")),
        sequence=sequence,
        params=canonical_params(kind, row.get("params")),
    )


def clues_from_records(rows: Iterable[Mapping[str, Any]]) -> List[Clue]:
    """
    Keep answered deduction questions and translate them to Clues.

    Rows that are pending, of a non-deduction category, or unparseable are
    left out; unparseable rows are logged.
    """
    clues: List[Clue] = []
    for row in rows:
        if row.get("status") != ANSWERED_STATUS:
            continue
        if str(row.get("category") or "").upper() not in CATEGORY_KINDS:
            continue
        try:
            clues.append(clue_from_record(row))
        except ValueError as e:
            logger.warning(
                event=LogEvent.CLUE_SKIPPED,
                message="Dropping unparseable question record",
                metadata={'record_id': row.get("id")},
                exc_info=e,
            )
    return clues
