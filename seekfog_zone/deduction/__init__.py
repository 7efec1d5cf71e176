"""
Deduction Layer
===============

Bounded Context: Turning resolved clues into a feasible region and a fog
mask.

Responsibilities:
- Clue -> constraint (shape + fold operator)
- Ordered fold of a clue history
- Mask derivation (world boundary - feasible region)
- Bisector overlays for comparative clues

Design Philosophy:
- Pure functions of the history (no state, no I/O)
- Deterministic: order comes from (sequence, id), never from arrival
- No fatal path: bad clues are skipped, failed clips are no-ops
"""

from seekfog_zone.deduction.constraints import (
    Constraint,
    FoldOperator,
    MalformedClueError,
    constraint_for,
)
from seekfog_zone.deduction.fold import FoldReport, fold, fold_with_report, order_history
from seekfog_zone.deduction.mask import FogMask, mask
from seekfog_zone.deduction.engine import DeductionResult, deduce
from seekfog_zone.deduction.overlays import bisector_overlays

__all__ = [
    "Constraint",
    "FoldOperator",
    "MalformedClueError",
    "constraint_for",
    "FoldReport",
    "fold",
    "fold_with_report",
    "order_history",
    "FogMask",
    "mask",
    "DeductionResult",
    "deduce",
    "bisector_overlays",
]
