"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the deduction engine's structured logs.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (category.action)
- Searchable in log aggregators

Event Naming Convention:
    <category>.<action>

    category: clue, region, fold, mask, config, history, listener
    action: applied, skipped, failed, derived, ...

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.clue_id
    | filter event = "clue.skipped"
    | stats count() by bin(5m)
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - clue.*: Per-clue processing during a fold
    - region.*: Boolean operations on regions
    - fold.* / mask.*: Whole-history results
    - config.*, history.*, listener.*: Service adapter plumbing
    """

    # ========== Clue Events ==========
    CLUE_APPLIED = "clue.applied"
    """Clue mapped to a constraint and folded into the region."""

    CLUE_SKIPPED = "clue.skipped"
    """Clue had malformed parameters and contributed nothing."""

    # ========== Region Events ==========
    REGION_OP_FAILED = "region.op_failed"
    """Clipping raised; the step was treated as a no-op."""

    REGION_CONTRADICTION = "region.contradiction"
    """Feasible region became empty (contradictory clues)."""

    # ========== Result Events ==========
    FOLD_COMPLETED = "fold.completed"
    """History folded into a feasible region."""

    MASK_DERIVED = "mask.derived"
    """Fog mask derived from the feasible region."""

    MASK_FAILED = "mask.failed"
    """Mask derivation raised; no mask is produced."""

    # ========== Service Events ==========
    CONFIG_LOADED = "config.loaded"
    """Service configuration loaded from YAML."""

    HISTORY_UPDATED = "history.updated"
    """Clue buffer changed and the deduction was recomputed."""

    LISTENER_FAILED = "listener.failed"
    """A result listener raised while being notified."""


# Event categories for filtering
CLUE_EVENTS = {
    LogEvent.CLUE_APPLIED,
    LogEvent.CLUE_SKIPPED,
}

REGION_EVENTS = {
    LogEvent.REGION_OP_FAILED,
    LogEvent.REGION_CONTRADICTION,
}

ERROR_EVENTS = {
    LogEvent.REGION_OP_FAILED,
    LogEvent.MASK_FAILED,
    LogEvent.LISTENER_FAILED,
}
