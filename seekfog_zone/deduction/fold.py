"""
History Fold Module
===================

Folds an ordered clue history into a single feasible region.

Design:
- Pure function of the history: sort by (sequence, id), then one pass
- Full recompute on every call (difference does not commute, so there
  are no delta updates)
- Malformed clues are skipped and logged; clipping failures leave the
  region unchanged for that step
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from seekfog_clues.logging import LogEvent, create_logger
from seekfog_clues.schemas import Clue
from seekfog_zone.config import DEFAULT_CONFIG, EngineConfig
from seekfog_zone.deduction.constraints import (
    Constraint,
    FoldOperator,
    MalformedClueError,
    constraint_for,
)
from seekfog_zone.geometry.region import FeasibleRegion, difference, intersect

logger = create_logger("fold")


@dataclass(frozen=True)
class FoldReport:
    """
    Outcome of one fold.

    Attributes:
        region: Resulting feasible region
        applied: Clue ids folded into the region, in fold order
        skipped: Clue ids dropped for malformed parameters
        failed: Clue ids whose clipping step raised (region unchanged)
    """

    region: FeasibleRegion
    applied: Tuple[str, ...] = ()
    skipped: Tuple[str, ...] = ()
    failed: Tuple[str, ...] = ()


def order_history(history: Iterable[Clue]) -> list:
    """Fold order: by sequence, ties broken by id."""
    return sorted(history, key=lambda clue: clue.sort_key)


def apply_constraint(
    region: FeasibleRegion,
    constraint: Constraint,
    config: EngineConfig = DEFAULT_CONFIG,
) -> FeasibleRegion:
    """Fold one constraint into a region with its operator."""
    if constraint.operator == FoldOperator.INTERSECT:
        return intersect(region, constraint.shape, config.area_epsilon, config.world_bounds)
    return difference(region, constraint.shape, config.area_epsilon, config.world_bounds)


def fold_with_report(
    history: Iterable[Clue],
    config: EngineConfig = DEFAULT_CONFIG,
) -> FoldReport:
    """
    Fold a clue history, recording what happened to each clue.

    Args:
        history: Resolved clues, any order
        config: Geometry construction parameters

    Returns:
        FoldReport with the feasible region and per-clue bookkeeping
    """
    region = FeasibleRegion.unconstrained()
    applied, skipped, failed = [], [], []

    for clue in order_history(history):
        try:
            constraint = constraint_for(clue, config)
        except MalformedClueError as e:
            skipped.append(clue.id)
            logger.warning(
                event=LogEvent.CLUE_SKIPPED,
                message="Skipping malformed clue",
                metadata={'clue_id': clue.id, 'kind': clue.kind.value},
                exc_info=e,
            )
            continue

        previous = region
        region = apply_constraint(previous, constraint, config)

        # Region ops hand back their input unchanged only on failure (or EMPTY)
        if region is previous and not previous.is_empty:
            failed.append(clue.id)
            continue

        applied.append(clue.id)
        logger.debug(
            event=LogEvent.CLUE_APPLIED,
            message="Clue folded",
            metadata={
                'clue_id': clue.id,
                'kind': clue.kind.value,
                'operator': constraint.operator.value,
                'state': region.state.value,
            },
        )
        if region.is_empty and not previous.is_empty:
            logger.info(
                event=LogEvent.REGION_CONTRADICTION,
                message="Clues are contradictory; no location remains",
                metadata={'clue_id': clue.id},
            )

    logger.debug(
        event=LogEvent.FOLD_COMPLETED,
        message="History folded",
        metadata={
            'state': region.state.value,
            'applied': len(applied),
            'skipped': len(skipped),
            'failed': len(failed),
        },
    )
    return FoldReport(
        region=region,
        applied=tuple(applied),
        skipped=tuple(skipped),
        failed=tuple(failed),
    )


def fold(history: Iterable[Clue], config: EngineConfig = DEFAULT_CONFIG) -> FeasibleRegion:
    """Fold a clue history into its feasible region."""
    return fold_with_report(history, config).region
