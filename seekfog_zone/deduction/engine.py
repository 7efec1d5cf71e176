"""
Deduction Engine
================

fold + mask composed: history in, (feasible region, fog mask) out.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from seekfog_clues.schemas import Clue
from seekfog_zone.config import DEFAULT_CONFIG, EngineConfig
from seekfog_zone.deduction.fold import fold_with_report
from seekfog_zone.deduction.mask import FogMask, mask
from seekfog_zone.geometry.region import FeasibleRegion


@dataclass(frozen=True)
class DeductionResult:
    """
    Immutable snapshot of one deduction.

    Attributes:
        region: Feasible region after every clue
        mask: Fog mask (None when nothing is obscured)
        applied / skipped / failed: Clue ids, see FoldReport
    """

    region: FeasibleRegion
    mask: Optional[FogMask]
    applied: Tuple[str, ...] = ()
    skipped: Tuple[str, ...] = ()
    failed: Tuple[str, ...] = ()

    @property
    def is_contradiction(self) -> bool:
        return self.region.is_empty

    def summary(self) -> Dict[str, Any]:
        """JSON-compatible digest for logs and status endpoints."""
        return {
            'state': self.region.state.value,
            'has_mask': self.mask is not None,
            'applied': list(self.applied),
            'skipped': list(self.skipped),
            'failed': list(self.failed),
        }


def deduce(history: Iterable[Clue], config: EngineConfig = DEFAULT_CONFIG) -> DeductionResult:
    """
    Fold a clue history and derive its fog mask.

    Example:
        >>> result = deduce([
        ...     Clue(id="q-1", kind=ClueKind.PROXIMITY, outcome=True, sequence=1,
        ...          params={'center': [0.0, 0.0], 'radius_m': 1000}),
        ... ])
        >>> result.region.state
        <RegionState.BOUNDED: 'bounded'>
    """
    report = fold_with_report(history, config)
    return DeductionResult(
        region=report.region,
        mask=mask(report.region, config),
        applied=report.applied,
        skipped=report.skipped,
        failed=report.failed,
    )
