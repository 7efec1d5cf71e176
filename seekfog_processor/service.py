"""
Deduction Service - Owner of the mutable clue history.

The engine itself is a pure function of the history. This service is the
thin adapter around it: it holds the caller's clue buffer, recomputes the
whole deduction after every change and hands each new result to
subscribers (map layer, realtime fan-out, ...).

Threading Model:
- Any thread may submit/retract clues
- Buffer mutations happen under _lock
- deduce() runs on a snapshot outside the lock
- A generation counter keeps a slow recompute from overwriting a newer one
"""

import threading
from typing import Callable, Dict, Iterable, List, Mapping, Any, Optional

from shapely.geometry import Polygon

from seekfog_clues.logging import LogEvent, StructuredLogger, create_logger
from seekfog_clues.schemas import Clue, clues_from_records
from seekfog_processor.config import ServiceConfig
from seekfog_zone.deduction import DeductionResult, bisector_overlays, deduce
from seekfog_zone.geometry import play_area_mask

ResultListener = Callable[[DeductionResult], None]


class DeductionService:
    """
    Clue buffer + recompute-on-change around the deduction engine.

    Thread Safety Guarantees:
    - submit(), submit_many(), retract(), clear(), replace_history():
      Write operations (acquire lock, recompute outside it)
    - history(), current(): Read operations (acquire lock briefly)
    - Listeners run on the mutating thread, outside the lock

    Usage:
        service = DeductionService(ServiceConfig.from_yaml("game.yaml"))
        unsubscribe = service.subscribe(lambda result: redraw(result.mask))

        service.submit(clue)          # recompute + notify
        service.retract(clue.id)      # recompute + notify

        mask = service.current().mask
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Initialize an empty service.

        Args:
            config: Service configuration (default: ServiceConfig())
            logger: Structured logger (default: "service" component)
        """
        self.config = config or ServiceConfig()
        self.logger = logger or create_logger("service", level=self.config.log_level_value)

        self._clues: Dict[str, Clue] = {}
        self._listeners: List[ResultListener] = []
        self._lock = threading.Lock()
        self._generation = 0
        self._result = deduce([], self.config.engine)

    # ------------------------------------------------------------------
    # History mutations
    # ------------------------------------------------------------------

    def submit(self, clue: Clue) -> DeductionResult:
        """
        Add a resolved clue, replacing any clue with the same id.

        Returns:
            The recomputed deduction
        """
        return self.submit_many([clue])

    def submit_many(self, clues: Iterable[Clue]) -> DeductionResult:
        """Add several clues with a single recompute."""
        clues = list(clues)
        with self._lock:
            for clue in clues:
                self._clues[clue.id] = clue
            generation, snapshot = self._bump()
        return self._recompute(generation, snapshot, reason="submit")

    def retract(self, clue_id: str) -> DeductionResult:
        """
        Remove a clue (e.g. its answer was vetoed).

        Raises:
            KeyError: If clue_id is not in the history
        """
        with self._lock:
            if clue_id not in self._clues:
                raise KeyError(f"Clue '{clue_id}' not found")
            del self._clues[clue_id]
            generation, snapshot = self._bump()
        return self._recompute(generation, snapshot, reason="retract")

    def clear(self) -> DeductionResult:
        """Drop every clue; the mask goes back to None."""
        return self.replace_history([])

    def replace_history(self, clues: Iterable[Clue]) -> DeductionResult:
        """Swap the whole buffer (e.g. after a full reload from storage)."""
        clues = list(clues)
        with self._lock:
            self._clues = {clue.id: clue for clue in clues}
            generation, snapshot = self._bump()
        return self._recompute(generation, snapshot, reason="replace")

    def load_records(self, rows: Iterable[Mapping[str, Any]]) -> DeductionResult:
        """Replace the buffer with the answered deduction questions in rows."""
        return self.replace_history(clues_from_records(rows))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def history(self) -> List[Clue]:
        """Snapshot of the buffer in fold order."""
        with self._lock:
            clues = list(self._clues.values())
        return sorted(clues, key=lambda clue: clue.sort_key)

    def current(self) -> DeductionResult:
        """Latest deduction."""
        with self._lock:
            return self._result

    def play_area_mask(self) -> Optional[Polygon]:
        """World-with-hole polygon hiding everything outside the play area."""
        play_area = self.config.play_area
        if play_area is None:
            return None
        center, radius_m = play_area
        return play_area_mask(
            center,
            radius_m,
            steps=self.config.engine.disk_steps,
            bounds=self.config.engine.world_bounds,
        )

    def bisector_overlays(self) -> Dict[str, Any]:
        """GeoJSON bisector lines + reference points for comparative clues."""
        return bisector_overlays(self.history(), self.config.engine)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """
        Register a callback for new results.

        Returns:
            Function that unregisters the listener
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _bump(self):
        """Advance the generation and snapshot the buffer. Caller holds _lock."""
        self._generation += 1
        return self._generation, list(self._clues.values())

    def _recompute(self, generation: int, snapshot: List[Clue], reason: str) -> DeductionResult:
        result = deduce(snapshot, self.config.engine)

        with self._lock:
            if generation < self._generation:
                # A newer mutation has its own recompute in flight
                return result
            self._result = result
            listeners = list(self._listeners)

        self.logger.info(
            event=LogEvent.HISTORY_UPDATED,
            message="Deduction recomputed",
            metadata={
                'service_id': self.config.service_id,
                'reason': reason,
                'clues': len(snapshot),
                **result.summary(),
            },
        )

        for listener in listeners:
            try:
                listener(result)
            except Exception as e:
                self.logger.error(
                    event=LogEvent.LISTENER_FAILED,
                    message="Result listener raised",
                    metadata={'service_id': self.config.service_id},
                    exc_info=e,
                )
        return result
