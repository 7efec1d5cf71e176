"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Structured logger that outputs one JSON object per log line.

Design:
- JSON output (compatible with log aggregators)
- Thread-safe (uses standard logging module)
- Contextual metadata (clue_id, kind, operation, ...)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="fold")
    >>> logger.warning(
    ...     event=LogEvent.CLUE_SKIPPED,
    ...     message="Skipping malformed clue",
    ...     metadata={'clue_id': 'q-7', 'kind': 'PROXIMITY'}
    ... )

Output:
    {
        "timestamp": "2026-10-18T15:30:45.123456+00:00",
        "level": "WARNING",
        "component": "fold",
        "event": "clue.skipped",
        "message": "Skipping malformed clue",
        "metadata": {"clue_id": "q-7", "kind": "PROXIMITY"}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    One JSON object per record, keyed by a LogEvent.

    Attributes:
        component: Module that owns the logger ("fold", "region", "service")
        logger: stdlib logger named seekfog.<component>; handlers, levels and
            propagation are the stdlib's
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "fold")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: seekfog.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"seekfog.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """Build the entry; skipped entirely below the logger's level."""
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Per-clue detail (clue.applied, fold.completed, mask.derived)."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """State changes worth keeping (history.updated, region.contradiction)."""
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """Dropped input (clue.skipped); exc_info is summarised, not traced."""
        self._log('WARNING', event, message, metadata, exc_info)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Degraded result (region.op_failed, mask.failed, listener.failed).

        The computation carries on; the entry records which step was lost
        and the exception's type and message.
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter for StructuredLogger records.

    The message produced by StructuredLogger is already a JSON document.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """Logger named seekfog.<component>, one per module."""
    return StructuredLogger(component=component, level=level)
