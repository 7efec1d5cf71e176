"""
seekfog_processor - History-owning service around the deduction engine

Architecture:
- DeductionService: Clue buffer, recompute-on-change, result listeners
- ServiceConfig: Configuration management (YAML)

Threading Model:
- Mutations from any thread, serialized on an internal lock
- Fold runs outside the lock on a snapshot
"""

from seekfog_processor.config import ServiceConfig
from seekfog_processor.service import DeductionService

__all__ = [
    "ServiceConfig",
    "DeductionService",
]
