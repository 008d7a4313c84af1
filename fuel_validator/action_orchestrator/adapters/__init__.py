"""Adapters (implementations) for action orchestrator module."""

from fuel_validator.action_orchestrator.adapters.memory_idempotency_store import MemoryIdempotencyStore
from fuel_validator.action_orchestrator.adapters.null_alerter import NullAlerter
from fuel_validator.action_orchestrator.adapters.print_logger import PrintLogger
from fuel_validator.action_orchestrator.adapters.structlog_logger import StructlogLogger

__all__ = [
    "StructlogLogger",
    "MemoryIdempotencyStore",
    "PrintLogger",
    "NullAlerter",
]
