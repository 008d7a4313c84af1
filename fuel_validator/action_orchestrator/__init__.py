"""Action Orchestrator module."""

from fuel_validator.action_orchestrator.orchestrator_service import (
    OrchestratorService,
    ReviewOutcome,
    ReviewStatus,
)
from fuel_validator.action_orchestrator.ports.alerter_port import IAlerter
from fuel_validator.action_orchestrator.ports.idempotency_store_port import IIdempotencyStore
from fuel_validator.action_orchestrator.ports.logger_port import ILogger

__all__ = [
    "OrchestratorService",
    "ReviewOutcome",
    "ReviewStatus",
    "ILogger",
    "IAlerter",
    "IIdempotencyStore",
]
