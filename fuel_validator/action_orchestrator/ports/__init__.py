"""Ports (interfaces) for action orchestrator module."""

from fuel_validator.action_orchestrator.ports.alerter_port import IAlerter
from fuel_validator.action_orchestrator.ports.idempotency_store_port import IIdempotencyStore
from fuel_validator.action_orchestrator.ports.logger_port import ILogger

__all__ = [
    "ILogger",
    "IAlerter",
    "IIdempotencyStore",
]
