"""Null alerter adapter (no-op)."""

from typing import Any, Dict

from fuel_validator.action_orchestrator.ports.alerter_port import IAlerter


class NullAlerter(IAlerter):
    """Null implementation for alerting (no-op)."""

    def alert(self, severity: str, message: str, context: Dict[str, Any] = None) -> bool:
        return True
