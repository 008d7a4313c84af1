"""Structlog logger adapter."""

from typing import Dict, Any

import structlog

from fuel_validator.action_orchestrator.ports.logger_port import ILogger


class StructlogLogger(ILogger):
    """Structlog implementation for logging."""

    def __init__(self, name: str = "fuel_validator.review"):
        """Initialize structlog logger."""
        self._logger = structlog.get_logger(name)

    def log(self, level: str, message: str, **kwargs) -> None:
        getattr(self._logger, level)(message, **kwargs)

    def log_structured(self, data: Dict[str, Any]) -> None:
        event = data.get("event", "structured_log")
        payload = {key: value for key, value in data.items() if key != "event"}
        self._logger.info(event, **payload)
