"""Stdout review log adapter."""

import json
from typing import Any, Dict

from fuel_validator.action_orchestrator.ports.logger_port import ILogger


class PrintLogger(ILogger):
    """Writes review outcomes to stdout, one line per entry."""

    def log(self, level: str, message: str, **kwargs) -> None:
        line = f"[{level.upper()}] {message}"
        if kwargs:
            fields = " ".join(f"{key}={value}" for key, value in kwargs.items())
            line = f"{line} | {fields}"
        print(line, flush=True)

    def log_structured(self, data: Dict[str, Any]) -> None:
        # datetimes and enums in the context are rendered with str()
        print(json.dumps(data, default=str, sort_keys=True), flush=True)
