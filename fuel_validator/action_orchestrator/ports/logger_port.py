"""Port for the review log."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ILogger(ABC):
    """Interface of the audit trail that records every review outcome."""

    @abstractmethod
    def log(self, level: str, message: str, **kwargs) -> None:
        """
        Record a human readable line.

        Args:
            level: debug, info, warning or error
            message: Line describing the outcome
            **kwargs: Event fields (event_id, status, vehicle_id, ...)
        """

    @abstractmethod
    def log_structured(self, data: Dict[str, Any]) -> None:
        """
        Record a machine readable entry.

        Args:
            data: Entry fields; ``data["event"]`` names the entry type
                (fuel_event_pending_review, fuel_event_auto_rejected)
        """
