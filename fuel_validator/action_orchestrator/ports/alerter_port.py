"""Port for supervisor alerts."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IAlerter(ABC):
    """Notifies fleet supervisors about events that need attention."""

    @abstractmethod
    def alert(self, severity: str, message: str, context: Dict[str, Any] = None) -> bool:
        """
        Notify supervisors.

        Args:
            severity: Severity value of the triggering issues (high for auto-rejections)
            message: One line naming the event and its summary
            context: Event fields and the serialized error list

        Returns:
            Whether the notification was delivered
        """
