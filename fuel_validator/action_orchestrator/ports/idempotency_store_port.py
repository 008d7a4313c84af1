"""Port for idempotency storage."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IIdempotencyStore(ABC):
    """Interface for remembering outcomes already produced per event."""

    @abstractmethod
    def get(self, event_id: str) -> Optional[Any]:
        """
        Get stored outcome for an event ID.

        Args:
            event_id: Fuel event identifier

        Returns:
            Stored outcome or None if not found
        """
        pass

    @abstractmethod
    def store(self, event_id: str, outcome: Any) -> bool:
        """
        Store outcome for an event ID.

        Args:
            event_id: Fuel event identifier
            outcome: Outcome to store

        Returns:
            True if successful
        """
        pass
