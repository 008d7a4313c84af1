"""Memory-based idempotency store adapter."""

import threading
from typing import Any, Dict, Optional

from fuel_validator.action_orchestrator.ports.idempotency_store_port import IIdempotencyStore


class MemoryIdempotencyStore(IIdempotencyStore):
    """In-memory idempotency store implementation."""

    def __init__(self):
        """Initialize idempotency store."""
        self._store: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, event_id: str) -> Optional[Any]:
        with self._lock:
            return self._store.get(event_id)

    def store(self, event_id: str, outcome: Any) -> bool:
        """
        Store outcome for an event ID. The first stored outcome wins.

        Returns:
            True if stored, False if an outcome already existed
        """
        with self._lock:
            if event_id in self._store:
                return False
            self._store[event_id] = outcome
            return True
