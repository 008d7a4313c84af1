"""Memory-based vehicle threshold provider adapter."""

from typing import Dict, Iterable, List, Optional

from fuel_validator.core.exceptions import DuplicateThresholdError
from fuel_validator.core.models import VehicleThreshold
from fuel_validator.policy_engine.ports.threshold_provider_port import IThresholdProvider


class MemoryThresholdProvider(IThresholdProvider):
    """In-memory threshold store keeping at most one active threshold per vehicle."""

    def __init__(self, thresholds: Optional[Iterable[VehicleThreshold]] = None):
        """Initialize threshold store."""
        self._thresholds: Dict[str, List[VehicleThreshold]] = {}
        for threshold in thresholds or ():
            self.register(threshold)

    def register(self, threshold: VehicleThreshold) -> None:
        """
        Add a threshold for its vehicle.

        Raises:
            DuplicateThresholdError: If the vehicle already has an active threshold
            ValueError: If the threshold has no vehicle_id
        """
        if threshold.vehicle_id is None:
            raise ValueError("Threshold must carry a vehicle_id to be registered")

        existing = self._thresholds.setdefault(str(threshold.vehicle_id), [])
        if threshold.active and any(item.active for item in existing):
            raise DuplicateThresholdError(threshold.vehicle_id)
        existing.append(threshold)

    def get_threshold(self, vehicle_id: str) -> Optional[VehicleThreshold]:
        """
        Get the threshold for a vehicle.

        The active threshold wins; otherwise the most recently registered
        inactive one is returned so the engine can ignore it.
        Vehicle ids are compared as strings, so 7 and "7" are the same vehicle.
        """
        candidates = self._thresholds.get(str(vehicle_id), [])
        for threshold in candidates:
            if threshold.active:
                return threshold
        return candidates[-1] if candidates else None
