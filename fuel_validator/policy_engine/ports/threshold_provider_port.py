"""Port for vehicle threshold lookup."""

from abc import ABC, abstractmethod
from typing import Optional

from fuel_validator.core.models import VehicleThreshold


class IThresholdProvider(ABC):
    """Interface for resolving the threshold that applies to a vehicle."""

    @abstractmethod
    def get_threshold(self, vehicle_id: str) -> Optional[VehicleThreshold]:
        """
        Get the threshold for a vehicle.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            The single threshold for the vehicle, or None if none is configured
        """
        pass
