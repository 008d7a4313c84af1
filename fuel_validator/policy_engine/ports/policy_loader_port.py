"""Port for policy loading."""

from abc import ABC, abstractmethod
from typing import Dict

from fuel_validator.core.models import FuelPolicy


class IPolicyLoader(ABC):
    """Interface for loading company fuel policies (YAML, database, etc.)."""

    @abstractmethod
    def load(self) -> Dict[str, FuelPolicy]:
        """
        Load policies from source.

        Returns:
            Dictionary of policies keyed by company id
        """
        pass
