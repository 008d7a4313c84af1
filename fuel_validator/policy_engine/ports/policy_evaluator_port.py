"""Port for policy evaluation."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from fuel_validator.core.evaluation_context import EvaluationContext
from fuel_validator.core.models import (
    EvidenceItem,
    FuelEvent,
    FuelPolicy,
    ValidationResult,
    VehicleThreshold,
)


class IPolicyEvaluator(ABC):
    """Interface for evaluating a fuel event against company policy."""

    @abstractmethod
    def evaluate(
        self,
        event: FuelEvent,
        evidence: Iterable[EvidenceItem],
        policy: FuelPolicy,
        threshold: Optional[VehicleThreshold] = None,
        context: Optional[EvaluationContext] = None,
    ) -> ValidationResult:
        """
        Evaluate an event and its evidence.

        Args:
            event: Fuel event under review
            evidence: Evidence already scoped to the event
            policy: Resolved company policy
            threshold: Resolved vehicle threshold, possibly inactive
            context: Optional vehicle, pump and history facts

        Returns:
            ValidationResult with errors and warnings in check order
        """
        pass
