"""Policy service - resolves configuration and runs the evaluator."""

import logging
from typing import Dict, Iterable, Optional

from fuel_validator.core.evaluation_context import EvaluationContext
from fuel_validator.core.exceptions import PolicyNotFoundError
from fuel_validator.core.models import EvidenceItem, FuelEvent, FuelPolicy, ValidationResult
from fuel_validator.policy_engine.ports.policy_evaluator_port import IPolicyEvaluator
from fuel_validator.policy_engine.ports.policy_loader_port import IPolicyLoader
from fuel_validator.policy_engine.ports.threshold_provider_port import IThresholdProvider

logger = logging.getLogger(__name__)


class PolicyService:
    """Service for policy evaluation."""

    def __init__(
        self,
        evaluator: IPolicyEvaluator,
        loader: IPolicyLoader,
        threshold_provider: IThresholdProvider,
    ):
        """
        Initialize policy service with injected dependencies.

        Args:
            evaluator: Policy evaluator implementation
            loader: Policy loader implementation
            threshold_provider: Vehicle threshold provider implementation
        """
        self.evaluator = evaluator
        self.loader = loader
        self.threshold_provider = threshold_provider
        self._policies = None

    def _get_policies(self) -> Dict[str, FuelPolicy]:
        """Lazy load policies."""
        if self._policies is None:
            self._policies = self.loader.load()
        return self._policies

    def get_policy(self, company_id: str) -> FuelPolicy:
        policy = self._get_policies().get(company_id)
        if policy is None:
            raise PolicyNotFoundError(company_id)
        return policy

    def evaluate(
        self,
        event: FuelEvent,
        evidence: Iterable[EvidenceItem],
        company_id: str = "default",
        context: Optional[EvaluationContext] = None,
    ) -> ValidationResult:
        """
        Evaluate an event against its company policy and vehicle threshold.

        Args:
            event: Fuel event under review
            evidence: Evidence already scoped to the event
            company_id: Company whose policy applies
            context: Optional vehicle, pump and history facts

        Returns:
            ValidationResult from the evaluator

        Raises:
            PolicyNotFoundError: If the company has no policy
        """
        policy = self.get_policy(company_id)
        threshold = self.threshold_provider.get_threshold(event.vehicle_id)

        result = self.evaluator.evaluate(
            event=event,
            evidence=evidence,
            policy=policy,
            threshold=threshold,
            context=context,
        )
        logger.info(
            f"Evaluated event {event.event_id} for vehicle {event.vehicle_id}: "
            f"valid={result.is_valid} errors={len(result.errors)} warnings={len(result.warnings)}"
        )
        return result
