from typing import Any, Dict, Iterable, Optional, Protocol

from fuel_validator.action_orchestrator.orchestrator_service import ReviewOutcome
from fuel_validator.core.evaluation_context import EvaluationContext
from fuel_validator.core.exceptions import InvalidEventError
from fuel_validator.core.models import EvidenceItem, FuelEvent, ValidationResult


class IPolicyService(Protocol):
    """Interface of the policy service."""

    def evaluate(
        self,
        event: FuelEvent,
        evidence: Iterable[EvidenceItem],
        company_id: str,
        context: Optional[EvaluationContext] = None,
    ) -> ValidationResult: ...


class IOrchestratorService(Protocol):
    """Interface of the review orchestrator."""

    def execute(
        self, result: ValidationResult, event_id: str, context: Dict[str, Any] = None
    ) -> ReviewOutcome: ...


class EventReviewer:
    """
    Review service for submitted fuel events.

    Responsibility: validate an event against its company policy and
    route it to manual review or automatic rejection.
    """

    def __init__(
        self,
        policy_service: IPolicyService,
        orchestrator: IOrchestratorService,
    ) -> None:
        """
        Initialize the reviewer with the injected dependencies.

        Args:
            policy_service: Policy service
            orchestrator: Review orchestrator
        """
        self._policy_service = policy_service
        self._orchestrator = orchestrator

    def review(
        self,
        event: FuelEvent,
        evidence: Iterable[EvidenceItem],
        company_id: str = "default",
        context: Optional[EvaluationContext] = None,
    ) -> ReviewOutcome:
        """
        Validate an event and decide its review status.

        Args:
            event: Fuel event, must carry an event_id
            evidence: Evidence already scoped to the event
            company_id: Company whose policy applies
            context: Optional vehicle, pump and history facts

        Returns:
            ReviewOutcome for the event

        Raises:
            InvalidEventError: If the event has no event_id or breaks the input contract
            PolicyNotFoundError: If the company has no policy
        """
        if not isinstance(event, FuelEvent) or event.event_id is None:
            raise InvalidEventError("event_id", "value is required for review")

        result = self._policy_service.evaluate(
            event=event,
            evidence=evidence,
            company_id=company_id,
            context=context,
        )

        log_context = context.to_dict() if context is not None else {}
        log_context.update(company_id=company_id, vehicle_id=event.vehicle_id)
        return self._orchestrator.execute(result, event.event_id, log_context)
