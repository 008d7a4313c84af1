"""Action orchestrator service - turns validation results into review outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from fuel_validator.action_orchestrator.ports.alerter_port import IAlerter
from fuel_validator.action_orchestrator.ports.idempotency_store_port import IIdempotencyStore
from fuel_validator.action_orchestrator.ports.logger_port import ILogger
from fuel_validator.core.models import Severity, ValidationResult
from fuel_validator.core.review.summary import AUTO_REJECT_MIN_HIGH, should_auto_reject, summarize


class ReviewStatus(str, Enum):
    """Where an evaluated event goes next."""

    PENDING_REVIEW = "pending_review"
    AUTO_REJECTED = "auto_rejected"


@dataclass(frozen=True)
class ReviewOutcome:
    """Data structure for the review decision on one event."""

    event_id: str
    status: ReviewStatus
    summary: str
    high_errors: int
    result: ValidationResult

    @property
    def auto_rejected(self) -> bool:
        return self.status == ReviewStatus.AUTO_REJECTED


class OrchestratorService:
    """Service for orchestrating actions based on validation results."""

    def __init__(
        self,
        logger: ILogger,
        alerter: Optional[IAlerter] = None,
        idempotency_store: Optional[IIdempotencyStore] = None,
        auto_reject_min_high: int = AUTO_REJECT_MIN_HIGH,
    ):
        """
        Initialize orchestrator service with injected dependencies.

        Args:
            logger: Logger implementation
            alerter: Optional alerter implementation
            idempotency_store: Optional idempotency store implementation
            auto_reject_min_high: High severity errors needed to auto-reject
        """
        self.logger = logger
        self.alerter = alerter
        self.idempotency_store = idempotency_store
        self.auto_reject_min_high = auto_reject_min_high

    def execute(
        self,
        result: ValidationResult,
        event_id: str,
        context: Dict[str, Any] = None,
    ) -> ReviewOutcome:
        """
        Decide and record what happens to an evaluated event.

        Args:
            result: Validation result of the event
            event_id: Fuel event identifier
            context: Additional log context

        Returns:
            ReviewOutcome; a repeated event_id returns the first outcome
        """
        context = context or {}

        if self.idempotency_store:
            existing = self.idempotency_store.get(event_id)
            if existing:
                return self._repeat(event_id, existing)

        rejected = should_auto_reject(result, self.auto_reject_min_high)
        outcome = ReviewOutcome(
            event_id=event_id,
            status=ReviewStatus.AUTO_REJECTED if rejected else ReviewStatus.PENDING_REVIEW,
            summary=summarize(result),
            high_errors=result.count_by_severity(Severity.HIGH),
            result=result,
        )

        # Only the call that stores the outcome logs and alerts
        if self.idempotency_store and not self.idempotency_store.store(event_id, outcome):
            return self._repeat(event_id, self.idempotency_store.get(event_id))

        log_data = {
            "event_id": event_id,
            "status": outcome.status.value,
            "is_valid": result.is_valid,
            "errors": len(result.errors),
            "warnings": len(result.warnings),
            "high_errors": outcome.high_errors,
            "summary": outcome.summary,
            **context,
        }

        if rejected:
            self.logger.log("warning", f"Event auto-rejected: {outcome.summary}", **log_data)
            self.logger.log_structured({"event": "fuel_event_auto_rejected", **log_data})
            if self.alerter:
                self.alerter.alert(
                    severity=Severity.HIGH.value,
                    message=f"Fuel event {event_id} auto-rejected: {outcome.summary}",
                    context={**log_data, "issues": result.to_dict()["errors"]},
                )
        else:
            self.logger.log("info", "Event pending review", **log_data)
            self.logger.log_structured({"event": "fuel_event_pending_review", **log_data})

        return outcome

    def _repeat(self, event_id: str, existing: ReviewOutcome) -> ReviewOutcome:
        self.logger.log("debug", f"Event {event_id} already reviewed (idempotent)")
        return existing
