"""Rule pipeline policy evaluator adapter."""

from typing import Iterable, Optional, Sequence

from fuel_validator.config import DEFAULT_ENGINE_LIMITS, EngineConfig
from fuel_validator.core import guards
from fuel_validator.core.evaluation_context import EvaluationContext
from fuel_validator.core.models import (
    EvidenceItem,
    FuelEvent,
    FuelPolicy,
    ValidationResult,
    VehicleThreshold,
)
from fuel_validator.core.utils.decorators import log_execution_time
from fuel_validator.policy_engine.checks import DEFAULT_CHECKS, Check, CheckSubject, IssueCollector
from fuel_validator.policy_engine.ports.policy_evaluator_port import IPolicyEvaluator


class RulePolicyEvaluator(IPolicyEvaluator):
    """Runs every compliance check in a fixed order and aggregates the issues."""

    def __init__(
        self,
        limits: Optional[EngineConfig] = None,
        checks: Sequence[Check] = DEFAULT_CHECKS,
    ):
        """
        Initialize evaluator.

        Args:
            limits: Engine limits (built-in defaults when omitted)
            checks: Ordered checks to run
        """
        self.limits = limits if limits is not None else DEFAULT_ENGINE_LIMITS
        self.checks = tuple(checks)

    @log_execution_time()
    def evaluate(
        self,
        event: FuelEvent,
        evidence: Iterable[EvidenceItem],
        policy: FuelPolicy,
        threshold: Optional[VehicleThreshold] = None,
        context: Optional[EvaluationContext] = None,
    ) -> ValidationResult:
        """
        Evaluate an event against policy and threshold.

        Raises:
            InvalidEventError: If the input breaks the call contract
        """
        event = guards.check_event(event)
        subject = CheckSubject(
            event=event,
            evidence=guards.check_evidence(evidence),
            policy=guards.check_policy(policy),
            threshold=_active(guards.check_threshold(threshold)),
            context=guards.check_context(context, event),
            limits=self.limits,
        )

        issues = IssueCollector()
        for check in self.checks:
            check(subject, issues)
        return issues.result()


def _active(threshold: Optional[VehicleThreshold]) -> Optional[VehicleThreshold]:
    # An inactive threshold is treated as absent
    if threshold is None or not threshold.active:
        return None
    return threshold
