"""Policy Engine module."""

from typing import Iterable, Optional

from fuel_validator.core.evaluation_context import EvaluationContext
from fuel_validator.core.models import (
    EvidenceItem,
    FuelEvent,
    FuelPolicy,
    ValidationResult,
    VehicleThreshold,
)
from fuel_validator.policy_engine.adapters.rule_policy_evaluator import RulePolicyEvaluator
from fuel_validator.policy_engine.policy_service import PolicyService
from fuel_validator.policy_engine.ports.policy_evaluator_port import IPolicyEvaluator
from fuel_validator.policy_engine.ports.policy_loader_port import IPolicyLoader
from fuel_validator.policy_engine.ports.threshold_provider_port import IThresholdProvider

_default_evaluator = RulePolicyEvaluator()


def evaluate(
    event: FuelEvent,
    evidence: Iterable[EvidenceItem],
    policy: FuelPolicy,
    threshold: Optional[VehicleThreshold] = None,
    context: Optional[EvaluationContext] = None,
) -> ValidationResult:
    """Evaluate one event with the default check pipeline and built-in limits."""
    return _default_evaluator.evaluate(event, evidence, policy, threshold, context)


__all__ = [
    "evaluate",
    "PolicyService",
    "RulePolicyEvaluator",
    "IPolicyEvaluator",
    "IPolicyLoader",
    "IThresholdProvider",
]
