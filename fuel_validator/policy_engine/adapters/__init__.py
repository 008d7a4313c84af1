"""Adapters (implementations) for policy engine module."""

from fuel_validator.policy_engine.adapters.memory_threshold_provider import MemoryThresholdProvider
from fuel_validator.policy_engine.adapters.rule_policy_evaluator import RulePolicyEvaluator
from fuel_validator.policy_engine.adapters.yaml_policy_loader import YAMLPolicyLoader

__all__ = [
    "YAMLPolicyLoader",
    "MemoryThresholdProvider",
    "RulePolicyEvaluator",
]
