"""Ports (interfaces) for policy engine module."""

from fuel_validator.policy_engine.ports.policy_evaluator_port import IPolicyEvaluator
from fuel_validator.policy_engine.ports.policy_loader_port import IPolicyLoader
from fuel_validator.policy_engine.ports.threshold_provider_port import IThresholdProvider

__all__ = [
    "IPolicyEvaluator",
    "IPolicyLoader",
    "IThresholdProvider",
]
