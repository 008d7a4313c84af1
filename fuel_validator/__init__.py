"""Compliance validation for fuel dispensing events."""

from fuel_validator.core.evaluation_context import EvaluationContext, PumpSite, VehicleKind, VehicleProfile
from fuel_validator.core.exceptions import (
    DuplicateThresholdError,
    FuelValidatorException,
    InvalidEventError,
    PolicyLoadError,
    PolicyNotFoundError,
)
from fuel_validator.core.models import (
    ErrorCategory,
    EvidenceItem,
    EvidenceKind,
    EvidenceMetadata,
    FuelEvent,
    FuelPolicy,
    Severity,
    ValidationIssue,
    ValidationResult,
    VehicleThreshold,
    WarningCategory,
)
from fuel_validator.core.review.summary import severity_color, should_auto_reject, summarize
from fuel_validator.policy_engine import evaluate

__all__ = [
    "evaluate",
    "severity_color",
    "summarize",
    "should_auto_reject",
    "EvaluationContext",
    "PumpSite",
    "VehicleKind",
    "VehicleProfile",
    "ErrorCategory",
    "EvidenceItem",
    "EvidenceKind",
    "EvidenceMetadata",
    "FuelEvent",
    "FuelPolicy",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "VehicleThreshold",
    "WarningCategory",
    "FuelValidatorException",
    "InvalidEventError",
    "PolicyLoadError",
    "PolicyNotFoundError",
    "DuplicateThresholdError",
]
