from typing import Any

from fuel_validator.core.models import Severity, ValidationResult

SEVERITY_COLORS = {
    "high": "red",
    "medium": "amber",
    "low": "blue",
}
DEFAULT_COLOR = "gray"

# Severity, label used in summaries
SUMMARY_LABELS = (
    (Severity.HIGH, "critical"),
    (Severity.MEDIUM, "moderate"),
    (Severity.LOW, "minor"),
)

AUTO_REJECT_MIN_HIGH = 2


def severity_color(severity: Any) -> str:
    """Map a severity to a badge color token, gray for anything unknown."""
    key = severity.value if isinstance(severity, Severity) else severity
    return SEVERITY_COLORS.get(key, DEFAULT_COLOR) if isinstance(key, str) else DEFAULT_COLOR


def summarize(result: ValidationResult) -> str:
    """One-line human readable summary of a validation result."""
    if result.is_valid:
        if result.warnings:
            return f"valid with {len(result.warnings)} warning(s)"
        return "event valid"

    parts = []
    for severity, label in SUMMARY_LABELS:
        count = result.count_by_severity(severity)
        if count > 0:
            parts.append(f"{count} {label}")
    if not parts:
        return f"{len(result.errors)} error(s)"
    return f"{len(result.errors)} error(s): {', '.join(parts)}"


def should_auto_reject(result: ValidationResult, min_high: int = AUTO_REJECT_MIN_HIGH) -> bool:
    """Two or more high severity errors bypass human review."""
    return result.count_by_severity(Severity.HIGH) >= min_high
