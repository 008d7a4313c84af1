"""Individual compliance checks.

Every check reads a `CheckSubject` and appends zero or more issues to an
`IssueCollector`. Checks never depend on the outcome of other checks, so the
pipeline always reports the complete issue set for an event.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from fuel_validator.config import EngineConfig
from fuel_validator.core.evaluation_context import EvaluationContext, VehicleKind
from fuel_validator.core.models import (
    ErrorCategory,
    EvidenceItem,
    EvidenceKind,
    FuelEvent,
    FuelPolicy,
    Severity,
    ValidationIssue,
    ValidationResult,
    VehicleThreshold,
    WarningCategory,
)
from fuel_validator.policy_engine.geo import coordinates_in_range, haversine_meters


@dataclass(frozen=True)
class CheckSubject:
    """Everything a check may look at for one evaluation."""

    event: FuelEvent
    evidence: Tuple[EvidenceItem, ...]
    policy: FuelPolicy
    # None when absent or inactive
    threshold: Optional[VehicleThreshold]
    context: EvaluationContext
    limits: EngineConfig

    def has_evidence(self, kind: EvidenceKind) -> bool:
        return any(item.kind == kind for item in self.evidence)

    def first_evidence(self, kind: EvidenceKind) -> Optional[EvidenceItem]:
        return next((item for item in self.evidence if item.kind == kind), None)


class IssueCollector:
    """Accumulates errors and warnings in check execution order."""

    def __init__(self):
        self.errors: List[ValidationIssue] = []
        self.warnings: List[ValidationIssue] = []

    def error(self, category: ErrorCategory, message: str, severity: Severity) -> None:
        self.errors.append(ValidationIssue(category=category, message=message, severity=severity))

    def warning(self, category: WarningCategory, message: str) -> None:
        self.warnings.append(ValidationIssue(category=category, message=message))

    def result(self) -> ValidationResult:
        return ValidationResult(errors=tuple(self.errors), warnings=tuple(self.warnings))


Check = Callable[[CheckSubject, IssueCollector], None]


def fmt_number(value: float) -> str:
    """Render 200.0 as '200' and 55.25 as '55.25'."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


# Policy flag, evidence kind, label, severity when missing
REQUIRED_EVIDENCE = (
    ("require_pump_photo", EvidenceKind.PHOTO_PUMP, "Pump photo", Severity.HIGH),
    ("require_meter_photo", EvidenceKind.PHOTO_METER, "Meter photo", Severity.HIGH),
    ("require_odometer_photo", EvidenceKind.PHOTO_ODOMETER, "Odometer photo", Severity.MEDIUM),
    ("require_hour_meter_photo", EvidenceKind.PHOTO_HOURMETER, "Hour meter photo", Severity.MEDIUM),
    ("require_audio", EvidenceKind.AUDIO, "Voice note", Severity.MEDIUM),
)


def check_evidence_completeness(subject: CheckSubject, issues: IssueCollector) -> None:
    for flag, kind, label, severity in REQUIRED_EVIDENCE:
        if getattr(subject.policy, flag) and not subject.has_evidence(kind):
            issues.error(ErrorCategory.EVIDENCE, f"Required evidence missing: {label}", severity)


def check_geolocation(subject: CheckSubject, issues: IssueCollector) -> None:
    policy = subject.policy
    if not policy.require_geolocation:
        return

    location = subject.first_evidence(EvidenceKind.LOCATION)
    if location is None:
        issues.error(
            ErrorCategory.GEOLOCATION, "Required evidence missing: GPS location", Severity.HIGH
        )
        return

    if policy.geofence_radius_meters is None:
        return

    metadata = location.metadata
    if not metadata.has_coordinates or not coordinates_in_range(metadata.latitude, metadata.longitude):
        issues.error(ErrorCategory.GEOLOCATION, "GPS coordinates are not valid", Severity.HIGH)
        return

    pump = subject.context.pump
    if pump is None or not pump.has_coordinates:
        return

    distance = haversine_meters(metadata.latitude, metadata.longitude, pump.latitude, pump.longitude)
    if distance > policy.geofence_radius_meters:
        issues.error(
            ErrorCategory.GEOLOCATION,
            f"Location is {distance:.0f} m from pump {pump.pump_id}, "
            f"outside the {fmt_number(policy.geofence_radius_meters)} m geofence",
            Severity.HIGH,
        )


def check_liters_ceiling(subject: CheckSubject, issues: IssueCollector) -> None:
    ceiling = subject.policy.max_liters_per_load
    liters = subject.event.liters
    if liters > ceiling:
        issues.error(
            ErrorCategory.LITERS,
            f"Exceeds maximum liters per load ({fmt_number(ceiling)} L). "
            f"Loaded: {fmt_number(liters)} L",
            Severity.HIGH,
        )


def check_threshold_ceiling(subject: CheckSubject, issues: IssueCollector) -> None:
    threshold = subject.threshold
    if threshold is None or threshold.max_liters_absolute is None:
        return
    if subject.event.liters > threshold.max_liters_absolute:
        issues.error(
            ErrorCategory.THRESHOLD,
            f"Exceeds the vehicle's configured maximum load "
            f"({fmt_number(threshold.max_liters_absolute)} L). "
            f"Loaded: {fmt_number(subject.event.liters)} L",
            Severity.HIGH,
        )


def deviation_percent(liters: float, expected: float) -> Optional[float]:
    """Percentage distance from the expected average, None when undefined."""
    if expected is None or expected <= 0:
        return None
    return abs(liters - expected) * 100 / expected


def check_deviation(subject: CheckSubject, issues: IssueCollector) -> None:
    threshold = subject.threshold
    if threshold is None or threshold.deviation_tolerance_percent is None:
        return

    deviation = deviation_percent(subject.event.liters, threshold.expected_average_liters)
    if deviation is None:
        return

    tolerance = threshold.deviation_tolerance_percent
    limits = subject.limits
    if deviation > tolerance:
        severity = Severity.HIGH if deviation > tolerance * limits.high_severity_ratio else Severity.MEDIUM
        issues.error(
            ErrorCategory.THRESHOLD,
            f"Deviation of {deviation:.1f}% from the expected average "
            f"({fmt_number(threshold.expected_average_liters)} L) exceeds the "
            f"{fmt_number(tolerance)}% tolerance",
            severity,
        )
    elif deviation > tolerance * limits.near_limit_ratio:
        issues.warning(
            WarningCategory.DEVIATION,
            f"Deviation of {deviation:.1f}% is close to the {fmt_number(tolerance)}% tolerance",
        )


def check_low_volume(subject: CheckSubject, issues: IssueCollector) -> None:
    liters = subject.event.liters
    if liters < subject.limits.low_volume_liters:
        issues.warning(WarningCategory.EFFICIENCY, f"Unusually low load: {fmt_number(liters)} L")


def check_tank_capacity(subject: CheckSubject, issues: IssueCollector) -> None:
    vehicle = subject.context.vehicle
    if vehicle is None or not vehicle.tank_capacity_liters or vehicle.tank_capacity_liters <= 0:
        return

    capacity = vehicle.tank_capacity_liters
    liters = subject.event.liters
    if liters > capacity:
        issues.error(
            ErrorCategory.LITERS,
            f"Load ({fmt_number(liters)} L) exceeds the tank capacity ({fmt_number(capacity)} L)",
            Severity.HIGH,
        )
    elif liters < capacity * subject.limits.low_capacity_ratio:
        issues.warning(
            WarningCategory.EFFICIENCY,
            f"Low load: only {liters * 100 / capacity:.0f}% of the tank capacity",
        )


def check_autonomy(subject: CheckSubject, issues: IssueCollector) -> None:
    vehicle = subject.context.vehicle
    threshold = subject.threshold
    if vehicle is None or threshold is None:
        return
    expected = threshold.expected_average_liters
    liters = subject.event.liters
    if not expected or expected <= 0 or liters <= 0:
        return

    if vehicle.kind == VehicleKind.MACHINERY:
        hours = liters / expected
        message = f"With {fmt_number(liters)} L the machine can operate about {hours:.1f} hours"
    else:
        kilometers = liters / expected * 100
        message = f"With {fmt_number(liters)} L the vehicle can travel about {kilometers:.0f} km"
    issues.warning(WarningCategory.EFFICIENCY, message)


def _earlier_loads(subject: CheckSubject) -> List[FuelEvent]:
    """History entries of the same vehicle that are not this very event."""
    event = subject.event
    loads = []
    for other in subject.context.history:
        if other == event or other.vehicle_id != event.vehicle_id:
            continue
        if event.event_id is not None and other.event_id == event.event_id:
            continue
        if other.occurred_at is None:
            continue
        loads.append(other)
    return loads


def check_duplicates(subject: CheckSubject, issues: IssueCollector) -> None:
    event = subject.event
    if not subject.policy.validate_duplicates or event.occurred_at is None:
        return

    limits = subject.limits
    window_seconds = limits.duplicate_window_minutes * 60
    for other in _earlier_loads(subject):
        gap_seconds = abs((event.occurred_at - other.occurred_at).total_seconds())
        if gap_seconds > window_seconds:
            continue
        if abs(other.liters - event.liters) > limits.duplicate_liters_epsilon:
            continue
        reference = f"event {other.event_id}" if other.event_id is not None else "an earlier load"
        issues.error(
            ErrorCategory.DUPLICATE,
            f"Possible duplicate of {reference}: same vehicle and "
            f"{fmt_number(event.liters)} L within {gap_seconds / 60:.0f} min",
            Severity.HIGH,
        )
        return


def check_time_between_loads(subject: CheckSubject, issues: IssueCollector) -> None:
    threshold = subject.threshold
    event = subject.event
    if threshold is None or not threshold.min_hours_between_loads or event.occurred_at is None:
        return

    previous = [other for other in _earlier_loads(subject) if other.occurred_at < event.occurred_at]
    if not previous:
        return

    latest = max(previous, key=lambda other: other.occurred_at)
    elapsed_hours = (event.occurred_at - latest.occurred_at).total_seconds() / 3600
    if elapsed_hours < threshold.min_hours_between_loads:
        issues.warning(
            WarningCategory.TIMING,
            f"Only {elapsed_hours:.1f} h since the previous load; "
            f"minimum is {fmt_number(threshold.min_hours_between_loads)} h",
        )


# Execution order is part of the result contract
DEFAULT_CHECKS: Tuple[Check, ...] = (
    check_evidence_completeness,
    check_geolocation,
    check_liters_ceiling,
    check_threshold_ceiling,
    check_deviation,
    check_low_volume,
    check_tank_capacity,
    check_autonomy,
    check_duplicates,
    check_time_between_loads,
)
