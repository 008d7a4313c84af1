"""Guard clauses applied at the engine boundary.

A failed guard means the caller broke the input contract. It is raised as
`InvalidEventError` and never reported as a validation issue.
"""

import math
from typing import Any, Iterable, Optional, Tuple

from fuel_validator.core.evaluation_context import EvaluationContext
from fuel_validator.core.exceptions import InvalidEventError
from fuel_validator.core.models import EvidenceItem, FuelEvent, FuelPolicy, VehicleThreshold


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_finite(field_name: str, value: Any, allow_none: bool = False) -> None:
    if value is None:
        if allow_none:
            return
        raise InvalidEventError(field_name, "value is required")
    if not _is_number(value):
        raise InvalidEventError(field_name, f"expected a number, got {type(value).__name__}")
    if math.isnan(value) or math.isinf(value):
        raise InvalidEventError(field_name, "value must be finite")


def check_event(event: Any) -> FuelEvent:
    if not isinstance(event, FuelEvent):
        raise InvalidEventError("event", f"expected FuelEvent, got {type(event).__name__}")
    if event.vehicle_id is None or (isinstance(event.vehicle_id, str) and not event.vehicle_id.strip()):
        raise InvalidEventError("vehicle_id", "value is required")

    require_finite("liters", event.liters)
    if event.liters < 0:
        raise InvalidEventError("liters", "must not be negative")

    for name in ("odometer_reading", "hour_meter_reading", "latitude", "longitude"):
        require_finite(name, getattr(event, name), allow_none=True)
    return event


def check_evidence(evidence: Optional[Iterable[Any]]) -> Tuple[EvidenceItem, ...]:
    if evidence is None:
        return ()
    items = tuple(evidence)
    for index, item in enumerate(items):
        if not isinstance(item, EvidenceItem):
            raise InvalidEventError(
                f"evidence[{index}]", f"expected EvidenceItem, got {type(item).__name__}"
            )
    return items


def check_policy(policy: Any) -> FuelPolicy:
    if not isinstance(policy, FuelPolicy):
        raise InvalidEventError("policy", f"expected FuelPolicy, got {type(policy).__name__}")
    require_finite("max_liters_per_load", policy.max_liters_per_load)
    if policy.max_liters_per_load <= 0:
        raise InvalidEventError("max_liters_per_load", "must be greater than zero")
    require_finite("geofence_radius_meters", policy.geofence_radius_meters, allow_none=True)
    return policy


def check_threshold(threshold: Any) -> Optional[VehicleThreshold]:
    if threshold is None:
        return None
    if not isinstance(threshold, VehicleThreshold):
        raise InvalidEventError(
            "threshold", f"expected VehicleThreshold, got {type(threshold).__name__}"
        )
    for name in (
        "max_liters_absolute",
        "expected_average_liters",
        "deviation_tolerance_percent",
        "min_hours_between_loads",
    ):
        require_finite(name, getattr(threshold, name), allow_none=True)
    if threshold.deviation_tolerance_percent is not None and threshold.deviation_tolerance_percent < 0:
        raise InvalidEventError("deviation_tolerance_percent", "must not be negative")
    return threshold


def _is_aware(moment) -> bool:
    return moment.tzinfo is not None and moment.tzinfo.utcoffset(moment) is not None


def check_context(context: Any, event: FuelEvent) -> EvaluationContext:
    if context is None:
        return EvaluationContext()
    if not isinstance(context, EvaluationContext):
        raise InvalidEventError(
            "context", f"expected EvaluationContext, got {type(context).__name__}"
        )
    if context.vehicle is not None:
        require_finite("tank_capacity_liters", context.vehicle.tank_capacity_liters, allow_none=True)

    for index, other in enumerate(context.history):
        if not isinstance(other, FuelEvent):
            raise InvalidEventError(
                f"history[{index}]", f"expected FuelEvent, got {type(other).__name__}"
            )
        require_finite(f"history[{index}].liters", other.liters)
        if (
            event.occurred_at is not None
            and other.occurred_at is not None
            and _is_aware(event.occurred_at) != _is_aware(other.occurred_at)
        ):
            raise InvalidEventError(
                f"history[{index}].occurred_at", "cannot mix naive and timezone-aware timestamps"
            )
    return context
