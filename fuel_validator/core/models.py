"""Domain records for fuel-event compliance validation."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class EvidenceKind(str, Enum):
    """Kind of proof attached to a fuel event."""

    PHOTO_PUMP = "photo-pump"
    PHOTO_METER = "photo-meter"
    PHOTO_ODOMETER = "photo-odometer"
    PHOTO_HOURMETER = "photo-hourmeter"
    AUDIO = "audio"
    LOCATION = "location"


class Severity(str, Enum):
    """Severity of a validation error."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ErrorCategory(str, Enum):
    """Category of a validation error."""

    EVIDENCE = "evidence"
    LITERS = "liters"
    THRESHOLD = "threshold"
    DUPLICATE = "duplicate"
    GEOLOCATION = "geolocation"


class WarningCategory(str, Enum):
    """Category of a validation warning."""

    DEVIATION = "deviation"
    TIMING = "timing"
    EFFICIENCY = "efficiency"


@dataclass(frozen=True)
class EvidenceMetadata:
    """Kind-dependent metadata. Only the location fields are consulted."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    accuracy_meters: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration_seconds: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class EvidenceItem:
    """One piece of proof, already scoped to a single event by the caller."""

    kind: EvidenceKind
    metadata: EvidenceMetadata = field(default_factory=EvidenceMetadata)


@dataclass(frozen=True)
class FuelEvent:
    """A single refueling occurrence submitted for review."""

    vehicle_id: str
    liters: float
    odometer_reading: Optional[float] = None
    hour_meter_reading: Optional[float] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    event_id: Optional[str] = None
    pump_id: Optional[str] = None
    occurred_at: Optional[datetime] = None


@dataclass(frozen=True)
class FuelPolicy:
    """Company-wide evidence and quantity configuration."""

    max_liters_per_load: float
    require_pump_photo: bool = False
    require_meter_photo: bool = False
    require_odometer_photo: bool = False
    require_hour_meter_photo: bool = False
    require_audio: bool = False
    require_geolocation: bool = False
    geofence_radius_meters: Optional[float] = None
    validate_duplicates: bool = False
    company_id: Optional[str] = None


@dataclass(frozen=True)
class VehicleThreshold:
    """Per-vehicle expected consumption profile."""

    active: bool = True
    max_liters_absolute: Optional[float] = None
    expected_average_liters: Optional[float] = None
    deviation_tolerance_percent: Optional[float] = None
    min_hours_between_loads: Optional[float] = None
    vehicle_id: Optional[str] = None


@dataclass(frozen=True)
class ValidationIssue:
    """An error (with severity) or a warning (without)."""

    category: str
    message: str
    severity: Optional[Severity] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"category": _value(self.category), "message": self.message}
        if self.severity is not None:
            data["severity"] = _value(self.severity)
        return data


@dataclass(frozen=True)
class ValidationResult:
    """Immutable snapshot of one evaluation."""

    errors: Tuple[ValidationIssue, ...] = ()
    warnings: Tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def count_by_severity(self, severity) -> int:
        """Count errors with the given severity (enum member or raw string)."""
        wanted = _value(severity)
        return sum(1 for error in self.errors if _value(error.severity) == wanted)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


def _value(item: Any) -> Any:
    return item.value if isinstance(item, Enum) else item
