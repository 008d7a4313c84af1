"""Optional facts the caller can supply alongside an event being validated."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from fuel_validator.core.models import FuelEvent


class VehicleKind(str, Enum):
    """How a vehicle's consumption is measured."""

    TRANSPORT = "transport"  # L/100km
    MACHINERY = "machinery"  # L/hour


@dataclass(frozen=True)
class VehicleProfile:
    """Static vehicle facts resolved by the caller."""

    vehicle_id: str
    kind: VehicleKind = VehicleKind.TRANSPORT
    tank_capacity_liters: Optional[float] = None


@dataclass(frozen=True)
class PumpSite:
    """Registered location of the pump the event was loaded at."""

    pump_id: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class EvaluationContext:
    """Context information for an event being validated."""

    vehicle: Optional[VehicleProfile] = None
    pump: Optional[PumpSite] = None
    # Earlier loads, used by duplicate and timing checks
    history: Tuple[FuelEvent, ...] = ()

    # Custom metadata
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for logging."""
        return {
            "vehicle_id": self.vehicle.vehicle_id if self.vehicle else None,
            "vehicle_kind": self.vehicle.kind.value if self.vehicle else None,
            "pump_id": self.pump.pump_id if self.pump else None,
            "history_size": len(self.history),
            **self.custom,
        }
