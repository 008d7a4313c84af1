from datetime import datetime
from typing import Any, Dict, List

import pytest

from fuel_validator.action_orchestrator.ports.alerter_port import IAlerter
from fuel_validator.action_orchestrator.ports.logger_port import ILogger
from fuel_validator.core.models import (
    EvidenceItem,
    EvidenceKind,
    EvidenceMetadata,
    FuelEvent,
    FuelPolicy,
)


T0 = datetime(2024, 2, 1, 12, 0, 0)

PUMP_LAT = -34.6037
PUMP_LON = -58.3816


def location(latitude=PUMP_LAT, longitude=PUMP_LON) -> EvidenceItem:
    return EvidenceItem(
        kind=EvidenceKind.LOCATION,
        metadata=EvidenceMetadata(latitude=latitude, longitude=longitude, accuracy_meters=5),
    )


def all_evidence() -> List[EvidenceItem]:
    return [
        EvidenceItem(EvidenceKind.PHOTO_PUMP),
        EvidenceItem(EvidenceKind.PHOTO_METER),
        EvidenceItem(EvidenceKind.PHOTO_ODOMETER),
        EvidenceItem(EvidenceKind.PHOTO_HOURMETER),
        EvidenceItem(EvidenceKind.AUDIO),
        location(),
    ]


@pytest.fixture
def strict_policy() -> FuelPolicy:
    """Every evidence flag on, no geofence."""
    return FuelPolicy(
        max_liters_per_load=500,
        require_pump_photo=True,
        require_meter_photo=True,
        require_odometer_photo=True,
        require_hour_meter_photo=True,
        require_audio=True,
        require_geolocation=True,
    )


@pytest.fixture
def open_policy() -> FuelPolicy:
    """No evidence required, generous ceiling."""
    return FuelPolicy(max_liters_per_load=1000)


@pytest.fixture
def event() -> FuelEvent:
    return FuelEvent(vehicle_id="V1", liters=50, event_id="evt-1", occurred_at=T0)


class RecordingLogger(ILogger):
    def __init__(self):
        self.messages: List[tuple] = []
        self.structured: List[Dict[str, Any]] = []

    def log(self, level: str, message: str, **kwargs) -> None:
        self.messages.append((level, message, kwargs))

    def log_structured(self, data: Dict[str, Any]) -> None:
        self.structured.append(data)


class RecordingAlerter(IAlerter):
    def __init__(self):
        self.alerts: List[Dict[str, Any]] = []

    def alert(self, severity: str, message: str, context: Dict[str, Any] = None) -> bool:
        self.alerts.append({"severity": severity, "message": message, "context": context})
        return True


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def recording_alerter() -> RecordingAlerter:
    return RecordingAlerter()
