"""YAML-based policy loader adapter."""

import logging
import os
from typing import Any, Dict, List, Optional

import yaml

from fuel_validator.core.exceptions import PolicyLoadError
from fuel_validator.core.models import FuelPolicy, VehicleThreshold
from fuel_validator.policy_engine.ports.policy_loader_port import IPolicyLoader

logger = logging.getLogger(__name__)

# YAML evidence key -> FuelPolicy field
EVIDENCE_FLAGS = {
    "pump_photo": "require_pump_photo",
    "meter_photo": "require_meter_photo",
    "odometer_photo": "require_odometer_photo",
    "hour_meter_photo": "require_hour_meter_photo",
    "audio": "require_audio",
}

THRESHOLD_FIELDS = (
    "max_liters_absolute",
    "expected_average_liters",
    "deviation_tolerance_percent",
    "min_hours_between_loads",
)


class YAMLPolicyLoader(IPolicyLoader):
    """YAML implementation for policy loading."""

    def __init__(self, policies_path: str = "policy_engine/policies.yaml"):
        """
        Initialize YAML policy loader.

        Args:
            policies_path: Absolute path, or path relative to the package directory
        """
        self.policies_path = policies_path
        self._document = None

    def _resolve_path(self) -> str:
        if os.path.isabs(self.policies_path):
            return self.policies_path
        base_dir = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
        return os.path.join(base_dir, self.policies_path)

    def _read(self) -> Dict[str, Any]:
        if self._document is not None:
            return self._document

        full_path = self._resolve_path()
        if not os.path.exists(full_path):
            raise PolicyLoadError(
                f"Policy file not found: {self.policies_path}", details={"path": full_path}
            )
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                document = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise PolicyLoadError(
                f"Failed to load policies from {self.policies_path}: {e}", details={"path": full_path}
            ) from e

        if not isinstance(document, dict):
            raise PolicyLoadError(f"Policy file {self.policies_path} must contain a mapping")
        logger.info(f"Loaded fuel policies from {full_path}")
        self._document = document
        return document

    def load(self) -> Dict[str, FuelPolicy]:
        """
        Load company policies from the YAML file.

        Returns:
            Dictionary of FuelPolicy keyed by company id
        """
        companies = self._read().get("companies") or {}
        if not isinstance(companies, dict):
            raise PolicyLoadError(f"'companies' in {self.policies_path} must be a mapping")
        return {
            str(company_id): parse_policy(str(company_id), raw or {})
            for company_id, raw in companies.items()
        }

    def load_thresholds(self) -> List[VehicleThreshold]:
        """
        Load vehicle thresholds from the same YAML file.

        Returns:
            List of VehicleThreshold in file order
        """
        entries = self._read().get("thresholds") or []
        if not isinstance(entries, list):
            raise PolicyLoadError(f"'thresholds' in {self.policies_path} must be a list")
        return [parse_threshold(entry) for entry in entries]


def _number(raw: Dict[str, Any], name: str, details: Dict[str, Any]) -> Optional[float]:
    value = raw.get(name)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise PolicyLoadError(f"{name} must be a number, got {value!r}", details=details) from e


def parse_policy(company_id: str, raw: Dict[str, Any]) -> FuelPolicy:
    details = {"company_id": company_id}
    if not isinstance(raw, dict):
        raise PolicyLoadError(f"Policy for company '{company_id}' must be a mapping", details=details)
    if raw.get("max_liters_per_load") is None:
        raise PolicyLoadError(
            f"Policy for company '{company_id}' is missing max_liters_per_load", details=details
        )

    evidence = raw.get("evidence") or {}
    if not isinstance(evidence, dict):
        raise PolicyLoadError(f"Evidence of company '{company_id}' must be a mapping", details=details)
    unknown = set(evidence) - set(EVIDENCE_FLAGS)
    if unknown:
        raise PolicyLoadError(
            f"Unknown evidence keys for company '{company_id}': {sorted(unknown)}", details=details
        )

    flags = {field: bool(evidence.get(key, False)) for key, field in EVIDENCE_FLAGS.items()}
    return FuelPolicy(
        company_id=company_id,
        max_liters_per_load=_number(raw, "max_liters_per_load", details),
        require_geolocation=bool(raw.get("require_geolocation", False)),
        geofence_radius_meters=_number(raw, "geofence_radius_meters", details),
        validate_duplicates=bool(raw.get("validate_duplicates", False)),
        **flags,
    )


def parse_threshold(raw: Dict[str, Any]) -> VehicleThreshold:
    if not isinstance(raw, dict) or raw.get("vehicle_id") is None:
        raise PolicyLoadError("Every threshold entry needs a vehicle_id")

    vehicle_id = str(raw["vehicle_id"])
    details = {"vehicle_id": vehicle_id}
    values = {name: _number(raw, name, details) for name in THRESHOLD_FIELDS}
    return VehicleThreshold(
        vehicle_id=vehicle_id,
        active=bool(raw.get("active", True)),
        **values,
    )
