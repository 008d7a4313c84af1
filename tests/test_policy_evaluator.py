"""
Tests: Policy evaluator pipeline
===================================
"""

import pytest

from fuel_validator import evaluate
from fuel_validator.config import EngineConfig
from fuel_validator.core.models import (
    ErrorCategory,
    EvidenceItem,
    EvidenceKind,
    EvidenceMetadata,
    FuelEvent,
    FuelPolicy,
    Severity,
    VehicleThreshold,
    WarningCategory,
)
from fuel_validator.core.review.summary import should_auto_reject
from fuel_validator.policy_engine.adapters.rule_policy_evaluator import RulePolicyEvaluator

from conftest import all_evidence, location


def _threshold(**kwargs) -> VehicleThreshold:
    values = {"active": True, "expected_average_liters": 100, "deviation_tolerance_percent": 15}
    values.update(kwargs)
    return VehicleThreshold(**values)


class TestScenarios:
    def test_missing_geolocation_is_single_high_error(self):
        policy = FuelPolicy(max_liters_per_load=200, require_pump_photo=True, require_geolocation=True)
        result = evaluate(
            FuelEvent(vehicle_id="V1", liters=55),
            [EvidenceItem(EvidenceKind.PHOTO_PUMP)],
            policy,
        )

        assert result.is_valid is False
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.category == ErrorCategory.GEOLOCATION
        assert error.severity == Severity.HIGH
        assert "missing" in error.message.lower()
        assert result.warnings == ()

    def test_large_deviation_is_high_threshold_error(self, open_policy):
        result = evaluate(FuelEvent(vehicle_id="V1", liters=127), [], open_policy, _threshold())

        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.category == ErrorCategory.THRESHOLD
        assert error.severity == Severity.HIGH
        assert "27.0%" in error.message
        assert "15%" in error.message
        assert result.warnings == ()

    def test_near_limit_deviation_is_warning_only(self, open_policy):
        result = evaluate(FuelEvent(vehicle_id="V1", liters=111), [], open_policy, _threshold())

        assert result.errors == ()
        assert result.is_valid
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.category == WarningCategory.DEVIATION
        assert warning.severity is None
        assert "11.0%" in warning.message
        assert "15%" in warning.message

    def test_low_volume_load_is_valid_with_efficiency_warning(self, open_policy):
        result = evaluate(FuelEvent(vehicle_id="V1", liters=5), [], open_policy)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert result.warnings[0].category == WarningCategory.EFFICIENCY
        assert "unusually low load" in result.warnings[0].message.lower()

    def test_two_independent_high_errors_auto_reject(self):
        policy = FuelPolicy(max_liters_per_load=200, require_pump_photo=True)
        result = evaluate(FuelEvent(vehicle_id="V1", liters=250), [], policy)

        assert [e.category for e in result.errors] == [ErrorCategory.EVIDENCE, ErrorCategory.LITERS]
        assert all(e.severity == Severity.HIGH for e in result.errors)
        assert should_auto_reject(result) is True


class TestEvidenceCompleteness:
    def test_compliant_event_is_valid(self, strict_policy, event):
        result = evaluate(event, all_evidence(), strict_policy)

        assert result.is_valid
        assert result.errors == ()

    @pytest.mark.parametrize(
        "kind, severity",
        [
            (EvidenceKind.PHOTO_PUMP, Severity.HIGH),
            (EvidenceKind.PHOTO_METER, Severity.HIGH),
            (EvidenceKind.PHOTO_ODOMETER, Severity.MEDIUM),
            (EvidenceKind.PHOTO_HOURMETER, Severity.MEDIUM),
            (EvidenceKind.AUDIO, Severity.MEDIUM),
            (EvidenceKind.LOCATION, Severity.HIGH),
        ],
    )
    def test_removing_one_item_adds_exactly_one_error(self, strict_policy, event, kind, severity):
        evidence = [item for item in all_evidence() if item.kind != kind]

        result = evaluate(event, evidence, strict_policy)
        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].severity == severity

        restored = evaluate(event, evidence + [EvidenceItem(kind, location().metadata)], strict_policy)
        assert restored.is_valid

    def test_flags_off_require_nothing(self, open_policy, event):
        assert evaluate(event, [], open_policy).is_valid

    def test_evidence_message_names_the_item(self, event):
        policy = FuelPolicy(max_liters_per_load=500, require_meter_photo=True)
        result = evaluate(event, [], policy)
        assert "Meter photo" in result.errors[0].message

    def test_duplicate_items_count_once(self, event):
        policy = FuelPolicy(max_liters_per_load=500, require_pump_photo=True)
        evidence = [EvidenceItem(EvidenceKind.PHOTO_PUMP), EvidenceItem(EvidenceKind.PHOTO_PUMP)]
        assert evaluate(event, evidence, policy).is_valid


class TestGeolocation:
    def test_invalid_coordinates_with_geofence(self, event):
        policy = FuelPolicy(max_liters_per_load=500, require_geolocation=True, geofence_radius_meters=100)
        evidence = [EvidenceItem(EvidenceKind.LOCATION, EvidenceMetadata(latitude=-34.6))]

        result = evaluate(event, evidence, policy)
        assert len(result.errors) == 1
        assert result.errors[0].category == ErrorCategory.GEOLOCATION
        assert result.errors[0].severity == Severity.HIGH
        assert "not valid" in result.errors[0].message

    def test_out_of_range_coordinates_are_invalid(self, event):
        policy = FuelPolicy(max_liters_per_load=500, require_geolocation=True, geofence_radius_meters=100)
        result = evaluate(event, [location(latitude=123.0)], policy)
        assert result.errors[0].category == ErrorCategory.GEOLOCATION

    def test_coordinates_not_checked_without_geofence(self, event):
        policy = FuelPolicy(max_liters_per_load=500, require_geolocation=True)
        evidence = [EvidenceItem(EvidenceKind.LOCATION)]
        assert evaluate(event, evidence, policy).is_valid

    def test_zero_coordinates_are_present(self, event):
        policy = FuelPolicy(max_liters_per_load=500, require_geolocation=True, geofence_radius_meters=100)
        assert evaluate(event, [location(latitude=0.0, longitude=0.0)], policy).is_valid

    def test_geolocation_not_required(self, open_policy, event):
        assert evaluate(event, [EvidenceItem(EvidenceKind.LOCATION)], open_policy).is_valid


class TestLitersCeiling:
    def test_message_includes_ceiling_and_actual(self):
        policy = FuelPolicy(max_liters_per_load=200)
        result = evaluate(FuelEvent(vehicle_id="V1", liters=212.5), [], policy)

        error = result.errors[0]
        assert error.category == ErrorCategory.LITERS
        assert error.severity == Severity.HIGH
        assert "200" in error.message
        assert "212.5" in error.message

    def test_exactly_at_ceiling_is_allowed(self):
        policy = FuelPolicy(max_liters_per_load=200)
        assert evaluate(FuelEvent(vehicle_id="V1", liters=200), [], policy).is_valid


class TestThreshold:
    def test_absolute_maximum_exceeded(self, open_policy):
        threshold = VehicleThreshold(active=True, max_liters_absolute=300)
        result = evaluate(FuelEvent(vehicle_id="V1", liters=320), [], open_policy, threshold)

        assert len(result.errors) == 1
        assert result.errors[0].category == ErrorCategory.THRESHOLD
        assert result.errors[0].severity == Severity.HIGH

    def test_inactive_threshold_is_ignored(self, open_policy):
        threshold = VehicleThreshold(
            active=False, max_liters_absolute=1, expected_average_liters=10, deviation_tolerance_percent=1
        )
        result = evaluate(FuelEvent(vehicle_id="V1", liters=300), [], open_policy, threshold)
        assert result.is_valid
        assert result.warnings == ()

    def test_medium_deviation_between_tolerance_and_escalation(self, open_policy):
        result = evaluate(FuelEvent(vehicle_id="V1", liters=80), [], open_policy, _threshold())

        assert result.errors[0].severity == Severity.MEDIUM
        assert "20.0%" in result.errors[0].message

    @pytest.mark.parametrize(
        "threshold",
        [
            VehicleThreshold(active=True, expected_average_liters=100),
            VehicleThreshold(active=True, deviation_tolerance_percent=15),
            VehicleThreshold(active=True, expected_average_liters=0, deviation_tolerance_percent=15),
        ],
    )
    def test_deviation_skipped_when_not_applicable(self, open_policy, threshold):
        result = evaluate(FuelEvent(vehicle_id="V1", liters=400), [], open_policy, threshold)
        assert result.is_valid
        assert result.warnings == ()

    def test_zero_tolerance_flags_any_deviation(self, open_policy):
        threshold = _threshold(deviation_tolerance_percent=0)

        assert evaluate(FuelEvent(vehicle_id="V1", liters=100), [], open_policy, threshold).is_valid
        result = evaluate(FuelEvent(vehicle_id="V1", liters=101), [], open_policy, threshold)
        assert result.errors[0].severity == Severity.HIGH

    def test_deviation_escalates_in_order(self, open_policy):
        threshold = _threshold(deviation_tolerance_percent=20)

        def outcome(liters):
            result = evaluate(FuelEvent(vehicle_id="V1", liters=liters), [], open_policy, threshold)
            if result.errors:
                return result.errors[0].severity.value
            if result.warnings:
                return result.warnings[0].category.value
            return "none"

        observed = [outcome(liters) for liters in (100, 110, 115, 125, 135)]
        assert observed == ["none", "none", "deviation", "medium", "high"]
        # Below the expected average behaves symmetrically
        assert [outcome(liters) for liters in (90, 85, 75, 65)] == ["none", "deviation", "medium", "high"]


class TestPipeline:
    def test_all_checks_run_in_fixed_order(self):
        policy = FuelPolicy(
            max_liters_per_load=100,
            require_pump_photo=True,
            require_audio=True,
            require_geolocation=True,
        )
        threshold = VehicleThreshold(
            active=True, max_liters_absolute=120, expected_average_liters=100, deviation_tolerance_percent=10
        )
        result = evaluate(FuelEvent(vehicle_id="V1", liters=150), [], policy, threshold)

        assert [(e.category.value, e.severity.value) for e in result.errors] == [
            ("evidence", "high"),
            ("evidence", "medium"),
            ("geolocation", "high"),
            ("liters", "high"),
            ("threshold", "high"),
            ("threshold", "high"),
        ]

    def test_errors_and_warnings_reported_together(self):
        policy = FuelPolicy(max_liters_per_load=500, require_pump_photo=True)
        result = evaluate(FuelEvent(vehicle_id="V1", liters=4), [], policy)

        assert len(result.errors) == 1
        assert len(result.warnings) == 1

    def test_evaluation_is_deterministic(self, strict_policy, event):
        evidence = all_evidence()[:3]
        assert evaluate(event, evidence, strict_policy) == evaluate(event, evidence, strict_policy)

    def test_inputs_are_not_mutated(self, strict_policy, event):
        evidence = all_evidence()[:2]
        snapshot = list(evidence)
        evaluate(event, evidence, strict_policy)
        assert evidence == snapshot

    def test_accepts_any_iterable_of_evidence(self, strict_policy, event):
        result = evaluate(event, (item for item in all_evidence()), strict_policy)
        assert result.is_valid

    def test_result_serializes_to_plain_values(self):
        policy = FuelPolicy(max_liters_per_load=200, require_pump_photo=True)
        data = evaluate(FuelEvent(vehicle_id="V1", liters=5), [], policy).to_dict()

        assert data["is_valid"] is False
        assert data["errors"][0]["category"] == "evidence"
        assert data["errors"][0]["severity"] == "high"
        assert "severity" not in data["warnings"][0]

    def test_configured_low_volume_limit(self, open_policy):
        evaluator = RulePolicyEvaluator(limits=EngineConfig(low_volume_liters=20))
        result = evaluator.evaluate(FuelEvent(vehicle_id="V1", liters=15), [], open_policy)
        assert result.warnings[0].category == WarningCategory.EFFICIENCY

    def test_custom_check_list(self, open_policy):
        evaluator = RulePolicyEvaluator(checks=())
        result = evaluator.evaluate(FuelEvent(vehicle_id="V1", liters=5000), [], open_policy)
        assert result.is_valid


class TestBuiltInLimits:
    def test_environment_does_not_change_evaluate(self, monkeypatch, open_policy):
        event = FuelEvent(vehicle_id="V1", liters=111)
        before = evaluate(event, [], open_policy, _threshold())

        monkeypatch.setenv("FUEL_VALIDATOR_ENGINE_NEAR_LIMIT_RATIO", "0.9")
        after = evaluate(event, [], open_policy, _threshold())

        assert after == before
        assert [w.category for w in after.warnings] == [WarningCategory.DEVIATION]

    def test_malformed_environment_is_ignored(self, monkeypatch, open_policy):
        monkeypatch.setenv("FUEL_VALIDATOR_ENGINE_LOW_VOLUME_LITERS", "ten")

        result = evaluate(FuelEvent(vehicle_id="V1", liters=5), [], open_policy)
        assert [w.category for w in result.warnings] == [WarningCategory.EFFICIENCY]

    def test_evaluator_without_limits_uses_built_in_defaults(self, monkeypatch, open_policy):
        monkeypatch.setenv("FUEL_VALIDATOR_ENGINE_LOW_VOLUME_LITERS", "50")

        result = RulePolicyEvaluator().evaluate(FuelEvent(vehicle_id="V1", liters=20), [], open_policy)
        assert result.warnings == ()
