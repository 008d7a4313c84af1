"""Dependency injection container for validator components."""

from dependency_injector import containers, providers

# Action Orchestrator
from fuel_validator.action_orchestrator.adapters.memory_idempotency_store import MemoryIdempotencyStore
from fuel_validator.action_orchestrator.adapters.null_alerter import NullAlerter
from fuel_validator.action_orchestrator.adapters.print_logger import PrintLogger
from fuel_validator.action_orchestrator.adapters.structlog_logger import StructlogLogger
from fuel_validator.action_orchestrator.orchestrator_service import OrchestratorService
from fuel_validator.config import AppConfig
from fuel_validator.core.reviewer import EventReviewer

# Policy Engine
from fuel_validator.policy_engine.adapters.memory_threshold_provider import MemoryThresholdProvider
from fuel_validator.policy_engine.adapters.rule_policy_evaluator import RulePolicyEvaluator
from fuel_validator.policy_engine.adapters.yaml_policy_loader import YAMLPolicyLoader
from fuel_validator.policy_engine.policy_service import PolicyService


class ValidatorContainer(containers.DeclarativeContainer):
    """Dependency injection container for validator components."""

    # Configuration
    config = providers.Singleton(AppConfig)

    # Policy Engine Adapters
    policy_loader = providers.Singleton(YAMLPolicyLoader, policies_path=config.provided.policy.policies_path)

    threshold_provider = providers.Singleton(
        MemoryThresholdProvider,
        thresholds=policy_loader.provided.load_thresholds.call(),
    )

    policy_evaluator = providers.Singleton(RulePolicyEvaluator, limits=config.provided.engine)

    # Policy Engine Service
    policy_service = providers.Singleton(
        PolicyService, evaluator=policy_evaluator, loader=policy_loader, threshold_provider=threshold_provider
    )

    # Action Orchestrator Adapters
    logger = providers.Selector(
        config.provided.logging.type,
        structlog=providers.Singleton(StructlogLogger),
        print=providers.Singleton(PrintLogger),
    )
    alerter = providers.Singleton(NullAlerter)
    idempotency_store = providers.Singleton(MemoryIdempotencyStore)

    # Action Orchestrator Service
    orchestrator_service = providers.Factory(
        OrchestratorService,
        logger=logger,
        alerter=alerter,
        idempotency_store=idempotency_store,
        auto_reject_min_high=config.provided.engine.auto_reject_min_high,
    )

    reviewer = providers.Factory(
        EventReviewer,
        policy_service=policy_service,
        orchestrator=orchestrator_service,
    )
