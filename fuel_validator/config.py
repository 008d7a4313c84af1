"""Configuration classes using Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Tunable limits of the validation checks."""

    model_config = SettingsConfigDict(
        env_prefix="FUEL_VALIDATOR_ENGINE_", case_sensitive=False
    )

    low_volume_liters: float = 10.0
    near_limit_ratio: float = 0.7
    high_severity_ratio: float = 1.5
    low_capacity_ratio: float = 0.2
    duplicate_window_minutes: float = 30.0
    duplicate_liters_epsilon: float = 0.01
    auto_reject_min_high: int = 2


class PolicyConfig(BaseSettings):
    """Policy source configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FUEL_VALIDATOR_POLICY_", case_sensitive=False
    )

    policies_path: str = "policy_engine/policies.yaml"


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FUEL_VALIDATOR_LOGGING_", case_sensitive=False
    )

    type: str = "structlog"  # 'structlog' or 'print'


class AppConfig(BaseSettings):
    """Main validator configuration."""

    model_config = SettingsConfigDict(
        env_prefix="",
    )

    engine: EngineConfig = Field(default_factory=EngineConfig)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Built-in limits, never read from the environment
DEFAULT_ENGINE_LIMITS = EngineConfig.model_construct()
