"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FunctionConfig(BaseSettings):
    """Composition function behaviour."""

    model_config = SettingsConfigDict(env_prefix="FUNCTION_")

    # Matches the default response TTL of the function SDKs (1 minute)
    response_ttl_seconds: float = Field(default=60.0)
    condition_type: str = Field(default="NoErrors")


class MetricsConfig(BaseSettings):
    """Prometheus metrics configuration."""

    model_config = SettingsConfigDict(env_prefix="METRICS_")

    enabled: bool = Field(default=True)


class LoggingConfig(BaseSettings):
    """Logging configuration.

    Supports both text and JSON formats:
    - text: Human-readable for local development
    - json: Structured logging for production (log aggregation)

    Rate limiting:
    - Prevents log storms from repeated messages
    - ERROR logs bypass rate limiting (always logged)
    """

    model_config = SettingsConfigDict(env_prefix="LOGGING_")

    level: str = Field(default="INFO")
    format: str = Field(default="text")
    schema_version: str = Field(default="1.0")
    service_name: str = Field(default="xready")
    slow_threshold_ms: float = Field(default=1000.0)
    rate_limit_per_minute: int = Field(default=100)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="XREADY_",
        env_nested_delimiter="__",
    )

    function: FunctionConfig = Field(default_factory=FunctionConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_settings() -> Settings:
    return Settings()
