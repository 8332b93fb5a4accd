"""Schema package for jettison-health: config models, health types, errors."""
from __future__ import annotations

from jettison_health.schema.config import RedisConfig, ToolConfig
from jettison_health.schema.errors import (
    ArgumentError,
    ConfigError,
    ConfigurationError,
    CredentialError,
    ErrorSeverity,
    JettisonHealthError,
    StoreError,
)
from jettison_health.schema.health import (
    HEALTH_FIELDS,
    Credentials,
    HealthField,
    HealthRecord,
    Target,
)

__all__ = [
    "RedisConfig",
    "ToolConfig",
    "ArgumentError",
    "ConfigError",
    "ConfigurationError",
    "CredentialError",
    "ErrorSeverity",
    "JettisonHealthError",
    "StoreError",
    "HEALTH_FIELDS",
    "Credentials",
    "HealthField",
    "HealthRecord",
    "Target",
]
