"""Config package for jettison-health.

Provides configuration loading, validation, and the connection defaults.
"""
from __future__ import annotations

from jettison_health.config.defaults import (
    DEFAULT_DB,
    DEFAULT_TIMEOUT_SECONDS,
    PASSWORD_FILENAME,
)
from jettison_health.config.loader import ConfigLoader
from jettison_health.config.schema import RedisConfig, ToolConfig, validate_config

__all__ = [
    "ConfigLoader",
    "RedisConfig",
    "ToolConfig",
    "validate_config",
    "DEFAULT_DB",
    "DEFAULT_TIMEOUT_SECONDS",
    "PASSWORD_FILENAME",
]
