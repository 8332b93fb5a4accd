"""jettison-health — query process-supervisor health pools stored in Redis.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Quick-start
-----------
>>> import jettison_health
>>> jettison_health.__version__
'0.1.0'

>>> from jettison_health import store_key
>>> store_key("testapp", "api", "health")
'testapp:__healthpool__api_health'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from jettison_health.convenience import fetch_report, query_health

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------
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

# ---------------------------------------------------------------------------
# Pipeline stages
# ---------------------------------------------------------------------------
from jettison_health.config.loader import ConfigLoader
from jettison_health.credentials.loader import load_credentials
from jettison_health.health.fetcher import Deadline, HealthFetcher
from jettison_health.health.keys import store_key, target_keys
from jettison_health.health.report import HealthReport, HealthStatus, error_document
from jettison_health.store.redis_store import HealthStore, RedisStore, connect_store
from jettison_health.targets.parser import parse_target, parse_targets

__all__ = [
    "__version__",
    # Convenience
    "fetch_report",
    "query_health",
    # Schema
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
    # Pipeline stages
    "ConfigLoader",
    "load_credentials",
    "Deadline",
    "HealthFetcher",
    "store_key",
    "target_keys",
    "HealthReport",
    "HealthStatus",
    "error_document",
    "HealthStore",
    "RedisStore",
    "connect_store",
    "parse_target",
    "parse_targets",
]
