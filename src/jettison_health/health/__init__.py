"""Health-pool querying for jettison-health.

Key schema, fetcher, and report aggregation.
"""
from __future__ import annotations

from jettison_health.health.fetcher import Deadline, HealthFetcher
from jettison_health.health.keys import store_key, target_keys
from jettison_health.health.report import HealthReport, HealthStatus, error_document

__all__ = [
    "Deadline",
    "HealthFetcher",
    "HealthReport",
    "HealthStatus",
    "error_document",
    "store_key",
    "target_keys",
]
