"""Store access for jettison-health."""
from __future__ import annotations

from jettison_health.store.redis_store import (
    HealthStore,
    RedisStore,
    build_client,
    connect_store,
)

__all__ = ["HealthStore", "RedisStore", "build_client", "connect_store"]
