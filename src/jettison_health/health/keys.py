"""Store key schema for health pools.

The layout is a fixed contract with the process supervisor that writes the
pools; changing it requires a coordinated migration of both sides::

    <service>:__healthpool__<category>_<field>
"""
from __future__ import annotations

from jettison_health.schema.health import HEALTH_FIELDS, HealthField, Target

HEALTHPOOL_MARKER: str = ":__healthpool__"


def store_key(service: str, category: str, health_field: HealthField | str) -> str:
    """Return the store key for one metric of one health pool.

    Examples
    --------
    >>> store_key("testapp", "api", "health")
    'testapp:__healthpool__api_health'
    """
    name = health_field.value if isinstance(health_field, HealthField) else health_field
    return f"{service}{HEALTHPOOL_MARKER}{category}_{name}"


def target_keys(target: Target) -> list[tuple[HealthField, str]]:
    """Return ``(field, key)`` pairs for every metric of *target*."""
    return [
        (health_field, store_key(target.service, target.category, health_field))
        for health_field in HEALTH_FIELDS
    ]
