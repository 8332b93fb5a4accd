"""Health-pool data types for jettison-health.

Shipped in this module
----------------------
- HealthField     — the eight fixed metric names of a health pool
- HEALTH_FIELDS   — all fields, in canonical order
- Target          — one ``service:category`` pair
- Credentials     — Redis username / password pair
- HealthRecord    — fetched metrics for one target plus completeness flags
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class HealthField(str, Enum):
    """Metric names recorded under every health pool.

    The set is fixed: the process supervisor writes exactly these eight keys
    for every service/category it runs.
    """

    BEATS = "beats"
    CAP = "cap"
    DEPLETION_RATE = "depletion_rate"
    INIT = "init"
    REPLENISH_RATE = "replenish_rate"
    RUNNING = "running"
    EXIT = "exit"
    HEALTH = "health"


HEALTH_FIELDS: tuple[HealthField, ...] = tuple(HealthField)


@dataclass(frozen=True)
class Target:
    """A ``service:category`` pair identifying one health pool."""

    service: str
    category: str

    @property
    def key(self) -> str:
        """Report lookup key, ``"service:category"``."""
        return f"{self.service}:{self.category}"

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class Credentials:
    """Redis ACL credentials derived from the secrets directory."""

    username: str
    password: str = field(repr=False)


@dataclass
class HealthRecord:
    """Fetched metrics for one target.

    Each metric is ``None`` when its key was not found in the store, so a
    stored ``0`` and an absent key stay distinguishable.

    Attributes
    ----------
    missing_keys:
        Names of the fields that were absent, in fetch order.
    """

    beats: int | None = None
    cap: int | None = None
    depletion_rate: int | None = None
    init: int | None = None
    replenish_rate: int | None = None
    running: int | None = None
    exit: int | None = None
    health: int | None = None
    missing_keys: list[str] = field(default_factory=list)

    @property
    def exists(self) -> bool:
        """``True`` iff all eight fields were found."""
        return not self.missing_keys

    def get(self, health_field: HealthField) -> int | None:
        """Return the value recorded for *health_field*."""
        return getattr(self, health_field.value)

    def set(self, health_field: HealthField, value: int | None) -> None:
        """Record *value* for *health_field*; ``None`` marks it missing."""
        name = health_field.value
        setattr(self, name, value)
        if value is None:
            if name not in self.missing_keys:
                self.missing_keys.append(name)
        elif name in self.missing_keys:
            self.missing_keys.remove(name)

    def to_dict(self) -> dict[str, object]:
        """Serialise for the JSON report.

        Absent fields are omitted rather than emitted as ``null``;
        ``missing_keys`` appears only when non-empty.
        """
        data: dict[str, object] = {}
        for health_field in HEALTH_FIELDS:
            value = self.get(health_field)
            if value is not None:
                data[health_field.value] = value
        data["exists"] = self.exists
        if self.missing_keys:
            data["missing_keys"] = list(self.missing_keys)
        return data
