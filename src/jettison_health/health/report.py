"""Response aggregation for jettison-health.

Shipped in this module
----------------------
- HealthStatus    — HEALTHY / DEGRADED / UNHEALTHY summary of a report
- HealthReport    — ordered mapping of target key to ``HealthRecord``
- error_document  — the structured document emitted on fatal errors
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from jettison_health.schema.health import HealthRecord

EXIT_OK = 0
EXIT_FAILURE = 1


class HealthStatus(str, Enum):
    """Overall status of a report.

    HEALTHY   — every target exists.
    DEGRADED  — at least one target exists and at least one does not.
    UNHEALTHY — no target exists.
    """

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass
class HealthReport:
    """Aggregate report over every requested target.

    Attributes
    ----------
    records:
        Mapping from ``"service:category"`` to its :class:`HealthRecord`,
        in the order targets were parsed.
    """

    records: dict[str, HealthRecord] = field(default_factory=dict)

    @classmethod
    def from_records(cls, records: Mapping[str, HealthRecord]) -> HealthReport:
        return cls(records=dict(records))

    @property
    def all_exist(self) -> bool:
        """Logical AND of every record's ``exists`` flag."""
        return all(record.exists for record in self.records.values())

    @property
    def exit_code(self) -> int:
        """``0`` iff every target exists, otherwise ``1``."""
        return EXIT_OK if self.all_exist else EXIT_FAILURE

    @property
    def status(self) -> HealthStatus:
        if self.all_exist:
            return HealthStatus.HEALTHY
        if any(record.exists for record in self.records.values()):
            return HealthStatus.DEGRADED
        return HealthStatus.UNHEALTHY

    def missing_targets(self) -> list[str]:
        """Keys of the targets that are not fully present."""
        return [key for key, record in self.records.items() if not record.exists]

    def to_dict(self) -> dict[str, object]:
        """Serialise to ``{"data": {...}}`` for JSON encoding.

        Partial data is reported in full; the exit code alone carries the
        aggregate flag.
        """
        return {
            "data": {key: record.to_dict() for key, record in self.records.items()}
        }


def error_document(
    title: str,
    details: str = "",
    args: Sequence[str] | None = None,
) -> dict[str, object]:
    """Build the document printed in place of a report on fatal errors.

    Examples
    --------
    >>> error_document("Invalid arguments", "bad", ["x"])
    {'error': 'Invalid arguments', 'details': 'bad', 'args': ['x']}
    """
    return {"error": title, "details": details, "args": list(args or [])}
