"""Health-pool fetcher for jettison-health.

Reads the eight metric keys of every target from a :class:`HealthStore` and
classifies each target as complete or incomplete.

Shipped in this module
----------------------
- Deadline        — single monotonic deadline shared by a whole fetch phase
- HealthFetcher   — reads all targets and builds their ``HealthRecord``
"""
from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable, Sequence

from jettison_health.health.keys import target_keys
from jettison_health.schema.config import DEFAULT_TIMEOUT_SECONDS
from jettison_health.schema.errors import StoreError
from jettison_health.schema.health import HealthField, HealthRecord, Target
from jettison_health.store.redis_store import HealthStore

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits.  int() alone also takes underscores,
# surrounding whitespace and non-ASCII digits.
_INTEGER = re.compile(r"[+-]?[0-9]+")


class Deadline:
    """A fixed point in monotonic time after which work must stop.

    Parameters
    ----------
    seconds:
        Budget from construction time.
    clock:
        Monotonic clock; injectable for tests.
    """

    def __init__(
        self,
        seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._seconds = seconds
        self._expires_at = clock() + seconds

    def remaining(self) -> float:
        """Seconds left, never negative."""
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self._clock() >= self._expires_at

    def check(self, stage: str) -> float:
        """Raise ``StoreError`` if the deadline has passed.

        Parameters
        ----------
        stage:
            What was about to happen (or just happened), for the message.

        Returns
        -------
        float
            Seconds left, always positive.  Callers pass this on as the
            timeout of the next store call.
        """
        left = self._expires_at - self._clock()
        if left <= 0:
            raise StoreError(
                f"deadline of {self._seconds:g}s exceeded {stage}",
                context={"timeout_seconds": self._seconds},
            )
        return left

    def __repr__(self) -> str:
        return f"Deadline(seconds={self._seconds!r}, remaining={self.remaining():.3f})"


def _parse_value(key: str, raw: object) -> int:
    if isinstance(raw, bool):
        raise StoreError(f"non-integer value at key {key}: {raw!r}", context={"key": key})
    if isinstance(raw, int):
        return raw
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    text = str(raw)
    if _INTEGER.fullmatch(text) is None:
        raise StoreError(f"non-integer value at key {key}: {text!r}", context={"key": key})
    return int(text)


class HealthFetcher:
    """Fetch and classify health pools for a list of targets.

    The store and deadline are injected so the fetcher can run against an
    in-memory fake in tests.

    Parameters
    ----------
    store:
        An open :class:`~jettison_health.store.redis_store.HealthStore`.
    timeout_seconds:
        Budget for the whole fetch phase, across all targets.  Ignored when
        *deadline* is given.
    deadline:
        Pre-built deadline, e.g. one already started before connecting.

    Examples
    --------
    >>> class Empty:
    ...     def get_many(self, keys, timeout=None): return [None] * len(keys)
    >>> records = HealthFetcher(Empty()).fetch([Target("x", "y")])
    >>> records["x:y"].exists
    False
    """

    def __init__(
        self,
        store: HealthStore,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        deadline: Deadline | None = None,
    ) -> None:
        self._store = store
        self._timeout_seconds = timeout_seconds
        self._deadline = deadline

    def fetch(self, targets: Sequence[Target]) -> dict[str, HealthRecord]:
        """Fetch every target's metrics under one shared deadline.

        Returns
        -------
        dict[str, HealthRecord]
            Keyed by ``"service:category"``, in the order of *targets*.

        Raises
        ------
        StoreError
            On any transport failure or when the deadline expires.  No
            partial result is returned.
        """
        deadline = self._deadline or Deadline(self._timeout_seconds)
        records: dict[str, HealthRecord] = {}

        for target in targets:
            remaining = deadline.check(f"before fetching {target.key}")
            records[target.key] = self.fetch_one(target, timeout=remaining)

        deadline.check("while fetching health pools")
        return records

    def fetch_one(self, target: Target, timeout: float | None = None) -> HealthRecord:
        """Fetch the eight metrics of a single target.

        *timeout* bounds the store round trip; ``None`` leaves it to the
        store's own socket timeout.
        """
        pairs = target_keys(target)
        values = self._store.get_many([key for _, key in pairs], timeout=timeout)
        if len(values) != len(pairs):
            raise StoreError(
                f"store returned {len(values)} value(s) for {len(pairs)} key(s)",
                context={"target": target.key},
            )

        record = HealthRecord()
        for (health_field, key), raw in zip(pairs, values):
            record.set(health_field, None if raw is None else _parse_value(key, raw))

        if record.exists:
            logger.debug("Health pool %s complete", target.key)
        else:
            logger.info(
                "Health pool %s missing %d of %d key(s): %s",
                target.key,
                len(record.missing_keys),
                len(HealthField),
                ", ".join(record.missing_keys),
            )
        return record
