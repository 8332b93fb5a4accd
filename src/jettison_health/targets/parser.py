"""Parse ``service:category`` command-line arguments into targets."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from jettison_health.schema.errors import ArgumentError
from jettison_health.schema.health import Target

logger = logging.getLogger(__name__)


def parse_target(raw: str) -> Target:
    """Parse a single ``service:category`` string.

    Raises
    ------
    ArgumentError
        If *raw* does not split into exactly two parts on ``:``, or either
        part is blank after stripping.
    """
    parts = raw.split(":")
    if len(parts) != 2:
        raise ArgumentError(
            f"invalid format '{raw}', expected <service>:<category>",
            context={"argument": raw},
        )

    service, category = (part.strip() for part in parts)
    if not service or not category:
        raise ArgumentError(
            f"empty service or category in '{raw}'",
            context={"argument": raw},
        )
    return Target(service=service, category=category)


def parse_targets(args: Iterable[str]) -> list[Target]:
    """Parse and deduplicate target arguments.

    Duplicates are detected on the normalised ``service:category`` key; the
    first occurrence wins and first-seen order is kept.  A single malformed
    argument fails the whole batch.

    Raises
    ------
    ArgumentError
        If *args* is empty or any entry is malformed.

    Examples
    --------
    >>> [t.key for t in parse_targets(["a:b", " a : b ", "c:d"])]
    ['a:b', 'c:d']
    """
    raw_args = list(args)
    if not raw_args:
        raise ArgumentError(
            "Usage: jettison-health --config <config.json> "
            "<service>:<category> [<service>:<category> ...]",
            title="No arguments provided",
        )

    targets: dict[str, Target] = {}
    for raw in raw_args:
        target = parse_target(raw)
        if target.key in targets:
            logger.debug("Skipping duplicate target %s", target.key)
            continue
        targets[target.key] = target

    return list(targets.values())
