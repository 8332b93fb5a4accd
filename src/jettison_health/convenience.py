"""Convenience API for jettison-health: one call from config to report.

Example
-------
::

    from jettison_health import query_health
    report = query_health("/etc/jettison/health.json", ["testapp:api"])
    report.exit_code

"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from jettison_health.health.report import HealthReport
    from jettison_health.schema.config import RedisConfig
    from jettison_health.schema.health import Credentials, Target
    from jettison_health.store.redis_store import HealthStore

    StoreFactory = Callable[[RedisConfig, Credentials], HealthStore]

logger = logging.getLogger(__name__)


def fetch_report(
    config: RedisConfig,
    credentials: Credentials,
    targets: Sequence[Target],
    connect: StoreFactory | None = None,
) -> HealthReport:
    """Connect once, fetch every target, and aggregate the report.

    One deadline of ``config.timeout_seconds`` starts before the connection
    is opened and covers the whole fetch phase.  The connection is closed on
    every exit path.

    Parameters
    ----------
    config:
        Validated connection descriptor.
    credentials:
        Username and password for the connection.
    targets:
        Deduplicated targets, in report order.
    connect:
        Store factory; defaults to
        :func:`~jettison_health.store.redis_store.connect_store`.

    Raises
    ------
    StoreError
        If the connection, a read, or the deadline fails.
    """
    from jettison_health.health.fetcher import Deadline, HealthFetcher
    from jettison_health.health.report import HealthReport
    from jettison_health.store import redis_store

    factory = connect or redis_store.connect_store
    deadline = Deadline(config.timeout_seconds)

    store = factory(config, credentials)
    try:
        deadline.check("while connecting")
        records = HealthFetcher(store, deadline=deadline).fetch(targets)
    finally:
        store.close()

    report = HealthReport.from_records(records)
    logger.debug(
        "Fetched %d target(s) from %s; all present: %s",
        len(records),
        config.address,
        report.all_exist,
    )
    return report


def query_health(
    config_path: str | Path,
    raw_targets: Iterable[str],
    connect: StoreFactory | None = None,
) -> HealthReport:
    """Run the full pipeline: parse, load config and credentials, fetch.

    Argument, configuration and credential errors are raised before any
    connection is attempted.

    Raises
    ------
    ArgumentError, ConfigurationError, CredentialError, StoreError
    """
    from jettison_health.config.loader import ConfigLoader
    from jettison_health.credentials.loader import load_credentials
    from jettison_health.targets.parser import parse_targets

    targets = parse_targets(raw_targets)
    cfg = ConfigLoader().load(config_path)
    credentials = load_credentials(cfg.redis.secrets_dir)
    return fetch_report(cfg.redis, credentials, targets, connect=connect)
