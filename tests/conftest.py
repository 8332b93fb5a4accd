"""Shared fixtures for jettison-health tests.

``FakeStore`` stands in for Redis: it satisfies the ``HealthStore`` protocol
over a plain dict so the fetcher and CLI can be exercised without a server.
"""
from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pytest

from jettison_health.schema.config import RedisConfig
from jettison_health.schema.health import Credentials

# Values written by the supervisor's own smoke test.
TESTAPP_API: dict[str, str] = {
    "init": "1500",
    "cap": "1000",
    "depletion_rate": "100",
    "replenish_rate": "15",
    "beats": "150",
    "running": "1",
    "exit": "0",
    "health": "856",
}

TESTAPP_WORKER: dict[str, str] = {
    "init": "500",
    "cap": "500",
    "depletion_rate": "50",
    "replenish_rate": "10",
    "beats": "89",
    "running": "1",
    "exit": "0",
    "health": "432",
}


def healthpool(service: str, category: str, values: dict[str, str]) -> dict[str, str]:
    return {
        f"{service}:__healthpool__{category}_{name}": value
        for name, value in values.items()
    }


class FakeStore:
    """In-memory ``HealthStore``."""

    def __init__(
        self,
        data: dict[str, object] | None = None,
        fail_with: Exception | None = None,
    ) -> None:
        self.data: dict[str, object] = dict(data or {})
        self.fail_with = fail_with
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []
        self.pinged = False
        self.closed = False

    def ping(self, timeout: float | None = None) -> None:
        self.pinged = True

    def get_many(self, keys: Sequence[str], timeout: float | None = None) -> list[object]:
        self.calls.append(list(keys))
        self.timeouts.append(timeout)
        if self.fail_with is not None:
            raise self.fail_with
        return [self.data.get(key) for key in keys]

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def populated_store() -> FakeStore:
    return FakeStore(
        {
            **healthpool("testapp", "api", TESTAPP_API),
            **healthpool("testapp", "worker", TESTAPP_WORKER),
        }
    )


@pytest.fixture()
def secrets_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "secrets" / "healthreader"
    directory.mkdir(parents=True)
    (directory / "password").write_text("s3cret\n", encoding="utf-8")
    return directory


@pytest.fixture()
def config_file(tmp_path: Path, secrets_dir: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {"redis": {"host": "localhost", "port": 6379, "secrets_dir": str(secrets_dir)}}
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def redis_config(secrets_dir: Path) -> RedisConfig:
    return RedisConfig(host="localhost", port=6379, secrets_dir=secrets_dir)


@pytest.fixture()
def credentials() -> Credentials:
    return Credentials(username="healthreader", password="s3cret")


@pytest.fixture()
def make_store() -> type[FakeStore]:
    return FakeStore
