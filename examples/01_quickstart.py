#!/usr/bin/env python3
"""Example: Quickstart

Queries two health pools through the Python API instead of the CLI, using an
in-memory store so no Redis server is needed.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install jettison-health
"""
from __future__ import annotations

import json

import jettison_health
from jettison_health import Credentials, RedisConfig, Target, fetch_report, store_key


class DictStore:
    """Minimal ``HealthStore`` over a dict."""

    def __init__(self, data: dict[str, str]) -> None:
        self._data = data

    def ping(self, timeout: float | None = None) -> None:
        pass

    def get_many(self, keys: list[str], timeout: float | None = None) -> list[str | None]:
        return [self._data.get(key) for key in keys]

    def close(self) -> None:
        pass


def main() -> None:
    print(f"jettison-health version: {jettison_health.__version__}")

    # Step 1: Seed a store the way the supervisor would
    data = {
        store_key("testapp", "api", field.value): "1"
        for field in jettison_health.HEALTH_FIELDS
    }
    data[store_key("testapp", "api", "health")] = "856"

    # Step 2: Fetch one complete pool and one that was never written
    config = RedisConfig(host="localhost", port=6379, secrets_dir="/run/secrets/demo")
    report = fetch_report(
        config,
        Credentials(username="demo", password="demo"),
        [Target("testapp", "api"), Target("ghost", "worker")],
        connect=lambda cfg, creds: DictStore(data),
    )

    # Step 3: Print the same document the CLI emits
    print(json.dumps(report.to_dict(), indent=2))
    print(f"exit code would be {report.exit_code}")


if __name__ == "__main__":
    main()
