"""Configuration schema for jettison-health.

``ToolConfig`` is a Pydantic v2 model that acts as the validated boundary
object between the raw config file and the query pipeline.  The file is
shaped like::

    {
      "redis": {
        "host": "redis.internal",
        "port": 6379,
        "secrets_dir": "/run/secrets/healthreader"
      }
    }

Shipped in this module
----------------------
- RedisConfig   — connection descriptor (host, port, secrets dir, db, timeout)
- ToolConfig    — top-level document wrapping ``RedisConfig``
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

DEFAULT_DB: int = 2
"""Redis logical database holding the health pools."""

DEFAULT_TIMEOUT_SECONDS: float = 5.0
"""Deadline shared by the connect and fetch phase."""


class RedisConfig(BaseModel):
    """Connection descriptor for the health-pool store.

    Parameters
    ----------
    host:
        Redis hostname or address.  Required.
    port:
        Redis TCP port.  Required; ``0`` is treated as missing.  Must be a
        JSON integer: strings and booleans are rejected.
    secrets_dir:
        Directory named after the Redis username and containing a
        ``password`` file.  Required.  ``credential_dir`` is accepted as an
        alias.
    db:
        Logical database index.  Defaults to ``2``.
    timeout_seconds:
        Deadline shared by the connect and fetch phase.  Defaults to ``5.0``.
    """

    model_config = {"extra": "ignore", "frozen": True}

    host: str
    port: int = Field(strict=True)
    secrets_dir: Path = Field(
        validation_alias=AliasChoices("secrets_dir", "credential_dir"),
    )
    db: int = Field(default=DEFAULT_DB, ge=0)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @field_validator("host", mode="before")
    @classmethod
    def _require_host(cls, value: Any) -> Any:  # noqa: ANN401
        if isinstance(value, str) and not value.strip():
            raise ValueError("redis.host is required")
        return value.strip() if isinstance(value, str) else value

    @field_validator("port")
    @classmethod
    def _require_port(cls, value: int) -> int:
        if value == 0:
            raise ValueError("redis.port is required")
        if not 0 < value < 65536:
            raise ValueError(f"redis.port out of range: {value}")
        return value

    @field_validator("secrets_dir", mode="before")
    @classmethod
    def _require_secrets_dir(cls, value: Any) -> Any:  # noqa: ANN401
        # Path("") would silently become the current directory.
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("redis.secrets_dir is required")
        return value

    @property
    def address(self) -> str:
        """``host:port`` string, used in log lines and error messages."""
        return f"{self.host}:{self.port}"


class ToolConfig(BaseModel):
    """Top-level configuration document."""

    model_config = {"extra": "ignore", "frozen": True}

    redis: RedisConfig
