"""Default constants for jettison-health.

These mirror the conventions of the process supervisor that writes the
health pools.  Only the optional connection knobs have defaults; ``host``,
``port`` and ``secrets_dir`` must always come from the config file.
"""
from __future__ import annotations

from jettison_health.schema.config import DEFAULT_DB, DEFAULT_TIMEOUT_SECONDS

PASSWORD_FILENAME: str = "password"
"""Name of the password file inside the secrets directory."""

__all__ = ["DEFAULT_DB", "DEFAULT_TIMEOUT_SECONDS", "PASSWORD_FILENAME"]
