"""Credential loading for jettison-health."""
from __future__ import annotations

from jettison_health.credentials.loader import load_credentials, username_for

__all__ = ["load_credentials", "username_for"]
