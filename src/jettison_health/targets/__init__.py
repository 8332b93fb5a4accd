"""Target parsing for jettison-health."""
from __future__ import annotations

from jettison_health.targets.parser import parse_target, parse_targets

__all__ = ["parse_target", "parse_targets"]
