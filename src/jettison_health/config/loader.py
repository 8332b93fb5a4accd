"""Configuration loader for jettison-health.

``ConfigLoader`` resolves the tool configuration from a JSON file (the
format the deployment images ship) or a YAML file, picking the parser from
the file suffix.

Shipped in this module
----------------------
- ConfigLoader   — JSON / YAML config loader with validation
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from jettison_health.config.schema import validate_config
from jettison_health.schema.config import ToolConfig
from jettison_health.schema.errors import ConfigurationError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})


class ConfigLoader:
    """Loads ``ToolConfig`` from a file on disk.

    All loader methods return a validated ``ToolConfig``.  None of the
    required connection fields has a default; a file that omits one is a
    :class:`~jettison_health.schema.errors.ConfigurationError`.

    Examples
    --------
    >>> loader = ConfigLoader()
    >>> cfg = loader.load("/etc/jettison/health.json")  # doctest: +SKIP
    >>> cfg.redis.address  # doctest: +SKIP
    'redis:6379'
    """

    def load(self, path: str | Path) -> ToolConfig:
        """Load configuration, choosing YAML or JSON from the suffix.

        Files ending in ``.yaml`` or ``.yml`` are parsed as YAML; anything
        else is parsed as JSON.

        Raises
        ------
        ConfigurationError
            If the file cannot be read, parsed, or validated.
        """
        resolved = Path(path)
        if resolved.suffix.lower() in _YAML_SUFFIXES:
            return self.load_yaml(resolved)
        return self.load_json(resolved)

    def load_json(self, path: str | Path) -> ToolConfig:
        """Load configuration from a JSON file.

        Parameters
        ----------
        path:
            Path to a JSON config file.

        Returns
        -------
        ToolConfig

        Raises
        ------
        ConfigurationError
            If the file cannot be read or fails validation.
        """
        resolved = Path(path)
        text = self._read(resolved)
        try:
            raw: object = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"failed to parse JSON config {resolved}: {exc}",
                context={"path": str(resolved)},
            ) from exc

        logger.debug("Loaded JSON config from %s", resolved)
        return validate_config(self._as_mapping(raw, resolved))

    def load_yaml(self, path: str | Path) -> ToolConfig:
        """Load configuration from a YAML file.

        Parameters
        ----------
        path:
            Path to a YAML config file.

        Returns
        -------
        ToolConfig

        Raises
        ------
        ConfigurationError
            If the file cannot be read or fails validation.
        """
        resolved = Path(path)
        text = self._read(resolved)
        try:
            raw: object = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"failed to parse YAML config {resolved}: {exc}",
                context={"path": str(resolved)},
            ) from exc

        logger.debug("Loaded YAML config from %s", resolved)
        return validate_config(self._as_mapping(raw, resolved))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read(resolved: Path) -> str:
        if not resolved.is_file():
            raise ConfigurationError(
                f"failed to read config file: {resolved} not found",
                context={"path": str(resolved)},
            )
        try:
            return resolved.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(
                f"failed to read config file {resolved}: {exc}",
                context={"path": str(resolved)},
            ) from exc

    @staticmethod
    def _as_mapping(raw: object, resolved: Path) -> dict[str, object]:
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"config file {resolved} must contain a mapping, "
                f"got {type(raw).__name__}",
                context={"path": str(resolved)},
            )
        return dict(raw)
