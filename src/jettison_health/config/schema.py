"""Config schema re-export and validation helper for jettison-health.

Re-exports the models from ``jettison_health.schema.config`` so that
``jettison_health.config`` is a complete import path.

Shipped in this module
----------------------
- RedisConfig, ToolConfig — re-exports
- validate_config         — standalone validation helper
"""
from __future__ import annotations

from pydantic import ValidationError

from jettison_health.schema.config import RedisConfig, ToolConfig
from jettison_health.schema.errors import ConfigurationError

__all__ = ["RedisConfig", "ToolConfig", "validate_config"]


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "config"
        message = error["msg"]
        if error["type"] == "missing":
            message = f"{location} is required"
        elif message.startswith("Value error, "):
            message = message[len("Value error, "):]
        else:
            message = f"{location}: {message}"
        parts.append(message)
    return "; ".join(parts)


def validate_config(data: dict[str, object]) -> ToolConfig:
    """Validate a raw dict against the ``ToolConfig`` schema.

    Parameters
    ----------
    data:
        Unvalidated key/value mapping, as parsed from the config file.

    Returns
    -------
    ToolConfig

    Raises
    ------
    ConfigurationError
        If any required field is missing or invalid.  The original
        ``ValidationError`` is attached as the ``__cause__``.

    Examples
    --------
    >>> cfg = validate_config(
    ...     {"redis": {"host": "localhost", "port": 6379, "secrets_dir": "/s/app"}}
    ... )
    >>> cfg.redis.db
    2
    """
    try:
        return ToolConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            _describe(exc),
            context={"errors": exc.errors(include_url=False)},
        ) from exc
