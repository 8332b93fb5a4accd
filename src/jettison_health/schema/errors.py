"""Error taxonomy for jettison-health.

Every fatal condition raised by the query pipeline derives from
``JettisonHealthError`` so that the CLI can catch the whole family with a
single ``except JettisonHealthError`` clause and render it as the structured
error document.

Shipped in this module
----------------------
- ErrorSeverity        — ordered severity enum
- JettisonHealthError  — root exception with severity, title and context
- Domain subclasses    — ArgumentError, ConfigurationError, CredentialError,
                         StoreError

A key that is absent from the store is *not* an error; it is reported in
``HealthRecord.missing_keys``.
"""
from __future__ import annotations

from enum import Enum


class ErrorSeverity(str, Enum):
    """Severity levels attached to ``JettisonHealthError``; the CLI maps them to log levels."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class JettisonHealthError(Exception):
    """Root exception for all jettison-health failures.

    Parameters
    ----------
    message:
        Human-readable description of what went wrong.  Becomes the
        ``details`` field of the error document.
    severity:
        ``ErrorSeverity`` level.  Defaults to the class-level
        :attr:`severity`.  The CLI logs the failure at the matching level.
    context:
        Optional dict of structured metadata (paths, keys, targets).
    title:
        Short summary used as the ``error`` field of the error document.
        Defaults to the class-level :attr:`title`.

    Examples
    --------
    >>> try:
    ...     raise StoreError("connection refused", title="Redis connection failed")
    ... except JettisonHealthError as exc:
    ...     print(exc.title)
    Redis connection failed
    """

    title: str = "Health query failed"
    severity: ErrorSeverity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity | None = None,
        context: dict[str, object] | None = None,
        title: str | None = None,
    ) -> None:
        super().__init__(message)
        if severity is not None:
            self.severity = severity
        self.context: dict[str, object] = context or {}
        if title is not None:
            self.title = title

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"message={str(self)!r}, "
            f"severity={self.severity.value!r})"
        )


class ArgumentError(JettisonHealthError):
    """Raised for malformed or absent ``service:category`` arguments."""

    title = "Invalid arguments"
    severity = ErrorSeverity.MEDIUM


class ConfigurationError(JettisonHealthError):
    """Raised when the config file cannot be read, parsed, or validated.

    Examples: missing file, bad JSON, ``redis.port`` absent or zero.
    """

    title = "Configuration error"


ConfigError = ConfigurationError


class CredentialError(JettisonHealthError):
    """Raised when the password file is unreadable or blank."""

    title = "Credential loading failed"


class StoreError(JettisonHealthError):
    """Raised for store transport failures.

    Examples: connection refused, authentication failure, read timeout,
    fetch deadline exceeded, non-integer value under a health key.
    """

    title = "Redis fetch failed"
    severity = ErrorSeverity.CRITICAL
