"""Unit tests for jettison_health.schema.errors.

Tests cover the error hierarchy, severity enum, context payload, the
per-class ``title`` used in error documents, and repr formatting.
"""
from __future__ import annotations

import pytest

from jettison_health.schema.errors import (
    ArgumentError,
    ConfigError,
    ConfigurationError,
    CredentialError,
    ErrorSeverity,
    JettisonHealthError,
    StoreError,
)


# ---------------------------------------------------------------------------
# ErrorSeverity enum
# ---------------------------------------------------------------------------


class TestErrorSeverity:
    def test_expected_members_exist(self) -> None:
        values = {m.value for m in ErrorSeverity}
        assert values == {"critical", "high", "medium", "low", "info"}

    def test_members_are_str_subclass(self) -> None:
        assert isinstance(ErrorSeverity.HIGH, str)
        assert ErrorSeverity.CRITICAL == "critical"


# ---------------------------------------------------------------------------
# JettisonHealthError base class
# ---------------------------------------------------------------------------


class TestJettisonHealthError:
    def test_message_is_accessible_as_str(self) -> None:
        exc = JettisonHealthError("something broke")
        assert str(exc) == "something broke"

    def test_default_severity_is_high(self) -> None:
        assert JettisonHealthError("oops").severity is ErrorSeverity.HIGH

    def test_severity_override_is_per_instance(self) -> None:
        exc = StoreError("slow", severity=ErrorSeverity.LOW)
        assert exc.severity is ErrorSeverity.LOW
        assert StoreError("other").severity is ErrorSeverity.CRITICAL

    def test_context_defaults_to_empty_dict(self) -> None:
        assert JettisonHealthError("no context").context == {}

    def test_context_is_stored_when_provided(self) -> None:
        ctx: dict[str, object] = {"path": "/etc/cfg.json"}
        assert JettisonHealthError("ctx", context=ctx).context == ctx

    def test_default_title(self) -> None:
        assert JettisonHealthError("x").title == "Health query failed"

    def test_title_override_is_per_instance(self) -> None:
        exc = StoreError("refused", title="Redis connection failed")
        assert exc.title == "Redis connection failed"
        assert StoreError("other").title == "Redis fetch failed"

    def test_repr_contains_class_name_and_severity(self) -> None:
        exc = CredentialError("boom", severity=ErrorSeverity.LOW)
        assert "CredentialError" in repr(exc)
        assert "low" in repr(exc)


# ---------------------------------------------------------------------------
# Domain subclasses
# ---------------------------------------------------------------------------


class TestDomainErrorSubclasses:
    @pytest.mark.parametrize(
        "error_cls",
        [ArgumentError, ConfigurationError, CredentialError, StoreError],
    )
    def test_can_be_caught_as_root_error(
        self, error_cls: type[JettisonHealthError]
    ) -> None:
        with pytest.raises(JettisonHealthError):
            raise error_cls("caught at base")

    @pytest.mark.parametrize(
        ("error_cls", "title"),
        [
            (ArgumentError, "Invalid arguments"),
            (ConfigurationError, "Configuration error"),
            (CredentialError, "Credential loading failed"),
            (StoreError, "Redis fetch failed"),
        ],
    )
    def test_class_titles(self, error_cls: type[JettisonHealthError], title: str) -> None:
        assert error_cls("msg").title == title

    def test_config_error_alias(self) -> None:
        assert ConfigError is ConfigurationError

    def test_distinct_domain_errors_are_not_interchangeable(self) -> None:
        assert not issubclass(CredentialError, ConfigurationError)
        assert not issubclass(StoreError, ArgumentError)

    @pytest.mark.parametrize(
        ("error_cls", "severity"),
        [
            (ArgumentError, ErrorSeverity.MEDIUM),
            (ConfigurationError, ErrorSeverity.HIGH),
            (CredentialError, ErrorSeverity.HIGH),
            (StoreError, ErrorSeverity.CRITICAL),
        ],
    )
    def test_class_severities(
        self, error_cls: type[JettisonHealthError], severity: ErrorSeverity
    ) -> None:
        assert error_cls("msg").severity is severity
