"""Unit tests for environment-driven settings."""

from __future__ import annotations

import pytest

from problem_details.core.config import get_settings

pytestmark = pytest.mark.usefixtures("clear_settings_cache")


def test_defaults_apply_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PROBLEM_DETAILS_LOG_ERRORS", "PROBLEM_DETAILS_LOG_LEVEL", "PROBLEM_DETAILS_SERVICE_NAME"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.log_errors is True
    assert settings.log_level == "INFO"
    assert settings.service_name == "problem-details"


def test_environment_overrides_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROBLEM_DETAILS_LOG_ERRORS", "Off")
    monkeypatch.setenv("PROBLEM_DETAILS_LOG_LEVEL", "debug")
    monkeypatch.setenv("PROBLEM_DETAILS_SERVICE_NAME", "orders-api")

    settings = get_settings()

    assert settings.safe_for_logging() == {
        "log_errors": False,
        "log_level": "DEBUG",
        "service_name": "orders-api",
    }


def test_invalid_boolean_flag_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROBLEM_DETAILS_LOG_ERRORS", "sometimes")

    with pytest.raises(ValueError, match="PROBLEM_DETAILS_LOG_ERRORS"):
        get_settings()
