import logging

import pytest

from daterange.settings import get_settings


def test_get_settings__no_environment__uses_defaults() -> None:
    settings = get_settings()
    assert settings.log_level == logging.WARNING
    assert settings.log_date_format == "%Y-%m-%d %H:%M:%S"


def test_get_settings__environment_override__is_applied(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATERANGE_LOG_LEVEL", "10")
    assert get_settings().log_level == logging.DEBUG


def test_get_settings__called_twice__returns_cached_instance() -> None:
    assert get_settings() is get_settings()
