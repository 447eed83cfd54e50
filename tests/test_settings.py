from __future__ import annotations

import pytest
from pydantic import ValidationError

from salvo.settings import Settings, StatisticsSettings, reload_settings, settings


def test_percentiles_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALVO__STATISTICS__PERCENTILES", "[0.5, 0.999]")
    assert Settings().statistics.percentiles == [0.5, 0.999]


def test_percentiles_must_be_fractions() -> None:
    with pytest.raises(ValidationError):
        StatisticsSettings(percentiles=[0.5, 99.0])


def test_reload_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALVO__LOGGING__CONSOLE_LOG_LEVEL", "DEBUG")
    reload_settings()
    try:
        assert settings.logging.console_log_level == "DEBUG"
    finally:
        monkeypatch.delenv("SALVO__LOGGING__CONSOLE_LOG_LEVEL")
        reload_settings()
    assert settings.logging.console_log_level == "WARNING"
