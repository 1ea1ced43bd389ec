from __future__ import annotations

import pytest
from pydantic import ValidationError

from romancalc.core.config import AppSettings


def clear_env(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("CLI_LOG_LEVEL", raising=False)


def test_defaults_keep_cli_quieter_than_service(monkeypatch) -> None:
    clear_env(monkeypatch)

    settings = AppSettings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.cli_log_level == "WARNING"


def test_log_levels_are_read_from_env_and_normalised(monkeypatch) -> None:
    clear_env(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CLI_LOG_LEVEL", " error ")

    settings = AppSettings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.cli_log_level == "ERROR"


def test_unknown_log_level_is_rejected(monkeypatch) -> None:
    clear_env(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)
