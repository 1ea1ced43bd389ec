from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class AppSettings(BaseSettings):
    api_title: str = "Roman Calculator API"
    api_version: str = "0.1.0"

    log_level: str = "INFO"
    cli_log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", "cli_log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {value}")
        return level


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
