from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "LoggingSettings",
    "Settings",
    "StatisticsSettings",
    "reload_settings",
    "settings",
]


class LoggingSettings(BaseModel):
    """
    Logging settings for the application
    """

    disabled: bool = False
    clear_loggers: bool = True
    console_log_level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None


class StatisticsSettings(BaseModel):
    """
    Defaults used when summarizing latency and throughput histograms
    """

    percentiles: list[float] = Field(
        default_factory=lambda: [0.5, 0.75, 0.9, 0.95, 0.99]
    )

    @field_validator("percentiles")
    @classmethod
    def check_percentiles(cls, value: list[float]) -> list[float]:
        for percentile in value:
            if not 0.0 <= percentile <= 1.0:
                msg = f"Percentiles must be within [0, 1], got {percentile}"
                raise ValueError(msg)
        return value


class Settings(BaseSettings):
    """
    All the settings are powered by pydantic_settings and could be
    populated from the .env file.

    The format to populate the settings is next

    ```sh
    export SALVO__LOGGING__CONSOLE_LOG_LEVEL=DEBUG
    export SALVO__STATISTICS__PERCENTILES='[0.5, 0.99]'
    ```
    """

    model_config = SettingsConfigDict(
        env_prefix="SALVO__",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
        env_file=".env",
    )

    logging: LoggingSettings = LoggingSettings()
    statistics: StatisticsSettings = StatisticsSettings()


settings = Settings()


def reload_settings() -> None:
    """
    Reload the settings from the environment variables
    """
    new_settings = Settings()
    settings.__dict__.update(new_settings.__dict__)
