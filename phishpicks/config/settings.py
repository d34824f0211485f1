"""Configuration management using Pydantic Settings.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- OutputConfig: CLI rendering defaults

Scoring point values are fixed game rules and intentionally live in
``phishpicks.domain.rules``, not here.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "WARNING"
    file_level: str = "DEBUG"
    log_file: Path = Path("phishpicks.log")
    file_enabled: bool = True
    real_time_debug: bool = True


class OutputConfig(BaseModel):
    """CLI output defaults."""

    default_format: Literal["table", "json"] = "table"
    leaderboard_limit: int = 10


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: CONSOLE_LOG_LEVEL, LOG_FILE, OUTPUT_FORMAT
    - Nested: LOGGING__CONSOLE_LEVEL, OUTPUT__DEFAULT_FORMAT

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Map flat environment variables (LOG_FILE) onto the nested groups."""
        if not isinstance(data, dict):
            return data

        transformed: dict[str, dict[str, Any]] = {}

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_file_enabled": "file_enabled",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        output_mapping = {
            "output_format": "default_format",
            "leaderboard_limit": "leaderboard_limit",
        }
        for env_key, field_key in output_mapping.items():
            if env_key in data:
                transformed.setdefault("output", {})[field_key] = data.pop(env_key)

        for section, values in transformed.items():
            existing = data.get(section)
            if isinstance(existing, dict):
                data[section] = {**existing, **values}
            else:
                data[section] = values

        return data


# Singleton instance for application use
settings = Settings()
