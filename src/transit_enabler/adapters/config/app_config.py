"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _check_log_level(level: str) -> str:
    if level.upper() not in _LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
    return level.upper()


def _check_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Root log level, e.g. 'INFO' or 'DEBUG'")

    # Trip query configuration
    adjust_individual_legs: bool = Field(
        default=True,
        description="Move walks/transfers that would start before the previous leg arrives",
    )
    discard_untravelable: bool = Field(
        default=False, description="Drop trips that are not travelable after adjustment"
    )
    min_trips: int = Field(
        default=0, description="Keep paging for more trips until this many are known"
    )
    max_more_trips_pages: int = Field(
        default=3, description="Maximum number of follow-up pages per trip query"
    )

    # TOML config file path, optional
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding [trips] and [logging] settings",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        return _check_log_level(v)

    @field_validator("min_trips", "max_more_trips_pages")
    @classmethod
    def validate_non_negative(cls, v: int, info: ValidationInfo) -> int:
        """Validate counts are not negative."""
        return _check_non_negative(info.field_name or "value", v)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating trip and logging settings."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

            # Update logging settings from TOML if present
            logging_config = toml_data.get("logging", {})
            if "level" in logging_config:
                self.log_level = _check_log_level(logging_config["level"])

            # Update trip settings from TOML if present
            trips = toml_data.get("trips", {})
            if not isinstance(trips, dict):
                raise ValueError("TOML config 'trips' must be a table")
            if "adjust_individual_legs" in trips:
                self.adjust_individual_legs = bool(trips["adjust_individual_legs"])
            if "discard_untravelable" in trips:
                self.discard_untravelable = bool(trips["discard_untravelable"])
            if "min_trips" in trips:
                self.min_trips = _check_non_negative("min_trips", int(trips["min_trips"]))
            if "max_more_trips_pages" in trips:
                self.max_more_trips_pages = _check_non_negative(
                    "max_more_trips_pages", int(trips["max_more_trips_pages"])
                )

            return toml_data

    def load_config_file(self) -> "AppConfig":
        """Apply the TOML config file, if any, and return self."""
        self._load_toml_data()
        return self
