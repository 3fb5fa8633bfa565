"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # OVapi configuration
    api_timeout_seconds: int = Field(
        default=10, description="Timeout for OVapi requests in seconds"
    )
    log_requests: bool = Field(
        default=False, description="Log every OVapi request with its status and duration"
    )

    # Polling configuration
    update_interval_seconds: int = Field(
        default=60, description="Interval between departure requests per module in seconds"
    )

    # Notification configuration
    notification_topic: str = Field(
        default="bustimes",
        description="Pub/sub topic the DATA and ERROR notifications are sent to",
    )
    request_topic: str = Field(
        default="bustimes-requests",
        description="Pub/sub topic GETDATA requests from the display front end arrive on",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    # TOML config file path
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file with module definitions",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one the logging module knows."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("api_timeout_seconds", "update_interval_seconds")
    @classmethod
    def validate_positive(cls, v: int, info: ValidationInfo) -> int:
        """Validate timeouts and intervals are positive, including TOML overrides."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive")
        return v

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating API settings.

        Overrides from the [api] table go through the same field validators
        as environment variables.
        """
        if not self.config_file:
            raise ValueError("config_file must be set to load module configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api_config = toml_data.get("api", {})
        if "timeout_seconds" in api_config:
            self.api_timeout_seconds = api_config["timeout_seconds"]
        if "update_interval_seconds" in api_config:
            self.update_interval_seconds = api_config["update_interval_seconds"]

        return toml_data

    def get_modules_config(self) -> list[dict[str, Any]]:
        """Parse and return module definitions as a list of dicts from the TOML file."""
        toml_data = self._load_toml_data()

        modules = toml_data.get("modules", [])
        if not isinstance(modules, list):
            raise ValueError("TOML config 'modules' must be a list")
        return modules
