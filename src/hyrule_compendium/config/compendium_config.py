"""Client configuration with Pydantic validation.

This module provides the configuration for the compendium client and its
command-line front end, with support for YAML file loading and environment
variable overrides.
"""

import os
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from hyrule_compendium.client.http_client import DEFAULT_BASE_URL
from hyrule_compendium.client.paths import parse_base_url
from hyrule_compendium.exceptions import InvalidBaseUrlError

BASE_URL_ENV_VAR = "HYRULE_COMPENDIUM_BASE_URL"
LOG_LEVEL_ENV_VAR = "HYRULE_COMPENDIUM_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration for command-line use."""

    model_config = ConfigDict(frozen=True)

    level: LogLevel = Field(
        "WARNING",
        description="Root log level",
    )
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="logging.basicConfig format string",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class CompendiumConfig(BaseModel):
    """Complete client configuration.

    The configuration can be:
    - Instantiated with defaults: `CompendiumConfig()`
    - Loaded from YAML: `CompendiumConfig.from_yaml("compendium.yaml")`
    - Overlaid with environment variables: `CompendiumConfig.from_env(config)`
    - Saved to YAML: `config.to_yaml("compendium.yaml")`
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Absolute base URL of the compendium API",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @field_validator("base_url")
    @classmethod
    def _absolute_base_url(cls, value: str) -> str:
        try:
            parse_base_url(value)
        except InvalidBaseUrlError as e:
            raise ValueError(str(e)) from e
        return value

    @classmethod
    def from_yaml(cls, path: str) -> "CompendiumConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            A validated CompendiumConfig instance.

        Raises:
            FileNotFoundError: If the configuration file doesn't exist.
            ValidationError: If the configuration is invalid.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def from_env(cls, base: "CompendiumConfig | None" = None) -> "CompendiumConfig":
        """Apply environment variable overrides on top of a configuration.

        Reads HYRULE_COMPENDIUM_BASE_URL and HYRULE_COMPENDIUM_LOG_LEVEL.
        Unset or empty variables leave the base value untouched.
        """
        data = (base or cls()).model_dump()
        base_url = os.environ.get(BASE_URL_ENV_VAR)
        if base_url:
            data["base_url"] = base_url
        log_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if log_level:
            data["logging"]["level"] = log_level
        return cls.model_validate(data)

    def to_yaml(self, path: str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved.
        """
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
