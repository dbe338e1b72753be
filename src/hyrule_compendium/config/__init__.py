"""Configuration module for the compendium client.

This module provides Pydantic-based configuration classes, with support for
YAML file loading and environment variable overrides.
"""

from hyrule_compendium.config.compendium_config import (
    BASE_URL_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    CompendiumConfig,
    LoggingConfig,
)

__all__ = [
    "CompendiumConfig",
    "LoggingConfig",
    "BASE_URL_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
]
