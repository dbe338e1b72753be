"""Shared state handed from the main callback to every subcommand."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hyrule_compendium.config import CompendiumConfig


@dataclass(frozen=True)
class CliState:
    """Resolved configuration and output options for one invocation."""

    config: CompendiumConfig
    as_json: bool = False

    @classmethod
    def load(
        cls,
        config_path: Path | None = None,
        base_url: str | None = None,
        as_json: bool = False,
    ) -> CliState:
        """Resolve configuration: YAML file, then environment, then flags.

        Raises:
            ValidationError: If the resulting configuration is invalid.
        """
        config = (
            CompendiumConfig.from_yaml(str(config_path))
            if config_path is not None
            else CompendiumConfig()
        )
        config = CompendiumConfig.from_env(config)
        if base_url:
            config = CompendiumConfig.model_validate(
                {**config.model_dump(), "base_url": base_url}
            )
        return cls(config=config, as_json=as_json)
