"""Main CLI application and entry point.

This module defines the main Typer application and aggregates the
command groups (lookup, config).
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError

from hyrule_compendium.cli.commands import config as config_commands
from hyrule_compendium.cli.commands import lookup as lookup_commands
from hyrule_compendium.cli.state import CliState
from hyrule_compendium.cli.utils.output import print_error

app = typer.Typer(
    name="hyrule-compendium",
    help="Query the Hyrule Compendium API",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

# Add command groups
app.add_typer(lookup_commands.app, name="lookup", help="Entry and category lookups")
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", help="Override the API base URL"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print results as JSON"),
    ] = False,
) -> None:
    """Hyrule Compendium CLI.

    Look up compendium entries by id or name, list categories, and
    manage the client configuration.
    """
    try:
        state = CliState.load(config_path, base_url, as_json)
    except (yaml.YAMLError, ValidationError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=state.config.logging.level,
        format=state.config.logging.format,
    )
    ctx.obj = state


if __name__ == "__main__":
    app()
