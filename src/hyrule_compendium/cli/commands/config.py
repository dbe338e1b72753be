"""Config subcommands for configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from rich.syntax import Syntax

from hyrule_compendium.cli.state import CliState
from hyrule_compendium.cli.utils.output import console, print_error, print_success
from hyrule_compendium.config import CompendiumConfig

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show(ctx: typer.Context) -> None:
    """Display the effective configuration.

    The effective configuration merges the --config file, environment
    variables and the --base-url flag, in that order.

    Examples:
        hyrule-compendium config show
        hyrule-compendium --config compendium.yaml config show
    """
    state = ctx.obj if isinstance(ctx.obj, CliState) else CliState.load()
    output = yaml.dump(
        state.config.model_dump(), default_flow_style=False, sort_keys=False
    )
    console.print(Syntax(output, "yaml", theme="monokai", line_numbers=False))


@app.command("generate")
def generate(
    output: Annotated[
        Path,
        typer.Argument(help="Output file path"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Generate a configuration file with default values.

    Examples:
        hyrule-compendium config generate compendium.yaml
    """
    if output.exists() and not force:
        print_error(f"File already exists: {output}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    output.parent.mkdir(parents=True, exist_ok=True)
    CompendiumConfig().to_yaml(str(output))

    print_success(f"Generated configuration: {output}")


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a configuration file.

    Examples:
        hyrule-compendium config validate compendium.yaml
    """
    try:
        CompendiumConfig.from_yaml(str(config_path))
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    print_success(f"Configuration is valid: {config_path}")
