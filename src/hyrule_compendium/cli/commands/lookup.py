"""Lookup subcommands that query the compendium API."""

from __future__ import annotations

from typing import Annotated

import typer

from hyrule_compendium.cli.state import CliState
from hyrule_compendium.cli.utils.output import (
    console,
    create_catalog_table,
    create_entry_panel,
    create_entry_table,
    print_error,
    print_json,
)
from hyrule_compendium.client import CompendiumClient
from hyrule_compendium.config import CompendiumConfig
from hyrule_compendium.exceptions import CompendiumError
from hyrule_compendium.models import CompendiumCategory, EntryIdentifier, GameMode

app = typer.Typer(no_args_is_help=True)


def create_client(config: CompendiumConfig) -> CompendiumClient:
    """Build the client used by every lookup command."""
    return CompendiumClient.from_config(config)


def parse_identifier(value: str) -> EntryIdentifier:
    """Treat all-digit input as an id and anything else as a name."""
    if value.isdigit():
        return EntryIdentifier.by_id(int(value))
    return EntryIdentifier.by_name(value)


def _state(ctx: typer.Context) -> CliState:
    state = ctx.obj
    if not isinstance(state, CliState):
        state = CliState.load()
        ctx.obj = state
    return state


@app.command("entry")
def entry(
    ctx: typer.Context,
    identifier: Annotated[
        str,
        typer.Argument(help="Entry id or name (e.g. 112 or 'silver moblin')"),
    ],
) -> None:
    """Show any standard mode entry.

    Examples:
        hyrule-compendium lookup entry 112
        hyrule-compendium lookup entry "winterwing butterfly"
    """
    state = _state(ctx)
    try:
        with create_client(state.config) as client:
            result = client.entry(parse_identifier(identifier))
    except CompendiumError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if state.as_json:
        print_json(result)
    else:
        console.print(create_entry_panel(result))


@app.command("monster")
def monster(
    ctx: typer.Context,
    identifier: Annotated[
        str,
        typer.Argument(help="Monster id or name"),
    ],
    master_mode: Annotated[
        bool,
        typer.Option("--master-mode", "-m", help="Look up the master mode entry"),
    ] = False,
) -> None:
    """Show a monster entry.

    Examples:
        hyrule-compendium lookup monster 123
        hyrule-compendium lookup monster "golden bokoblin" --master-mode
    """
    state = _state(ctx)
    mode = GameMode.MASTER_MODE if master_mode else GameMode.STANDARD
    try:
        with create_client(state.config) as client:
            result = client.monster(parse_identifier(identifier), mode)
    except CompendiumError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if state.as_json:
        print_json(result)
    else:
        console.print(create_entry_panel(result))


@app.command("category")
def category(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(
            help="Category (creatures, monsters, materials, equipment, treasure)"
        ),
    ],
) -> None:
    """List every entry of a category.

    Examples:
        hyrule-compendium lookup category monsters
        hyrule-compendium lookup category creatures
    """
    state = _state(ctx)
    try:
        parsed = CompendiumCategory.parse(name)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    try:
        with create_client(state.config) as client:
            result = client.category(parsed)
    except CompendiumError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if state.as_json:
        print_json(result.entries)
    elif parsed is CompendiumCategory.CREATURE:
        console.print(create_entry_table("Creatures (food)", result.creatures.food))
        console.print(
            create_entry_table("Creatures (non-food)", result.creatures.non_food)
        )
    else:
        console.print(create_entry_table(parsed.value.capitalize(), result.entries))


@app.command("all")
def all_entries(
    ctx: typer.Context,
    master_mode: Annotated[
        bool,
        typer.Option("--master-mode", "-m", help="List master mode entries instead"),
    ] = False,
) -> None:
    """Summarize the whole catalog, or list master mode entries.

    Examples:
        hyrule-compendium lookup all
        hyrule-compendium lookup all --master-mode
    """
    state = _state(ctx)
    try:
        with create_client(state.config) as client:
            if master_mode:
                monsters = client.all_master_mode_entries()
            else:
                catalog = client.all_entries()
    except CompendiumError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if master_mode:
        if state.as_json:
            print_json(monsters)
        else:
            console.print(create_entry_table("Master Mode Monsters", monsters))
    elif state.as_json:
        print_json(catalog)
    else:
        console.print(create_catalog_table(catalog))
