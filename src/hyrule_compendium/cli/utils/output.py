"""Rich console output formatting utilities."""

from typing import Any

from pydantic_core import to_json
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from hyrule_compendium.models import (
    AllStandardEntries,
    CreatureEntry,
    EquipmentEntry,
    MaterialEntry,
    MonsterEntry,
    TreasureEntry,
    entry_category,
)

console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_json(value: Any) -> None:
    """Print any model, list of models or plain value as JSON."""
    console.print_json(to_json(value).decode())


def format_list(values: list[str] | None) -> str:
    """Format an optional list of strings for display."""
    if not values:
        return "[dim]none[/dim]"
    return escape(", ".join(values))


def create_entry_panel(entry: Any) -> Panel:
    """Create a detailed panel for a single entry.

    Args:
        entry: Any decoded entry model

    Returns:
        Rich Panel instance
    """
    content = f"""[bold]Id:[/bold] {entry.id}
[bold]Category:[/bold] {entry_category(entry).value}
[bold]Common Locations:[/bold] {format_list(entry.common_locations)}
[bold]Image:[/bold] {escape(entry.image)}

{escape(entry.description)}"""

    details: list[str] = []
    if isinstance(entry, (MonsterEntry, CreatureEntry, TreasureEntry)):
        details.append(f"  Drops: {format_list(entry.drops)}")
    if isinstance(entry, (CreatureEntry, MaterialEntry)):
        if entry.hearts_recovered is not None:
            details.append(f"  Hearts Recovered: {entry.hearts_recovered:g}")
    if isinstance(entry, CreatureEntry) and entry.cooking_effect:
        details.append(f"  Cooking Effect: {escape(entry.cooking_effect)}")
    if isinstance(entry, EquipmentEntry):
        if entry.attack is not None:
            details.append(f"  Attack: {entry.attack}")
        if entry.defense is not None:
            details.append(f"  Defense: {entry.defense}")

    if details:
        content += "\n\n[bold cyan]Details[/bold cyan]\n" + "\n".join(details)

    return Panel(
        content, title=f"[bold]{escape(entry.name)}[/bold]", border_style="blue"
    )


def create_entry_table(title: str, entries: list[Any]) -> Table:
    """Create a rich table listing entries by id and name.

    Args:
        title: Table title
        entries: Decoded entry models

    Returns:
        Rich Table instance
    """
    table = Table(title=title)

    table.add_column("Id", justify="right", style="magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Common Locations")

    for entry in sorted(entries, key=lambda e: e.id):
        table.add_row(
            str(entry.id), escape(entry.name), format_list(entry.common_locations)
        )

    return table


def create_catalog_table(catalog: AllStandardEntries) -> Table:
    """Create a summary table with the entry count of each category."""
    table = Table(title="Compendium Catalog")

    table.add_column("Category", style="bold")
    table.add_column("Entries", justify="right", style="green")

    table.add_row("creatures (food)", str(len(catalog.creatures.food)))
    table.add_row("creatures (non-food)", str(len(catalog.creatures.non_food)))
    table.add_row("equipment", str(len(catalog.equipment)))
    table.add_row("materials", str(len(catalog.materials)))
    table.add_row("monsters", str(len(catalog.monsters)))
    table.add_row("treasure", str(len(catalog.treasure)))
    table.add_row("[bold]total[/bold]", f"[bold]{catalog.count()}[/bold]")

    return table
