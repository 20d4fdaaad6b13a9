"""``apptypes list`` — show every registered application type."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from apptypes.bootstrap import build_registry
from apptypes.types.capabilities import capabilities_of

console = Console()


def list_cmd(
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the serialized records instead of a table.",
    ),
) -> None:
    """List the registered application types."""
    registry = build_registry()

    if as_json:
        console.print_json(data=registry.serialize_all())
        return

    if not len(registry):
        console.print("[dim]No application types registered.[/dim]")
        return

    table = Table(title="Application Types")
    table.add_column("Type", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Icon")
    table.add_column("Route")
    table.add_column("Capabilities")

    for descriptor in registry:
        table.add_row(
            descriptor.type,
            descriptor.name,
            descriptor.icon_class,
            descriptor.route_name or "[dim]-[/dim]",
            ", ".join(capabilities_of(descriptor)) or "[dim]none[/dim]",
        )

    console.print(table)
