"""``apptypes show TYPE`` — print the serialized record of one type."""

from __future__ import annotations

import typer
from rich.console import Console

from apptypes.bootstrap import build_registry
from apptypes.registry import UnknownTypeError

console = Console()


def show_cmd(
    type_name: str = typer.Argument(..., help="The application type key."),
) -> None:
    """Show the serialized record of an application type."""
    registry = build_registry()
    try:
        descriptor = registry.get(type_name)
    except UnknownTypeError:
        console.print(f"[bold red]Unknown application type:[/bold red] {type_name}")
        raise typer.Exit(code=1)
    console.print_json(data=descriptor.serialize())
