"""``apptypes validate PATH`` — check that a plugin class constructs cleanly.

Imports the class at ``module:Class``, constructs it (which validates its
identity) and prints the serialized record.  Nothing is registered.
"""

from __future__ import annotations

import typer
from rich.console import Console

from apptypes.plugins.loader import import_application_type
from apptypes.types.base import ConfigurationError
from apptypes.types.capabilities import capabilities_of

console = Console()


def validate_cmd(
    path: str = typer.Argument(..., help="Plugin class as 'module:ClassName'."),
) -> None:
    """Validate an application type plugin class."""
    try:
        cls = import_application_type(path)
    except (ImportError, AttributeError, TypeError, ValueError) as exc:
        console.print(f"[bold red]Cannot load {path}:[/bold red] {exc}")
        raise typer.Exit(code=1)

    try:
        descriptor = cls()
    except ConfigurationError as exc:
        console.print(f"[bold red]Invalid application type:[/bold red] {exc}")
        raise typer.Exit(code=1)

    console.print(f"[green]OK[/green] {path} -> '{descriptor.type}'")
    capabilities = capabilities_of(descriptor)
    if capabilities:
        console.print(f"[dim]Capabilities: {', '.join(capabilities)}[/dim]")
    console.print_json(data=descriptor.serialize())
