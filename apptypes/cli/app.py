"""Main Typer application — imports and registers all CLI commands.

Entry point: ``apptypes`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from apptypes.cli.commands.list_cmd import list_cmd
from apptypes.cli.commands.show_cmd import show_cmd
from apptypes.cli.commands.validate_cmd import validate_cmd

app = typer.Typer(
    name="apptypes",
    help="Inspect and validate application type plugins.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="list", help="List registered application types.")(list_cmd)
app.command(name="show", help="Show the serialized record of a type.")(show_cmd)
app.command(name="validate", help="Validate a plugin class without registering it.")(validate_cmd)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level (defaults to APPTYPES_LOG_LEVEL, or DEBUG with APPTYPES_DEBUG)."
    ),
) -> None:
    """Configure logging before any command runs."""
    from apptypes.config import config

    logging.basicConfig(
        level=config.effective_log_level(log_level),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
