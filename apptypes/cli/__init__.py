"""apptypes CLI — Typer-based command-line interface.

Provides the ``apptypes`` command for listing registered application types,
inspecting their serialized form, and validating plugin classes.

All output uses Rich for formatted terminal display.
"""
