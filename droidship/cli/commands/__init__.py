"""CLI command modules."""

import typer

from droidship.cli.commands.aar import register_commands as register_aar_commands
from droidship.cli.commands.find import register_commands as register_find_commands
from droidship.cli.commands.version import (
    register_commands as register_version_commands,
)


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_find_commands(app)
    register_aar_commands(app)
    register_version_commands(app)
