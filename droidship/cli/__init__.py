"""Command line interface for Droidship."""

from droidship.cli.app import app, main
from droidship.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
