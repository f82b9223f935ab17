"""Output helpers shared by CLI commands."""

from pathlib import Path

from rich.console import Console


console = Console(soft_wrap=True)


def print_path(path: Path) -> None:
    """Print a path on its own line without markup or wrapping."""
    console.print(str(path), markup=False, highlight=False)
