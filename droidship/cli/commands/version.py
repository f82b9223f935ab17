"""Command reading the release version out of an app bundle."""

from pathlib import Path
from typing import Annotated

import typer

from droidship.artifacts import create_android_artifacts
from droidship.cli.app import get_app_context
from droidship.cli.decorators import handle_errors
from droidship.cli.helpers import console
from droidship.environment import create_project_environment


@handle_errors
def show_version(
    ctx: typer.Context,
    bundle: Annotated[
        Path,
        typer.Argument(help="Path to the .aab file", exists=True, dir_okay=False),
    ],
) -> None:
    """Print <versionName>+<versionCode> of an app bundle."""
    bundle_path = bundle.expanduser().resolve()
    artifacts = create_android_artifacts(
        get_app_context(ctx).user_config.data,
        environment=create_project_environment(bundle_path.parent),
    )
    console.print(
        artifacts.extract_release_version_from_app_bundle(bundle_path),
        highlight=False,
    )


def register_commands(app: typer.Typer) -> None:
    """Register the version command with the main app."""
    app.command(name="version")(show_version)
