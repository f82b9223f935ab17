"""Commands that locate release artifacts in the build output tree."""

from pathlib import Path
from typing import Annotated

import typer

from droidship.artifacts import create_android_artifacts
from droidship.cli.app import get_app_context, resolve_project
from droidship.cli.decorators import handle_errors
from droidship.cli.helpers import print_path
from droidship.environment import create_project_environment


find_app = typer.Typer(
    name="find",
    help="Locate release artifacts produced by flutter build",
    no_args_is_help=True,
)

ProjectOption = Annotated[
    Path | None,
    typer.Option(
        "--project",
        "-p",
        help="Flutter project root (default: nearest directory with pubspec.yaml)",
    ),
]
FlavorOption = Annotated[
    str | None, typer.Option("--flavor", "-f", help="Build flavor")
]


def _find(ctx: typer.Context, kind: str, project: Path | None, flavor: str | None) -> None:
    app_context = get_app_context(ctx)
    environment = create_project_environment(resolve_project(project))
    artifacts = create_android_artifacts(
        app_context.user_config.data, environment=environment
    )
    root = environment.get_project_root()
    if kind == "aab":
        artifact = artifacts.find_aab(root, flavor)
    else:
        artifact = artifacts.find_apk(root, flavor)
    print_path(artifact)


@find_app.command(name="aab")
@handle_errors
def find_aab(
    ctx: typer.Context,
    project: ProjectOption = None,
    flavor: FlavorOption = None,
) -> None:
    """Print the path of the release app bundle (.aab)."""
    _find(ctx, "aab", project, flavor)


@find_app.command(name="apk")
@handle_errors
def find_apk(
    ctx: typer.Context,
    project: ProjectOption = None,
    flavor: FlavorOption = None,
) -> None:
    """Print the path of the release apk."""
    _find(ctx, "apk", project, flavor)


def register_commands(app: typer.Typer) -> None:
    """Register find commands with the main app."""
    app.add_typer(find_app, name="find")
