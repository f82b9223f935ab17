"""Commands for Android library archives built with ``flutter build aar``."""

from pathlib import Path
from typing import Annotated

import typer

from droidship.artifacts import create_android_artifacts
from droidship.cli.app import get_app_context, resolve_project
from droidship.cli.decorators import handle_errors
from droidship.cli.helpers import print_path


aar_app = typer.Typer(
    name="aar",
    help="Locate and extract release library archives",
    no_args_is_help=True,
)

ProjectOption = Annotated[
    Path | None,
    typer.Option("--project", "-p", help="Flutter module root"),
]
PackageOption = Annotated[
    str, typer.Option("--package", help="Android package, e.g. com.example.module")
]
BuildNumberOption = Annotated[
    str, typer.Option("--build-number", help="Build number passed to flutter build aar")
]


@aar_app.command(name="path")
@handle_errors
def aar_path(
    ctx: typer.Context,
    package: PackageOption,
    build_number: BuildNumberOption,
    project: ProjectOption = None,
) -> None:
    """Print where the release aar is expected to be."""
    artifacts = create_android_artifacts(
        get_app_context(ctx).user_config.data, project_root=resolve_project(project)
    )
    print_path(artifacts.aar_artifact_path(package, build_number))


@aar_app.command(name="extract")
@handle_errors
def aar_extract(
    ctx: typer.Context,
    package: PackageOption,
    build_number: BuildNumberOption,
    project: ProjectOption = None,
) -> None:
    """Unzip the release aar next to it and print the extracted directory."""
    artifacts = create_android_artifacts(
        get_app_context(ctx).user_config.data, project_root=resolve_project(project)
    )
    print_path(artifacts.extract_aar(package, build_number))


def register_commands(app: typer.Typer) -> None:
    """Register aar commands with the main app."""
    app.add_typer(aar_app, name="aar")
