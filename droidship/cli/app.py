"""Main CLI application for Droidship."""

import logging
import sys
from importlib.metadata import distribution
from pathlib import Path
from typing import Annotated

import typer

from droidship.cli.decorators.error_handling import print_stack_trace_if_verbose
from droidship.config.user_config import UserConfig
from droidship.core.errors import ConfigError
from droidship.core.logging import setup_logging


__all__ = ["app", "main", "__version__", "AppContext"]


__version__ = distribution("droidship").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self._user_config: UserConfig | None = None

    @property
    def user_config(self) -> UserConfig:
        """User configuration, loaded on first access.

        Loading lazily lets commands report configuration errors through
        their error handler.
        """
        if self._user_config is None:
            from droidship.config.user_config import create_user_config

            self._user_config = create_user_config(cli_config_path=self.config_file)
        return self._user_config

    def reset_user_config(self) -> None:
        self._user_config = None


app = typer.Typer(
    name="droidship",
    help=f"""Droidship Android Release Artifact Tool v{__version__}

Locates the artifacts of a Flutter Android release build and prepares them
for upload.

Common workflows:
  • Find a bundle:    droidship find aab --flavor pro
  • Find an apk:      droidship find apk
  • Unpack an aar:    droidship aar extract --package com.example.app --build-number 1.0
  • Read a version:   droidship version build/app/outputs/bundle/release/app-release.aab""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """Droidship Android Release Artifact Tool."""
    if version:
        print(f"Droidship v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(
        verbose=verbose, log_file=log_file, config_file=config_file
    )
    ctx.obj = app_context

    log_level_name = "WARNING"
    if debug or verbose >= 2:
        log_level_name = "DEBUG"
    elif verbose == 1:
        log_level_name = "INFO"
    else:
        try:
            log_level_name = app_context.user_config.data.log_level
        except ConfigError:
            # Reported by the command's error handler once it reloads the config
            app_context.reset_user_config()

    setup_logging(log_level_name=log_level_name, log_file=log_file)


def get_app_context(ctx: typer.Context) -> AppContext:
    """Return the AppContext stored by the main callback."""
    if not isinstance(ctx.obj, AppContext):
        ctx.obj = AppContext()
    return ctx.obj


def resolve_project(project: Path | None) -> Path | None:
    return project.expanduser().resolve() if project is not None else None


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        return 1


if __name__ == "__main__":
    sys.exit(main())
