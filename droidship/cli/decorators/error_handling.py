"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console

from droidship.core.errors import (
    ArtifactNotFoundError,
    CacheError,
    ConfigError,
    DroidshipError,
    MultipleArtifactsFoundError,
    ProjectNotFoundError,
    ToolError,
)
from droidship.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)
err_console = Console(stderr=True, soft_wrap=True)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    Droidship errors are reported to the user and turned into exit code 1.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ArtifactNotFoundError as e:
            logger.error("artifact_not_found", error=str(e))
            err_console.print(f"[red]Artifact not found:[/red] {e.artifact_name}")
            err_console.print(f"Searched in {e.build_dir}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except MultipleArtifactsFoundError as e:
            logger.error("multiple_artifacts_found", error=str(e))
            err_console.print(
                f"[red]Multiple artifacts found in[/red] {e.build_dir}:"
            )
            for artifact in e.found_artifacts:
                err_console.print(f"  {artifact}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ProjectNotFoundError as e:
            logger.error("project_not_found", error=str(e))
            err_console.print(f"[red]Project error:[/red] {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            err_console.print(f"[red]Configuration error:[/red] {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except (ToolError, CacheError) as e:
            logger.error("tool_error", error=str(e))
            err_console.print(f"[red]Tool error:[/red] {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except DroidshipError as e:
            logger.error("droidship_error", error=str(e))
            err_console.print(f"[red]Error:[/red] {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ValueError as e:
            logger.error("invalid_argument", error=str(e))
            err_console.print(f"[red]Invalid argument:[/red] {_describe_value_error(e)}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except typer.Exit:
            raise
        except Exception as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            err_console.print(f"[red]Unexpected error:[/red] {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def _describe_value_error(error: ValueError) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(str(detail["msg"]) for detail in error.errors())
    return str(error)


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
