"""Error handling decorators for CLI commands."""

import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from variantbox.core.errors import ConfigError, ResolutionError, VariantboxError
from variantbox.core.logging import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    Known errors are reported on stderr with their context and turned into
    exit code 1.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ResolutionError as e:
            logger.error("resolution_error", error=str(e), **e.context())
            details = ", ".join(f"{k}={v}" for k, v in e.context().items())
            typer.echo(f"Resolution error: {e}", err=True)
            if details:
                typer.echo(f"  ({details})", err=True)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            typer.echo(f"Configuration error: {e}", err=True)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except VariantboxError as e:
            logger.error("variantbox_error", error=str(e))
            typer.echo(f"Error: {e}", err=True)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
