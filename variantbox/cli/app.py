"""Main CLI application for Variantbox."""

from importlib.metadata import distribution
from typing import Annotated

import typer

from variantbox.cli.commands import register_all_commands
from variantbox.cli.context import AppContext
from variantbox.core.errors import ConfigError
from variantbox.core.logging import get_struct_logger, setup_logging


__all__ = ["app", "main", "__version__"]


__version__ = distribution("variantbox").version

logger = get_struct_logger(__name__)


app = typer.Typer(
    name="variantbox",
    help=f"Variantbox Android build variant resolver v{__version__}",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option("-v", "--verbose", count=True, help="Increase verbosity (use -v, -vv)"),
    ] = 0,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to configuration file")
    ] = None,
    log_json: Annotated[
        bool, typer.Option("--log-json", help="Render console logs as JSON")
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """Variantbox Android build variant resolver."""
    if version:
        print(f"Variantbox v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_ctx = AppContext(verbose=verbose, log_file=log_file, config_file=config_file)
    ctx.obj = app_ctx

    # Route early events to stderr before user configuration is loaded
    setup_logging(json_logs=log_json, log_file=log_file)

    try:
        settings = app_ctx.user_config.data
        log_level = settings.log_level
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1) from e

    # Verbosity flags override the configured level
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"

    setup_logging(
        json_logs=log_json or settings.log_json,
        log_level_name=log_level,
        log_file=log_file,
    )
    logger.debug("cli_started", verbose=verbose, config_file=config_file)


register_all_commands(app)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
