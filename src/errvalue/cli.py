"""
errvalue CLI - Main entry point using Typer.

Configures the main Typer application, registers command groups, and defines
global options like --version and --verbose.
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.traceback import install

from .commands import config
from .core.config import get_settings
from .core.errors import ErrvalueError
from .core.logging_util import log_error_value, setup_logging
from .core.value import new

# Rich tracebacks for anything that escapes a command
install(show_locals=False)

console = Console()
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="errv",
    help="Build and inspect plain error values.",
    epilog="Use `errv [COMMAND] --help` for more info on a specific command.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,  # Rich handles tracebacks
)

app.add_typer(config.app, name="config", help="View and change errvalue settings.")


def _version_callback(value: bool):
    if value:
        from . import __version__

        console.print(f"errvalue v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the application version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(None, "--verbose", help="Enable DEBUG-level logging."),
    quiet: bool = typer.Option(None, "--quiet", help="Reduce logging to warnings and errors."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines to stderr."),
):
    """
    errvalue CLI - construct an error value and read its message back.
    """
    try:
        settings = get_settings()
    except ErrvalueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    setup_logging(
        json_logs=json_logs or settings.json_logs, verbose=bool(verbose), quiet=bool(quiet)
    )
    logger.debug("Settings loaded: %s", settings.model_dump())


@app.command("new")
def new_error(
    message: str = typer.Argument(..., help="Error message text, stored unchanged."),
    json_out: Optional[bool] = typer.Option(
        None,
        "--json/--text",
        help="Render as JSON or plain text (default from the output_format setting).",
    ),
):
    """Construct an error value from MESSAGE and print its message."""
    err = new(message)
    log_error_value(logger, err, level=logging.DEBUG)

    if json_out is None:
        json_out = get_settings().output_format == "json"
    if json_out:
        console.print_json(data={"message": err.message})
    else:
        # color=True stops Click from stripping ANSI escapes off a non-tty
        typer.echo(err.message, color=True)


def cli():
    """Main entry point for the console script defined in pyproject.toml."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user.[/yellow]")
        raise typer.Exit()
    except Exception as e:
        console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    cli()
