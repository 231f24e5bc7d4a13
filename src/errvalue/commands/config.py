"""
Configuration commands for errvalue (`errv config`).

- Viewing the effective settings
- Choosing how `errv new` renders an ErrorValue
"""

import json

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..core.config import ErrvalueSettings, get_settings, save_settings
from ..core.errors import ErrvalueError

console = Console()
app = typer.Typer(
    no_args_is_help=True,
    help="View and change errvalue settings.",
)


def _with_output_format(output_format: str) -> ErrvalueSettings:
    settings = get_settings().model_copy()
    try:
        settings.output_format = output_format
    except ValidationError as e:
        raise ErrvalueError(
            f"Unsupported output format: {output_format!r} (use text or json)"
        ) from e
    return settings


@app.command("show")
def config_show(
    json_out: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
):
    """Show the effective settings after all configuration layers are applied."""
    settings = get_settings()
    data = settings.model_dump()
    if json_out:
        console.print_json(json.dumps(data))
        return

    table = Table(title="errvalue settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


@app.command("format")
def config_format(
    output_format: str = typer.Argument(..., help="Rendering for `errv new`: text or json"),
):
    """Persist the default output format."""
    try:
        settings = _with_output_format(output_format)
    except ErrvalueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    path = save_settings(settings)
    console.print(f"[green]Output format set to[/green] {settings.output_format} ({path})")
