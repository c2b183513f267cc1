"""Configuration inspection."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration."""
    table = Table(title="Configuration")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in ctx.obj.model_dump(mode="json").items():
        table.add_row(key, str(value))
    console.print(table)
