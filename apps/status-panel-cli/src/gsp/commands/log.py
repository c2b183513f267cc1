"""Audit trail commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from gsp_common import AUDIT_COLUMNS

from gsp.audit import read_entries

app = typer.Typer(no_args_is_help=True)
console = Console()

_RESULT_STYLE = {"Success": "green", "Failed": "red", "Warning": "yellow", "Info": "cyan"}


@app.command()
def tail(
    ctx: typer.Context,
    lines: int = typer.Option(20, "--lines", "-n", min=1, help="Number of entries to show"),
) -> None:
    """Show the most recent audit entries."""
    path = ctx.obj.audit_log_path
    try:
        rows = read_entries(path, limit=lines)
    except OSError as exc:
        console.print(f"[red]Cannot read audit trail {path}: {exc}[/red]")
        raise typer.Exit(1)

    if not rows:
        console.print(f"[yellow]No audit entries in {path}.[/yellow]")
        return

    table = Table(title=f"Audit Trail ({path})")
    for column in AUDIT_COLUMNS:
        table.add_column(column)
    for row in rows:
        result = row.get("Result", "")
        style = _RESULT_STYLE.get(result, "")
        cells = [row.get(column) or "" for column in AUDIT_COLUMNS]
        if style:
            cells[AUDIT_COLUMNS.index("Result")] = f"[{style}]{result}[/{style}]"
        table.add_row(*cells)
    console.print(table)
