"""External application commands."""

from __future__ import annotations

import typer
from rich.console import Console

from gsp.audit import AuditTrailWriter
from gsp.errors import GspError
from gsp.services.launcher import AppLauncher

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command("list")
def list_apps(ctx: typer.Context) -> None:
    """List configured applications."""
    launcher = AppLauncher(ctx.obj, AuditTrailWriter(ctx.obj.audit_log_path))
    names = launcher.names()
    if not names:
        console.print("[yellow]No applications configured.[/yellow]")
        return
    for name in names:
        console.print(f"  {name}")


@app.command()
def launch(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Application name as configured in externalApps"),
) -> None:
    """Start a configured application."""
    launcher = AppLauncher(ctx.obj, AuditTrailWriter(ctx.obj.audit_log_path))
    try:
        launcher.launch(name)
    except GspError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(exc.exit_code)
    console.print(f"[green]Launched {name}.[/green]")
