"""Wireless adapter commands."""

from __future__ import annotations

import typer
from rich.console import Console

from gsp_common import PanelConfig

from gsp.audit import AuditTrailWriter
from gsp.controller import NetworkAdapterController
from gsp.errors import GspError, PrivilegeDeniedError

app = typer.Typer(no_args_is_help=True)
console = Console()


def _controller(cfg: PanelConfig) -> NetworkAdapterController:
    return NetworkAdapterController(cfg, AuditTrailWriter(cfg.audit_log_path))


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the wireless adapter and its administrative status."""
    try:
        adapter = _controller(ctx.obj).locate()
    except GspError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(exc.exit_code)
    console.print(f"{adapter.name} ({adapter.description}): [bold]{adapter.admin_status.value}[/bold]")


@app.command()
def toggle(ctx: typer.Context) -> None:
    """Enable the wireless adapter if it is down, disable it otherwise."""
    try:
        outcome = _controller(ctx.obj).toggle()
    except PrivilegeDeniedError as exc:
        console.print(f"[red]{exc}[/red]: run the panel as administrator to change adapter state.")
        raise typer.Exit(exc.exit_code)
    except GspError as exc:
        console.print(f"[red]WiFi toggle failed: {exc}[/red]")
        raise typer.Exit(exc.exit_code)
    console.print(
        f"[green]{outcome.adapter}: {outcome.previous.value} -> {outcome.current.value}[/green]"
    )
    console.print("Run 'gsp status show' to re-read host state.")
