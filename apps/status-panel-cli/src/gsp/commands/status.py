"""Host state snapshot commands."""

from __future__ import annotations

import time
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gsp_common import FactKind, PanelConfig, Severity, Snapshot, ValidationStatus

from gsp.audit import AuditTrailWriter
from gsp.errors import RefreshError
from gsp.snapshot import HostStateSnapshot

app = typer.Typer(no_args_is_help=True)
console = Console()

_SEVERITY_STYLE = {
    Severity.OK: "green",
    Severity.WARNING: "yellow",
    Severity.CRITICAL: "red",
    Severity.UNKNOWN: "dim",
}

_FACT_LABELS = {
    FactKind.WIFI_IP: "WiFi IP",
    FactKind.ETHERNET_IP: "Ethernet IP",
    FactKind.LOGGED_USER: "Logged User",
    FactKind.LAST_REBOOT: "Last Reboot",
    FactKind.LAST_UPDATE: "Last Update",
}


def _render(snapshot: Snapshot) -> Table:
    table = Table(title=f"Host Status ({snapshot.taken_at:%Y-%m-%d %H:%M:%S})")
    table.add_column("Item", style="bold")
    table.add_column("Value")

    for kind, label in _FACT_LABELS.items():
        fact = snapshot.get(kind)
        if fact is None:
            continue
        if fact.ok:
            value = fact.display
        elif fact.sentinel is None:
            value = f"{fact.display} [dim](estimated)[/dim]"
        else:
            value = f"[dim]{fact.display}[/dim]"
        table.add_row(label, value)

    compliance = snapshot.compliance
    style = _SEVERITY_STYLE[compliance.severity]
    aging = "Unknown" if compliance.aging_days is None else f"{compliance.aging_days} days"
    table.add_row("Patch Aging", f"[{style}]{aging} ({compliance.severity.value})[/{style}]")

    validation = snapshot.validation
    if validation.status is ValidationStatus.VALIDATED:
        since = f" on {validation.validated_on.isoformat()}" if validation.validated_on else ""
        gxp = f"[green]Validated{since}[/green]"
    elif validation.status is ValidationStatus.NOT_VALIDATED:
        gxp = "[yellow]Not Validated[/yellow]"
    else:
        gxp = "[dim]Unknown[/dim]"
    table.add_row("GxP Validation", gxp)
    return table


def _refresh(cfg: PanelConfig) -> Snapshot:
    panel = HostStateSnapshot(cfg, AuditTrailWriter(cfg.audit_log_path))
    try:
        return panel.refresh()
    except RefreshError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(exc.exit_code)


@app.command()
def show(ctx: typer.Context) -> None:
    """Collect and display one snapshot."""
    console.print(_render(_refresh(ctx.obj)))


@app.command()
def watch(
    ctx: typer.Context,
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Stop after N refreshes"),
) -> None:
    """Refresh every refreshDelaySeconds until interrupted."""
    cfg: PanelConfig = ctx.obj
    done = 0
    try:
        while count is None or done < count:
            console.print(_render(_refresh(cfg)))
            done += 1
            if count is None or done < count:
                time.sleep(cfg.refresh_delay_seconds)
    except KeyboardInterrupt:
        console.print("[yellow]Stopped.[/yellow]")
