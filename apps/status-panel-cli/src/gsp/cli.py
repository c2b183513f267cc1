"""Root Typer application for the GxP Status Panel CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from gsp.commands import apps, log, settings, status, wifi
from gsp.config import load_config
from gsp.errors import ConfigError

app = typer.Typer(
    name="gsp",
    help="GxP Status Panel: host network, patch and validation status for this endpoint.",
    no_args_is_help=True,
)
console = Console(stderr=True)

app.add_typer(status.app, name="status", help="Host state snapshot (network, patch aging, validation).")
app.add_typer(wifi.app, name="wifi", help="Wireless adapter state and toggle.")
app.add_typer(apps.app, name="app", help="Launch configured external applications.")
app.add_typer(log.app, name="log", help="Read the audit trail.")
app.add_typer(settings.app, name="config", help="Inspect the effective configuration.")


def _setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", envvar="GSP_CONFIG", help="Path to config.json",
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="-v for info, -vv for debug"),
) -> None:
    _setup_logging(verbose)
    try:
        ctx.obj = load_config(config)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(exc.exit_code)


if __name__ == "__main__":
    app()
