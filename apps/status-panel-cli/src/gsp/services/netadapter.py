"""Network adapter queries and state changes via the NetAdapter cmdlets."""

from __future__ import annotations

import re

from gsp_common import AdapterStatus, NetAdapter

from gsp.services import powershell

_LIST_SCRIPT = (
    "Get-NetAdapter | Select-Object Name, InterfaceDescription, "
    "@{n='AdminStatus';e={$_.AdminStatus.ToString()}} | ConvertTo-Json -Compress"
)


def list_adapters() -> list[NetAdapter]:
    adapters = []
    for row in powershell.run_json(_LIST_SCRIPT):
        name = row.get("Name")
        if not name:
            continue
        adapters.append(
            NetAdapter(
                name=name,
                description=row.get("InterfaceDescription") or "",
                admin_status=AdapterStatus.parse(row.get("AdminStatus")),
            )
        )
    return adapters


def find_adapter(pattern: str) -> NetAdapter | None:
    """Return the first adapter whose name matches ``pattern``."""
    regex = re.compile(pattern, re.IGNORECASE)
    for adapter in list_adapters():
        if regex.search(adapter.name):
            return adapter
    return None


def set_enabled(name: str, enabled: bool) -> None:
    """Enable or disable an adapter. Needs an elevated process."""
    verb = "Enable" if enabled else "Disable"
    powershell.run_lines(f"{verb}-NetAdapter -Name {powershell.quote(name)} -Confirm:$false")
