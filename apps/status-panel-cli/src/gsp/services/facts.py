"""Host fact probes.

Each provider is a zero-argument callable returning a HostFact and never
raises: a failing query yields an ``Error`` fact and a logged warning, so one
broken probe never blocks the rest of a snapshot.
"""

from __future__ import annotations

import logging
import re
import socket
from datetime import datetime
from functools import partial
from typing import Callable

import psutil

from gsp_common import FactKind, FactSentinel, HostFact, PanelConfig
from gsp_common.constants import EXCLUDED_IP_PREFIXES
from gsp_common.identity import session_identity

from gsp.services import powershell

log = logging.getLogger(__name__)

FactProvider = Callable[[], HostFact]

_HOTFIX_SCRIPT = (
    "Get-HotFix | Where-Object { $_.InstalledOn } | "
    "ForEach-Object { $_.InstalledOn.ToString('yyyy-MM-dd') }"
)


def _probe(kind: FactKind, query: FactProvider) -> HostFact:
    try:
        return query()
    except Exception as exc:
        log.warning("%s probe failed: %s", kind.value, exc)
        return HostFact.missing(kind, FactSentinel.ERROR, error=str(exc))


def ipv4_addresses() -> list[tuple[str, str]]:
    """Return ``(interface, address)`` pairs in enumeration order."""
    pairs: list[tuple[str, str]] = []
    for iface, addrs in psutil.net_if_addrs().items():
        for addr in addrs:
            if addr.family == socket.AF_INET:
                pairs.append((iface, addr.address))
    return pairs


def _usable(address: str) -> bool:
    return not address.startswith(EXCLUDED_IP_PREFIXES)


def _adapter_ip(kind: FactKind, pattern: str) -> HostFact:
    regex = re.compile(pattern, re.IGNORECASE)
    for iface, address in ipv4_addresses():
        if regex.search(iface) and _usable(address):
            return HostFact.of(kind, address)
    return HostFact.missing(kind, FactSentinel.NOT_CONNECTED)


def wifi_ip(pattern: str) -> HostFact:
    return _probe(FactKind.WIFI_IP, partial(_adapter_ip, FactKind.WIFI_IP, pattern))


def ethernet_ip(pattern: str) -> HostFact:
    return _probe(FactKind.ETHERNET_IP, partial(_adapter_ip, FactKind.ETHERNET_IP, pattern))


def logged_user() -> HostFact:
    return HostFact.of(FactKind.LOGGED_USER, session_identity())


def last_reboot() -> HostFact:
    """Boot time, or "now" (zero uptime) when it cannot be determined."""
    try:
        booted = datetime.fromtimestamp(psutil.boot_time())
    except Exception as exc:
        log.warning("LastReboot probe failed, assuming now: %s", exc)
        return HostFact(
            kind=FactKind.LAST_REBOOT,
            value=datetime.now().replace(microsecond=0),
            error=str(exc),
        )
    return HostFact.of(FactKind.LAST_REBOOT, booted.replace(microsecond=0))


def parse_install_dates(lines: list[str]) -> list[datetime]:
    dates = []
    for line in lines:
        try:
            dates.append(datetime.strptime(line.strip(), "%Y-%m-%d"))
        except ValueError:
            log.debug("Skipping hotfix with unparseable install date: %r", line)
    return dates


def _query_last_update() -> HostFact:
    dates = parse_install_dates(powershell.run_lines(_HOTFIX_SCRIPT))
    if not dates:
        return HostFact.missing(FactKind.LAST_UPDATE, FactSentinel.UNKNOWN)
    return HostFact.of(FactKind.LAST_UPDATE, max(dates))


def last_update() -> HostFact:
    return _probe(FactKind.LAST_UPDATE, _query_last_update)


def default_providers(config: PanelConfig) -> dict[FactKind, FactProvider]:
    return {
        FactKind.WIFI_IP: partial(wifi_ip, config.wifi_adapter_pattern),
        FactKind.ETHERNET_IP: partial(ethernet_ip, config.ethernet_adapter_pattern),
        FactKind.LOGGED_USER: logged_user,
        FactKind.LAST_REBOOT: last_reboot,
        FactKind.LAST_UPDATE: last_update,
    }
