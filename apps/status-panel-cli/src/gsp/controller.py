"""Wireless adapter enable/disable."""

from __future__ import annotations

import logging
import time
from typing import Callable

from gsp_common import ACTION_WIFI_TOGGLE, AdapterStatus, NetAdapter, PanelConfig, ToggleOutcome

from gsp.audit import AuditTrailWriter, audit
from gsp.errors import AdapterError, AdapterNotFoundError, PowerShellError
from gsp.services import netadapter

log = logging.getLogger(__name__)


class NetworkAdapterController:
    """Flips the wireless adapter between Up and Down.

    Every ``toggle()`` appends exactly one audit entry. Failures are raised to
    the caller after being audited: AdapterNotFoundError, PrivilegeDeniedError
    ("Access Denied") or AdapterError.
    """

    def __init__(
        self,
        config: PanelConfig,
        writer: AuditTrailWriter,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._pattern = config.wifi_adapter_pattern
        self._settle_seconds = config.adapter_settle_seconds
        self._writer = writer
        self._sleep = sleep

    def locate(self) -> NetAdapter:
        adapter = netadapter.find_adapter(self._pattern)
        if adapter is None:
            raise AdapterNotFoundError()
        return adapter

    def toggle(self) -> ToggleOutcome:
        with audit(self._writer, ACTION_WIFI_TOGGLE) as entry:
            adapter = self.locate()
            previous = adapter.admin_status
            target = AdapterStatus.DOWN if previous is AdapterStatus.UP else AdapterStatus.UP
            try:
                netadapter.set_enabled(adapter.name, target is AdapterStatus.UP)
            except PowerShellError as exc:
                raise AdapterError(str(exc)) from exc
            # Let the driver converge before anyone re-reads adapter state.
            self._sleep(self._settle_seconds)
            entry.details = f"Changed from {previous.value} to {target.value}"
            log.info("%s: %s", adapter.name, entry.details)
        return ToggleOutcome(adapter=adapter.name, previous=previous, current=target)
