"""External application launcher."""

from __future__ import annotations

import logging
import subprocess
from typing import Any, Callable

from gsp_common import ACTION_APP_LAUNCH, PanelConfig

from gsp.audit import AuditTrailWriter, audit
from gsp.errors import AppNotConfiguredError, LaunchError

log = logging.getLogger(__name__)


class AppLauncher:
    """Starts configured applications (fire and forget) and audits each attempt."""

    def __init__(
        self,
        config: PanelConfig,
        writer: AuditTrailWriter,
        *,
        popen: Callable[..., Any] = subprocess.Popen,
    ):
        self._apps = config.external_apps
        self._writer = writer
        self._popen = popen

    def names(self) -> list[str]:
        return sorted(self._apps)

    def launch(self, name: str) -> None:
        with audit(self._writer, ACTION_APP_LAUNCH, details=name):
            command = self._apps.get(name)
            if not command:
                raise AppNotConfiguredError(f"No application configured as '{name}'")
            try:
                self._popen(command)
            except OSError as exc:
                raise LaunchError(f"Failed to launch '{name}': {exc}") from exc
            log.info("Launched %s: %s", name, command)
