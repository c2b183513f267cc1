"""Refresh orchestration: facts + compliance + validation in one snapshot."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Mapping

from gsp_common import ACTION_REFRESH, FactKind, HostFact, PanelConfig, Snapshot

from gsp.audit import AuditTrailWriter, audit
from gsp.errors import RefreshError
from gsp.services import facts
from gsp.services.compliance import classify
from gsp.services.validation import read_validation_status

log = logging.getLogger(__name__)


def _last_update_value(fact: HostFact) -> datetime | None:
    if fact.sentinel is None and isinstance(fact.value, datetime):
        return fact.value
    return None


def _summary(snapshot: Snapshot) -> str:
    compliance = snapshot.compliance
    aging = "unknown" if compliance.aging_days is None else f"{compliance.aging_days} days"
    parts = [
        f"Patch aging {compliance.severity.value} ({aging})",
        f"Validation {snapshot.validation.status.value}",
    ]
    failed = [fact.kind.value for fact in snapshot.facts if fact.error]
    if failed:
        parts.append("Probe errors: " + ", ".join(failed))
    return "; ".join(parts)


class HostStateSnapshot:
    """Builds a fresh Snapshot on every ``refresh()``.

    Holds nothing between calls besides the config and the audit writer.
    """

    def __init__(
        self,
        config: PanelConfig,
        writer: AuditTrailWriter,
        *,
        providers: Mapping[FactKind, facts.FactProvider] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._config = config
        self._writer = writer
        self._providers = dict(providers) if providers is not None else facts.default_providers(config)
        self._clock = clock

    def _assemble(self) -> Snapshot:
        collected = {kind: provider() for kind, provider in self._providers.items()}
        now = self._clock()
        last_update = collected.get(FactKind.LAST_UPDATE)
        compliance = classify(
            _last_update_value(last_update) if last_update else None,
            now,
            self._config.patch_aging_warning_days,
            self._config.patch_aging_critical_days,
        )
        validation = read_validation_status(self._config.validation_marker_path)
        return Snapshot(
            taken_at=now,
            facts=tuple(collected.values()),
            compliance=compliance,
            validation=validation,
        )

    def refresh(self) -> Snapshot:
        """Collect a snapshot and audit the refresh.

        Raises RefreshError (after a Failed audit entry) if assembly fails.
        """
        try:
            with audit(self._writer, ACTION_REFRESH) as entry:
                snapshot = self._assemble()
                entry.details = _summary(snapshot)
        except Exception as exc:
            log.error("Dashboard refresh failed: %s", exc)
            raise RefreshError(f"Dashboard refresh failed: {exc}") from exc
        log.debug(
            "Refreshed: compliance=%s validation=%s",
            snapshot.compliance.severity.value,
            snapshot.validation.status.value,
        )
        return snapshot
