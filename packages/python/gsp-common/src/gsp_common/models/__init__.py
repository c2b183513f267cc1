"""Shared Pydantic models."""

from gsp_common.models.audit_entry import AuditEntry, AuditResult
from gsp_common.models.host import AdapterStatus, FactKind, FactSentinel, HostFact, NetAdapter
from gsp_common.models.snapshot import (
    ComplianceResult,
    Severity,
    Snapshot,
    ToggleOutcome,
    ValidationState,
    ValidationStatus,
)

__all__ = [
    "AdapterStatus",
    "AuditEntry",
    "AuditResult",
    "ComplianceResult",
    "FactKind",
    "FactSentinel",
    "HostFact",
    "NetAdapter",
    "Severity",
    "Snapshot",
    "ToggleOutcome",
    "ValidationState",
    "ValidationStatus",
]
