"""GSP Common: shared models and constants for the GxP Status Panel."""

from gsp_common.constants import (
    ACTION_APP_LAUNCH,
    ACTION_REFRESH,
    ACTION_WIFI_TOGGLE,
    AUDIT_COLUMNS,
    AUDIT_LOG_PATH,
    DEFAULT_CONFIG_PATH,
    VALIDATION_MARKER_PATH,
)
from gsp_common.config import PanelConfig
from gsp_common.models import (
    AdapterStatus,
    AuditEntry,
    AuditResult,
    ComplianceResult,
    FactKind,
    FactSentinel,
    HostFact,
    NetAdapter,
    Severity,
    Snapshot,
    ToggleOutcome,
    ValidationState,
    ValidationStatus,
)

__all__ = [
    "ACTION_APP_LAUNCH",
    "ACTION_REFRESH",
    "ACTION_WIFI_TOGGLE",
    "AUDIT_COLUMNS",
    "AUDIT_LOG_PATH",
    "AdapterStatus",
    "AuditEntry",
    "AuditResult",
    "ComplianceResult",
    "DEFAULT_CONFIG_PATH",
    "FactKind",
    "FactSentinel",
    "HostFact",
    "NetAdapter",
    "PanelConfig",
    "Severity",
    "Snapshot",
    "ToggleOutcome",
    "VALIDATION_MARKER_PATH",
    "ValidationState",
    "ValidationStatus",
]
