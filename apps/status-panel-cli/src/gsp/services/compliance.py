"""Patch aging classification."""

from __future__ import annotations

from datetime import datetime

from gsp_common import ComplianceResult, Severity


def classify(
    last_update: datetime | None,
    now: datetime,
    warning_days: int,
    critical_days: int,
) -> ComplianceResult:
    """Classify patch freshness against the aging thresholds.

    ``last_update=None`` means no update record is known and yields an
    Unknown result with no aging. Boundaries round to the more severe class.
    """
    if not 0 < warning_days < critical_days:
        raise ValueError(
            f"thresholds must satisfy 0 < warning < critical, got {warning_days}/{critical_days}"
        )
    if last_update is None:
        return ComplianceResult(aging_days=None, severity=Severity.UNKNOWN)

    # timedelta.days floors; an install date in the future counts as zero.
    aging = max((now - last_update).days, 0)
    if aging >= critical_days:
        severity = Severity.CRITICAL
    elif aging >= warning_days:
        severity = Severity.WARNING
    else:
        severity = Severity.OK
    return ComplianceResult(aging_days=aging, severity=severity)
