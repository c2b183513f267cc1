"""Audit entry model for the GxP audit trail."""

from __future__ import annotations

import os
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from gsp_common.constants import AUDIT_TIMESTAMP_FORMAT
from gsp_common.identity import current_domain, current_machine, current_user


class AuditResult(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"
    WARNING = "Warning"
    INFO = "Info"


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


class AuditEntry(BaseModel):
    """A single audited action.

    The entry stays mutable while an ``audit()`` block is running; once it has
    been appended to the trail the written row is never edited.
    """

    timestamp: datetime = Field(default_factory=_now)
    user: str = Field(default_factory=current_user)
    domain: str = Field(default_factory=current_domain)
    machine: str = Field(default_factory=current_machine)
    process_id: int = Field(default_factory=os.getpid)
    action: str = ""
    result: AuditResult = AuditResult.SUCCESS
    details: str = ""

    def to_row(self) -> list[str]:
        """Return the CSV row in ``AUDIT_COLUMNS`` order."""
        return [
            self.timestamp.strftime(AUDIT_TIMESTAMP_FORMAT),
            self.user,
            self.domain,
            self.machine,
            self.action,
            self.result.value,
            self.details,
            str(self.process_id),
        ]
