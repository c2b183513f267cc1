"""Append-only CSV audit trail.

Writing to the trail must never take the panel down: every failure is logged
as a warning and dropped.
"""

from __future__ import annotations

import csv
import logging
from collections import deque
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from gsp_common import AUDIT_COLUMNS, AuditEntry, AuditResult

log = logging.getLogger(__name__)


def _ensure_dirs(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _write_row(path: Path, entry: AuditEntry) -> None:
    with open(path, "a", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        # Header only when the file is brand new (or was left empty).
        if f.tell() == 0:
            writer.writerow(AUDIT_COLUMNS)
        writer.writerow(entry.to_row())


class AuditTrailWriter:
    """Appends one row per action to the audit CSV.

    The file is opened and closed on every append; no handle is kept and no
    locking is done.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def append(self, entry: AuditEntry) -> None:
        try:
            _ensure_dirs(self.path)
            _write_row(self.path, entry)
        except Exception as exc:
            log.warning("Audit trail write failed (%s): %s", self.path, exc)

    def record(self, action: str, result: AuditResult, details: str = "") -> AuditEntry:
        entry = AuditEntry(action=action, result=result, details=details)
        self.append(entry)
        return entry


@contextmanager
def audit(writer: AuditTrailWriter, action: str, details: str = "") -> Generator[AuditEntry, None, None]:
    """Context manager that appends a Success or Failed entry for the block.

    The block may set ``entry.details``; on error the details are replaced by
    the exception message and the exception is re-raised. An interrupted block
    (KeyboardInterrupt, SystemExit) is recorded as Failed "Interrupted".
    """
    entry = AuditEntry(action=action, details=details)
    try:
        yield entry
        entry.result = AuditResult.SUCCESS
    except Exception as exc:
        entry.result = AuditResult.FAILED
        entry.details = str(exc)
        raise
    except BaseException:
        entry.result = AuditResult.FAILED
        entry.details = "Interrupted"
        raise
    finally:
        writer.append(entry)


def read_entries(path: Path, limit: int | None = None) -> list[dict[str, str]]:
    """Return the last ``limit`` rows (all rows if None), oldest first."""
    if not path.exists():
        return []
    with open(path, newline="", encoding="utf-8") as f:
        rows = csv.DictReader(f)
        if limit is None:
            return list(rows)
        return list(deque(rows, maxlen=limit))
