"""GxP validation marker reader."""

from __future__ import annotations

import codecs
import logging
import re
from datetime import date
from pathlib import Path

from gsp_common import ValidationState, ValidationStatus

log = logging.getLogger(__name__)

_DATE_LINE = re.compile(r"^(\d{4}-\d{2}-\d{2})")

# Only the first line matters; the marker is a one-liner in practice.
_HEAD_BYTES = 4096


def _decode(raw: bytes) -> str:
    """Decode by BOM: PowerShell 5.1 ``>`` / ``Out-File`` write UTF-16LE."""
    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16", errors="replace")
    return raw.decode("utf-8-sig", errors="replace")


def parse_validated_on(first_line: str) -> date | None:
    match = _DATE_LINE.match(first_line.strip())
    if not match:
        return None
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        return None


def read_validation_status(path: Path) -> ValidationState:
    """Derive the validation state from the marker file.

    Absent marker: NotValidated. Present but unreadable (I/O or permission
    error): Unknown. Present: Validated, dated when the first line starts
    with ``YYYY-MM-DD``; undecodable content is simply undated.
    """
    try:
        with path.open("rb") as f:
            raw = f.read(_HEAD_BYTES)
    except FileNotFoundError:
        return ValidationState(status=ValidationStatus.NOT_VALIDATED)
    except OSError as exc:
        log.warning("Cannot read validation marker %s: %s", path, exc)
        return ValidationState(status=ValidationStatus.UNKNOWN)

    lines = _decode(raw).splitlines()
    return ValidationState(
        status=ValidationStatus.VALIDATED,
        validated_on=parse_validated_on(lines[0]) if lines else None,
    )
