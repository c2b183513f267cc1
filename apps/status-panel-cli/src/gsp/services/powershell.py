"""PowerShell subprocess wrappers."""

from __future__ import annotations

import json
import subprocess
from typing import Any

from gsp.errors import PowerShellError, PrivilegeDeniedError

POWERSHELL = "powershell.exe"

_PREAMBLE = (
    "$ErrorActionPreference = 'Stop'; "
    "[Console]::OutputEncoding = [Text.Encoding]::UTF8;"
)

_ACCESS_DENIED_MARKERS = (
    "access is denied",
    "access denied",
    "permissiondenied",
    "unauthorizedaccess",
    "0x80070005",
    "requires elevation",
)


def is_access_denied(stderr: str) -> bool:
    text = stderr.lower()
    return any(marker in text for marker in _ACCESS_DENIED_MARKERS)


def _run(script: str, *, check: bool = True) -> subprocess.CompletedProcess[str]:
    # Stop turns non-terminating cmdlet errors into a non-zero exit code.
    # UTF-8 output keeps non-ASCII adapter names intact across the pipe.
    cmd = [
        POWERSHELL, "-NoProfile", "-NonInteractive",
        "-ExecutionPolicy", "Bypass",
        "-Command", f"{_PREAMBLE} {script}",
    ]
    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, encoding="utf-8", errors="replace", check=False,
        )
    except OSError as exc:
        raise PowerShellError(f"Cannot start PowerShell: {exc}") from exc

    if check and result.returncode != 0:
        stderr = result.stderr.strip()
        if is_access_denied(stderr):
            raise PrivilegeDeniedError()
        raise PowerShellError(f"Command failed: {script}\nstderr: {stderr}")
    return result


def run_lines(script: str) -> list[str]:
    """Run a script and return its non-empty stdout lines."""
    result = _run(script)
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def run_json(script: str) -> list[dict[str, Any]]:
    """Run a script ending in ``ConvertTo-Json`` and return a list of objects.

    ``ConvertTo-Json`` emits a bare object for a single result and nothing at
    all for an empty pipeline; both are normalized to a list.
    """
    result = _run(script)
    raw = result.stdout.strip()
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PowerShellError(f"Unparseable output from: {script}\n{raw[:200]}") from exc
    if isinstance(data, dict):
        return [data]
    return [item for item in data if isinstance(item, dict)]


def quote(value: str) -> str:
    """Quote a value as a single-quoted PowerShell string literal."""
    return "'" + value.replace("'", "''") + "'"
