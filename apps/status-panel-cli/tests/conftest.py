"""Shared test fixtures."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from gsp_common import PanelConfig

from gsp.audit import AuditTrailWriter


@pytest.fixture
def tmp_config(tmp_path: Path) -> PanelConfig:
    """Return a PanelConfig pointing at temp directories."""
    return PanelConfig(
        logo_path=tmp_path / "logo.png",
        validation_marker_path=tmp_path / "GxP_Validated.txt",
        audit_log_path=tmp_path / "log" / "AuditTrail.csv",
        patch_aging_warning_days=30,
        patch_aging_critical_days=60,
        external_apps={"Notepad": ["notepad.exe"]},
    )


@pytest.fixture
def writer(tmp_config: PanelConfig) -> AuditTrailWriter:
    return AuditTrailWriter(tmp_config.audit_log_path)


def read_rows(path: Path) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))
