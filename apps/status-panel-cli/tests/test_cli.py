"""Tests for the Typer CLI wiring."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from gsp_common import (
    AdapterStatus,
    AuditResult,
    ComplianceResult,
    FactKind,
    FactSentinel,
    HostFact,
    Severity,
    Snapshot,
    ToggleOutcome,
    ValidationState,
    ValidationStatus,
)

from gsp.audit import AuditTrailWriter
from gsp.cli import app
from gsp.errors import PrivilegeDeniedError

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "auditLogPath": str(tmp_path / "AuditTrail.csv"),
                "validationMarkerPath": str(tmp_path / "GxP_Validated.txt"),
                "externalApps": {"Notepad": ["notepad.exe"]},
            }
        )
    )
    return path


def _snapshot() -> Snapshot:
    return Snapshot(
        taken_at=datetime(2025, 6, 11, 9, 0, 0),
        facts={
            FactKind.WIFI_IP: HostFact.missing(FactKind.WIFI_IP, FactSentinel.NOT_CONNECTED),
            FactKind.LOGGED_USER: HostFact.of(FactKind.LOGGED_USER, "alice"),
        },
        compliance=ComplianceResult(aging_days=10, severity=Severity.OK),
        validation=ValidationState(status=ValidationStatus.NOT_VALIDATED),
    )


class TestCli:
    def test_config_show(self, config_file: Path):
        result = runner.invoke(app, ["--config", str(config_file), "config", "show"])
        assert result.exit_code == 0
        assert "Configuration" in result.output

    def test_bad_config_exits_2(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("[]")
        result = runner.invoke(app, ["--config", str(path), "config", "show"])
        assert result.exit_code == 2

    def test_status_show(self, config_file: Path):
        with patch("gsp.commands.status.HostStateSnapshot.refresh", return_value=_snapshot()):
            result = runner.invoke(app, ["--config", str(config_file), "status", "show"])
        assert result.exit_code == 0
        assert "Not Connected" in result.output

    def test_wifi_toggle(self, config_file: Path):
        outcome = ToggleOutcome(adapter="Wi-Fi", previous=AdapterStatus.UP, current=AdapterStatus.DOWN)
        with patch("gsp.commands.wifi.NetworkAdapterController.toggle", return_value=outcome):
            result = runner.invoke(app, ["--config", str(config_file), "wifi", "toggle"])
        assert result.exit_code == 0

    def test_wifi_toggle_access_denied(self, config_file: Path):
        with patch("gsp.commands.wifi.NetworkAdapterController.toggle", side_effect=PrivilegeDeniedError()):
            result = runner.invoke(app, ["--config", str(config_file), "wifi", "toggle"])
        assert result.exit_code == 5

    def test_app_launch_unknown(self, config_file: Path, tmp_path: Path):
        result = runner.invoke(app, ["--config", str(config_file), "app", "launch", "Calculator"])
        assert result.exit_code == 1
        assert (tmp_path / "AuditTrail.csv").exists()

    def test_log_tail_empty(self, config_file: Path):
        result = runner.invoke(app, ["--config", str(config_file), "log", "tail"])
        assert result.exit_code == 0
        assert "No audit entries" in result.output

    def test_log_tail(self, config_file: Path, tmp_path: Path):
        writer = AuditTrailWriter(tmp_path / "AuditTrail.csv")
        writer.record("Dashboard Data Refreshed", AuditResult.SUCCESS)
        writer.record("WiFi Adapter Toggle", AuditResult.FAILED, "Access Denied")
        result = runner.invoke(app, ["--config", str(config_file), "log", "tail", "-n", "5"])
        assert result.exit_code == 0
        assert "No audit entries" not in result.output
