"""Tests for host fact probes."""

from __future__ import annotations

import socket
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import patch

from gsp_common import FactKind, FactSentinel, PanelConfig

from gsp.errors import PowerShellError
from gsp.services import facts


def _addr(address: str, family: int = socket.AF_INET) -> SimpleNamespace:
    return SimpleNamespace(family=family, address=address)


INTERFACES = {
    "Loopback Pseudo-Interface 1": [_addr("127.0.0.1")],
    "Ethernet": [_addr("fe80::1", socket.AF_INET6), _addr("10.20.0.15")],
    "Wi-Fi": [_addr("169.254.12.3"), _addr("192.168.1.20")],
    "WiFi 2": [_addr("192.168.50.9")],
}


class TestAdapterIp:
    def test_wifi_first_usable_match(self):
        with patch("gsp.services.facts.psutil.net_if_addrs", return_value=INTERFACES):
            fact = facts.wifi_ip(r"Wi-?Fi")
        assert fact.kind is FactKind.WIFI_IP
        assert fact.value == "192.168.1.20"
        assert fact.ok

    def test_ethernet_skips_ipv6(self):
        with patch("gsp.services.facts.psutil.net_if_addrs", return_value=INTERFACES):
            fact = facts.ethernet_ip("Ethernet")
        assert fact.value == "10.20.0.15"

    def test_link_local_and_loopback_excluded(self):
        interfaces = {"Wi-Fi": [_addr("169.254.1.1")], "Ethernet": [_addr("127.0.0.2")]}
        with patch("gsp.services.facts.psutil.net_if_addrs", return_value=interfaces):
            assert facts.wifi_ip(r"Wi-?Fi").sentinel is FactSentinel.NOT_CONNECTED
            assert facts.ethernet_ip("Ethernet").sentinel is FactSentinel.NOT_CONNECTED

    def test_match_is_case_insensitive(self):
        with patch("gsp.services.facts.psutil.net_if_addrs", return_value={"wifi": [_addr("10.1.1.1")]}):
            assert facts.wifi_ip(r"Wi-?Fi").value == "10.1.1.1"

    def test_not_connected_is_not_an_error(self):
        with patch("gsp.services.facts.psutil.net_if_addrs", return_value={"Ethernet": [_addr("10.0.0.2")]}):
            fact = facts.wifi_ip(r"Wi-?Fi")
        assert fact.sentinel is FactSentinel.NOT_CONNECTED
        assert fact.error is None

    def test_query_failure(self, caplog):
        with patch("gsp.services.facts.psutil.net_if_addrs", side_effect=OSError("no access")):
            fact = facts.wifi_ip(r"Wi-?Fi")
        assert fact.sentinel is FactSentinel.ERROR
        assert fact.error == "no access"
        assert "WifiIP probe failed" in caplog.text


class TestLoggedUser:
    def test_domain_and_user(self, monkeypatch):
        monkeypatch.setenv("USERDOMAIN", "CORP")
        monkeypatch.setenv("USERNAME", "alice")
        fact = facts.logged_user()
        assert fact.value == "CORP\\alice"
        assert fact.ok

    def test_no_domain(self, monkeypatch):
        monkeypatch.delenv("USERDOMAIN", raising=False)
        monkeypatch.setenv("USERNAME", "bob")
        assert facts.logged_user().value == "bob"


class TestLastReboot:
    def test_boot_time(self):
        booted = datetime(2025, 6, 1, 7, 15, 30)
        with patch("gsp.services.facts.psutil.boot_time", return_value=booted.timestamp()):
            fact = facts.last_reboot()
        assert fact.value == booted
        assert fact.ok

    def test_falls_back_to_now(self):
        before = datetime.now().replace(microsecond=0)
        with patch("gsp.services.facts.psutil.boot_time", side_effect=RuntimeError("wmi down")):
            fact = facts.last_reboot()
        assert fact.sentinel is None
        assert fact.error == "wmi down"
        assert before <= fact.value <= datetime.now()


class TestLastUpdate:
    def test_most_recent_install_date(self):
        lines = ["2025-01-10", "2025-03-02", "not-a-date", "2024-12-24"]
        with patch("gsp.services.facts.powershell.run_lines", return_value=lines):
            fact = facts.last_update()
        assert fact.value == datetime(2025, 3, 2)

    def test_no_records(self):
        with patch("gsp.services.facts.powershell.run_lines", return_value=[]):
            fact = facts.last_update()
        assert fact.sentinel is FactSentinel.UNKNOWN
        assert fact.error is None

    def test_query_failure(self):
        with patch("gsp.services.facts.powershell.run_lines", side_effect=PowerShellError("boom")):
            fact = facts.last_update()
        assert fact.sentinel is FactSentinel.ERROR
        assert fact.error == "boom"


class TestDefaultProviders:
    def test_all_kinds(self, tmp_config: PanelConfig):
        providers = facts.default_providers(tmp_config)
        assert set(providers) == set(FactKind)
