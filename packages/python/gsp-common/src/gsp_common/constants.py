"""Shared constants for the GxP Status Panel."""

import os
from pathlib import Path

# Default paths (overridable via PanelConfig / env vars / config file)
PROGRAM_DATA = Path(os.environ.get("PROGRAMDATA", r"C:\ProgramData"))
APP_DIR = PROGRAM_DATA / "GxPStatusPanel"
DEFAULT_CONFIG_PATH = APP_DIR / "config.json"
AUDIT_LOG_PATH = APP_DIR / "Logs" / "AuditTrail.csv"
VALIDATION_MARKER_PATH = APP_DIR / "GxP_Validated.txt"
LOGO_PATH = APP_DIR / "logo.png"

# Audit trail layout (column order is fixed)
AUDIT_COLUMNS = (
    "Timestamp",
    "User",
    "Domain",
    "Machine",
    "Action",
    "Result",
    "Details",
    "ProcessID",
)
AUDIT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Patch aging policy
PATCH_AGING_WARNING_DAYS = 30
PATCH_AGING_CRITICAL_DAYS = 60

# Adapter selection
WIFI_ADAPTER_PATTERN = r"Wi-?Fi"
ETHERNET_ADAPTER_PATTERN = r"Ethernet"
EXCLUDED_IP_PREFIXES = ("169.254.", "127.")

# Timing
REFRESH_DELAY_SECONDS = 60
ADAPTER_SETTLE_SECONDS = 2.0

# Audit action labels
ACTION_REFRESH = "Dashboard Data Refreshed"
ACTION_WIFI_TOGGLE = "WiFi Adapter Toggle"
ACTION_APP_LAUNCH = "External App Launched"
