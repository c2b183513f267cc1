"""Central configuration for the status panel."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gsp_common.constants import (
    ADAPTER_SETTLE_SECONDS,
    AUDIT_LOG_PATH,
    ETHERNET_ADAPTER_PATTERN,
    LOGO_PATH,
    PATCH_AGING_CRITICAL_DAYS,
    PATCH_AGING_WARNING_DAYS,
    REFRESH_DELAY_SECONDS,
    VALIDATION_MARKER_PATH,
    WIFI_ADAPTER_PATTERN,
)

log = logging.getLogger(__name__)

# config.json keys -> PanelConfig fields
_FILE_KEYS = {
    "logoPath": "logo_path",
    "validationMarkerPath": "validation_marker_path",
    "auditLogPath": "audit_log_path",
    "refreshDelaySeconds": "refresh_delay_seconds",
    "patchAgingWarningDays": "patch_aging_warning_days",
    "patchAgingCriticalDays": "patch_aging_critical_days",
    "transparencyLevel": "transparency_level",
    "widgetMode": "widget_mode",
    "adapterSettleSeconds": "adapter_settle_seconds",
    "wifiAdapterPattern": "wifi_adapter_pattern",
    "ethernetAdapterPattern": "ethernet_adapter_pattern",
    "externalApps": "external_apps",
}


def _default_external_apps() -> dict[str, list[str]]:
    return {
        "Software Center": ["explorer.exe", "softwarecenter:"],
        "Company Portal": ["explorer.exe", "companyportal:"],
    }


class PanelConfig(BaseSettings):
    """Immutable runtime configuration, built once at startup.

    Values come from (highest priority first) an optional JSON config file,
    ``GSP_*`` environment variables, then the defaults below.
    ``transparency_level`` and ``widget_mode`` are display settings and are
    carried through untouched.
    """

    model_config = SettingsConfigDict(env_prefix="GSP_", frozen=True)

    logo_path: Path = Field(default=LOGO_PATH)
    validation_marker_path: Path = Field(default=VALIDATION_MARKER_PATH)
    audit_log_path: Path = Field(default=AUDIT_LOG_PATH)
    refresh_delay_seconds: int = Field(default=REFRESH_DELAY_SECONDS, gt=0)
    patch_aging_warning_days: int = Field(default=PATCH_AGING_WARNING_DAYS, gt=0)
    patch_aging_critical_days: int = Field(default=PATCH_AGING_CRITICAL_DAYS, gt=0)
    transparency_level: float = Field(default=0.9, ge=0.0, le=1.0)
    widget_mode: bool = False
    adapter_settle_seconds: float = Field(default=ADAPTER_SETTLE_SECONDS, ge=0.0)
    wifi_adapter_pattern: str = WIFI_ADAPTER_PATTERN
    ethernet_adapter_pattern: str = ETHERNET_ADAPTER_PATTERN
    external_apps: dict[str, list[str]] = Field(default_factory=_default_external_apps)

    @field_validator("wifi_adapter_pattern", "ethernet_adapter_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        re.compile(value)
        return value

    @model_validator(mode="after")
    def _check_thresholds(self) -> PanelConfig:
        if self.patch_aging_warning_days >= self.patch_aging_critical_days:
            raise ValueError(
                "patch_aging_warning_days must be lower than patch_aging_critical_days "
                f"(got {self.patch_aging_warning_days} >= {self.patch_aging_critical_days})"
            )
        return self

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> PanelConfig:
        """Build a config from config.json style camelCase keys."""
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            field = _FILE_KEYS.get(key)
            if field is None:
                log.warning("Ignoring unknown config key: %s", key)
                continue
            kwargs[field] = value
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: Path) -> PanelConfig:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object at top level")
        return cls.from_mapping(data)
