"""Host fact and network adapter models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class FactKind(str, Enum):
    WIFI_IP = "WifiIP"
    ETHERNET_IP = "EthernetIP"
    LOGGED_USER = "LoggedUser"
    LAST_REBOOT = "LastReboot"
    LAST_UPDATE = "LastUpdate"


class FactSentinel(str, Enum):
    NOT_CONNECTED = "Not Connected"
    UNKNOWN = "Unknown"
    ERROR = "Error"


class HostFact(BaseModel):
    """One measured property of the host.

    A fact carries either a ``value`` or a ``sentinel``. ``error`` is set when
    the underlying query failed, which keeps "nothing there" (a sentinel with
    no error) apart from "could not look" (``Error`` with a message). A fact
    may also carry a fallback ``value`` together with an ``error``.
    """

    model_config = ConfigDict(frozen=True)

    kind: FactKind
    value: str | datetime | None = None
    sentinel: FactSentinel | None = None
    error: str | None = None

    @classmethod
    def of(cls, kind: FactKind, value: str | datetime) -> HostFact:
        return cls(kind=kind, value=value)

    @classmethod
    def missing(cls, kind: FactKind, sentinel: FactSentinel, error: str | None = None) -> HostFact:
        return cls(kind=kind, sentinel=sentinel, error=error)

    @property
    def ok(self) -> bool:
        return self.sentinel is None and self.error is None

    @property
    def display(self) -> str:
        if self.sentinel is not None:
            return self.sentinel.value
        if isinstance(self.value, datetime):
            return self.value.strftime("%Y-%m-%d %H:%M")
        return str(self.value)


class AdapterStatus(str, Enum):
    UP = "Up"
    DOWN = "Down"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: str | None) -> AdapterStatus:
        for status in (cls.UP, cls.DOWN):
            if (raw or "").strip().lower() == status.value.lower():
                return status
        return cls.UNKNOWN


class NetAdapter(BaseModel):
    """A network adapter as reported by ``Get-NetAdapter``."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    admin_status: AdapterStatus = AdapterStatus.UNKNOWN
