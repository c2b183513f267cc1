"""Custom exceptions for the status panel."""

from __future__ import annotations


class GspError(Exception):
    """Base exception for all status panel operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(GspError):
    """Configuration file or environment could not be loaded."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=2)


class PowerShellError(GspError):
    """A PowerShell query or command failed."""


class PrivilegeDeniedError(GspError):
    """The operation was rejected because the process is not elevated."""

    def __init__(self, message: str = "Access Denied"):
        super().__init__(message, exit_code=5)


class AdapterNotFoundError(GspError):
    """No network adapter matched the configured name pattern."""

    def __init__(self, message: str = "Adapter not found"):
        super().__init__(message)


class AdapterError(GspError):
    """Enabling or disabling the adapter failed."""


class RefreshError(GspError):
    """Assembling a host state snapshot failed."""


class AppNotConfiguredError(GspError):
    """No external application is configured under the requested name."""


class LaunchError(GspError):
    """The external application could not be started."""
