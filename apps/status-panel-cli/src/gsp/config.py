"""CLI configuration: the PanelConfig is built once here and passed down."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from gsp_common import DEFAULT_CONFIG_PATH, PanelConfig

from gsp.errors import ConfigError


def load_config(path: Path | None = None) -> PanelConfig:
    """Resolve the runtime config.

    An explicit ``path`` must exist. Without one, the default location is
    used when present and environment/defaults otherwise.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.is_file() else None
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        if path is None:
            return PanelConfig()
        return PanelConfig.from_file(path)
    except (OSError, json.JSONDecodeError, ValidationError, ValueError) as exc:
        raise ConfigError(f"Invalid configuration ({path or 'environment'}): {exc}") from exc
