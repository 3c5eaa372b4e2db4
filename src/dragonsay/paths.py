"""XDG-compliant path helpers for dragonsay configuration."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir


def get_config_dir() -> Path:
    """Get the config directory (config.toml lives here)."""
    override = os.environ.get("DRAGONSAY_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("dragonsay"))


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"
