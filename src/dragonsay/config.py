"""User configuration: defaults for the CLI, stored as TOML."""

from __future__ import annotations

import logging
import os
import tempfile
import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field, ValidationError

from dragonsay.constants import DEFAULT_INTERVAL_MS, FALLBACK_TERMINAL_WIDTH, MIN_INTERVAL_MS
from dragonsay.paths import get_config_path
from dragonsay.renderer import SlotPolicy

log = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the config file exists but cannot be used."""


class DisplayConfig(BaseModel):
    """How frames are laid out and paced."""

    default_interval_ms: int = Field(
        default=DEFAULT_INTERVAL_MS,
        ge=MIN_INTERVAL_MS,
        description="Pause between animation frames when --interval is not given",
    )
    split_policy: SlotPolicy = Field(
        default=SlotPolicy.CHARACTERS,
        description="How side dishes are cut into the two slots (chars or lines)",
    )
    fallback_width: int = Field(
        default=FALLBACK_TERMINAL_WIDTH,
        ge=1,
        description="Terminal width used when the real size cannot be queried",
    )


class DragonsayConfig(BaseModel):
    """Root configuration model."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> DragonsayConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            config = cls.model_validate(data)
        except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
            raise ConfigError(f"invalid config {config_path}: {exc}") from exc

        log.debug("loaded config from %s", config_path)
        return config

    def save(self, path: Path) -> None:
        """Serialize to a TOML file, replacing it atomically."""
        doc = tomlkit.document()
        doc.add(tomlkit.comment("dragonsay configuration"))

        display_table = tomlkit.table()
        for key, value in self.display.model_dump(mode="json").items():
            display_table[key] = value
        doc["display"] = display_table

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp_")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(tomlkit.dumps(doc))
            Path(tmp_name).replace(path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        log.debug("wrote config to %s", path)


__all__ = ["ConfigError", "DisplayConfig", "DragonsayConfig"]
