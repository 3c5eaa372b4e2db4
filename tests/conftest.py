"""Pytest fixtures for dragonsay tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.helpers import RecordingTarget

if TYPE_CHECKING:
    from pathlib import Path


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config lookup at an empty per-test directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("DRAGONSAY_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("DRAGONSAY_DEBUG", raising=False)
    return config_dir


@pytest.fixture
def config_dir(_isolated_config_dir: Path) -> Path:
    return _isolated_config_dir


@pytest.fixture
def target() -> RecordingTarget:
    return RecordingTarget(width=80)
