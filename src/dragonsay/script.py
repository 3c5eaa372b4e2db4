"""Script files: a TOML description of a whole animation."""

from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, ValidationError

from dragonsay.sequencer import AnimationPlan

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


class ScriptError(ValueError):
    """Raised when a script file cannot be read or does not validate."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"invalid script {path}: {reason}")
        self.path = path
        self.reason = reason


class Script(BaseModel):
    """Contents of a script file.

    Example::

        side_dishes = ["hamburger", "fried chicken"]
        pre_captions = ["Ready?"]
        after_captions = ["Thanks for watching"]
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    side_dishes: list[str]
    pre_captions: list[str]
    after_captions: list[str]

    @classmethod
    def load(cls, path: Path) -> Script:
        """Load and validate a script file."""
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as exc:
            raise ScriptError(path, exc.strerror or str(exc)) from exc
        except tomllib.TOMLDecodeError as exc:
            raise ScriptError(path, str(exc)) from exc

        try:
            script = cls.model_validate(data)
        except ValidationError as exc:
            raise ScriptError(path, _describe(exc)) from exc

        log.debug(
            "loaded script %s: %d side dishes, %d pre captions, %d after captions",
            path,
            len(script.side_dishes),
            len(script.pre_captions),
            len(script.after_captions),
        )
        return script

    def to_plan(self, interval_ms: int | None = None) -> AnimationPlan:
        return AnimationPlan(
            pre_captions=tuple(self.pre_captions),
            side_dishes=tuple(self.side_dishes),
            after_captions=tuple(self.after_captions),
            interval_ms=interval_ms,
        )


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


__all__ = ["Script", "ScriptError"]
