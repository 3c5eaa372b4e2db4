from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def _build_test_config_toml(
    *,
    default_interval_ms: int | None = None,
    split_policy: str | None = None,
    fallback_width: int | None = None,
    header_comment: str | None = None,
) -> str:
    """Build a TOML config with only the requested display keys set."""
    lines: list[str] = []
    if header_comment:
        lines.append(f"# {header_comment}")

    lines.append("[display]")
    if default_interval_ms is not None:
        lines.append(f"default_interval_ms = {default_interval_ms}")
    if split_policy is not None:
        lines.append(f'split_policy = "{split_policy}"')
    if fallback_width is not None:
        lines.append(f"fallback_width = {fallback_width}")

    return "\n".join(lines) + "\n"


def write_test_config(
    config_path: Path,
    *,
    default_interval_ms: int | None = None,
    split_policy: str | None = None,
    fallback_width: int | None = None,
    header_comment: str | None = None,
) -> Path:
    """Write a TOML test config and return its path."""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        _build_test_config_toml(
            default_interval_ms=default_interval_ms,
            split_policy=split_policy,
            fallback_width=fallback_width,
            header_comment=header_comment,
        ),
        encoding="utf-8",
    )
    return config_path


def write_test_script(
    script_path: Path,
    *,
    side_dishes: Sequence[str] = (),
    pre_captions: Sequence[str] = (),
    after_captions: Sequence[str] = (),
) -> Path:
    """Write a complete script file and return its path."""
    doc = tomlkit.document()
    doc["side_dishes"] = list(side_dishes)
    doc["pre_captions"] = list(pre_captions)
    doc["after_captions"] = list(after_captions)
    script_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return script_path
