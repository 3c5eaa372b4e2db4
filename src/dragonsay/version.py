"""Package version lookup."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version


@lru_cache(maxsize=1)
def get_dragonsay_version() -> str:
    """Return installed dragonsay version, or 'dev' when running from a checkout."""
    try:
        return version("dragonsay")
    except PackageNotFoundError:
        return "dev"


__all__ = ["get_dragonsay_version"]
