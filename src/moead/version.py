"""
Installed version of the moead distribution.

Read once from the package metadata; a source checkout that was never
installed reports ``0.0.0+unknown``.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata

DISTRIBUTION = "moead"


@lru_cache(maxsize=None)
def get_version() -> str:
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:  # pragma: no cover - uninstalled checkout
        return "0.0.0+unknown"


__all__ = ["DISTRIBUTION", "get_version"]
