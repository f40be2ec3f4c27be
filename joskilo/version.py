"""Version information for the installed editor."""

from __future__ import annotations

import importlib.metadata
from typing import Optional


def get_version() -> str:
    """Version of the installed distribution."""
    try:
        return importlib.metadata.version("joskilo")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_build_commit() -> Optional[str]:
    # Generated at build time by the hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    return getattr(_build_info, "COMMIT", None)


def get_version_string() -> str:
    commit = get_build_commit()
    # Use short (7-character) git hashes when available
    commit = commit[:7] if commit else "unknown"
    return f"joskilo {get_version()} ({commit})"
