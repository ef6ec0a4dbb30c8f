from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as metadata_version


def _resolve_version() -> str:
    """Resolve the sitegen version from package metadata."""
    try:
        return metadata_version("sitegen")
    except PackageNotFoundError:
        return "unknown"


VERSION = _resolve_version()

__all__ = ["VERSION"]
