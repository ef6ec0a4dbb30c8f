"""Path helpers for mapping resources into the output tree."""

from __future__ import annotations

import posixpath
from pathlib import Path, PurePosixPath, PureWindowsPath

from sitegen.errors import PathSecurityError


def normalize_relative(raw: str, *, field: str) -> str:
    """Return ``raw`` normalised, rejecting absolute or traversing paths.

    ``./foo/../../../etc/passwd`` normalises to ``../../etc/passwd`` and is
    rejected even though its first component looks harmless.
    """
    if "\x00" in raw:
        raise PathSecurityError(f"{field} contains a null byte: {raw!r}")
    if PurePosixPath(raw).is_absolute() or PureWindowsPath(raw).is_absolute() or raw.startswith("\\"):
        raise PathSecurityError(f"{field} cannot be an absolute path: {raw!r}")
    normalized = posixpath.normpath(raw.replace("\\", "/"))
    if normalized == ".." or normalized.startswith("../"):
        raise PathSecurityError(f"{field} cannot traverse outside base directory: {raw!r}")
    return normalized


def is_within_root(path: Path, root: Path) -> bool:
    """Return True if path resolves within root."""
    try:
        path.resolve(strict=False).relative_to(root.resolve(strict=False))
    except ValueError:
        return False
    return True


__all__ = ["normalize_relative", "is_within_root"]
