"""Environment variable utilities with SITEGEN_* precedence."""

from __future__ import annotations

import os


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with SITEGEN_* precedence.

    Checks SITEGEN_{KEY} first, then {KEY}, then returns default.

    Examples:
        >>> os.environ["OUTPUT"] = "public"
        >>> get_env("OUTPUT")
        'public'

        >>> os.environ["SITEGEN_OUTPUT"] = "build/html"
        >>> get_env("OUTPUT")
        'build/html'

        >>> get_env("MISSING_VAR", "fallback")
        'fallback'
    """
    prefixed_key = f"SITEGEN_{key}"
    return os.environ.get(prefixed_key) or os.environ.get(key) or default


__all__ = ["get_env"]
