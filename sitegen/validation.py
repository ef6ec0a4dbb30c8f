"""Boundary checks for strings that end up inside HTML attributes.

Configuration values (CSS class lists, social handles, logo URLs, analytics
IDs) are interpolated into attributes of every generated page. Rejecting
dangerous characters when the configuration is constructed keeps attribute
breakout out of the output without a second escaping pass.
"""

from __future__ import annotations

import re

from sitegen.errors import ConfigurationError

CSS_CLASS_PATTERN = re.compile(r"^[A-Za-z0-9\s\-_:/\[\].%]+$")
INSTAGRAM_HANDLE_PATTERN = re.compile(r"^[A-Za-z0-9._]{1,30}$")
EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9._%+\-]+@[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?)*\.[A-Za-z]{2,}$"
)
GOOGLE_TAG_PATTERN = re.compile(r"^(G|GT)-[A-Z0-9]{7,12}$")

_LOGO_URL_FORBIDDEN = frozenset("\"'<>")

MIN_LOGO_DIMENSION = 1
MAX_LOGO_DIMENSION = 2000


def validate_css_classes(value: str, field_name: str) -> None:
    """Reject CSS class lists that could break out of a ``class`` attribute.

    Empty strings are allowed. Anything else must consist of letters, digits,
    whitespace and ``- _ : / [ ] . %`` so Tailwind tokens such as
    ``w-1/2``, ``z-[255]`` or ``bg-white/90`` pass.

    Raises:
        ConfigurationError: naming ``field_name`` when the value is rejected.
    """
    if value == "":
        return
    if not isinstance(value, str) or not CSS_CLASS_PATTERN.fullmatch(value):
        raise ConfigurationError(
            f"{field_name} contains invalid characters: {value!r}\n"
            "Allowed characters: letters, numbers, spaces, hyphens, underscores, "
            "colons, slashes, brackets, dots, percent signs\n"
            "Valid examples: 'bg-white', 'text-blue-600 hover:text-blue-700', "
            "'w-1/2', 'z-[255]', 'bg-white/90'"
        )


def validate_instagram_handle(value: str) -> None:
    if not INSTAGRAM_HANDLE_PATTERN.fullmatch(value or ""):
        raise ConfigurationError(
            f"Invalid Instagram username: {value!r}. "
            "Use 1-30 letters, numbers, periods or underscores."
        )


def validate_email(value: str) -> None:
    if not EMAIL_PATTERN.fullmatch(value or ""):
        raise ConfigurationError(f"Invalid email address: {value!r}")


def validate_logo_url(value: str) -> None:
    if any(ch in _LOGO_URL_FORBIDDEN for ch in value):
        raise ConfigurationError(
            f"Logo image_url contains invalid characters: {value!r}. "
            "Quotes and angle brackets are not allowed."
        )


def validate_dimension(value: int, field_name: str) -> None:
    """Check a logo dimension lies within [1, 2000] pixels."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"Logo {field_name} must be an integer, got {value!r}")
    if not MIN_LOGO_DIMENSION <= value <= MAX_LOGO_DIMENSION:
        raise ConfigurationError(
            f"Logo {field_name} must be between {MIN_LOGO_DIMENSION} and "
            f"{MAX_LOGO_DIMENSION}, got {value}"
        )


def validate_google_tag(tag: str) -> None:
    """Accept only Google Analytics 4 (``G-``) and Google Tag (``GT-``) IDs.

    Examples of rejected inputs: ``"G-<script>alert(1)</script>"``,
    ``"../../../etc/passwd"``, ``"G-lowercase"``.
    """
    if not GOOGLE_TAG_PATTERN.fullmatch(tag):
        raise ConfigurationError(
            f"Invalid Google Tag ID format: {tag!r}. "
            "Expected format: G-XXXXXXXXXX or GT-XXXXXXXX"
        )


__all__ = [
    "validate_css_classes",
    "validate_instagram_handle",
    "validate_email",
    "validate_logo_url",
    "validate_dimension",
    "validate_google_tag",
]
