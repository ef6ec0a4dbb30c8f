"""Named Tailwind CSS utility tokens.

Not an exhaustive list: only the tokens the library uses for its defaults.
Any other class can be passed as a plain string and goes through
``validate_css_classes`` like everything else.
"""

from __future__ import annotations

from enum import Enum


class TextSize(str, Enum):
    SM = "text-sm"
    XL2 = "text-2xl"
    XL3 = "text-3xl"
    XL4 = "text-4xl"

    def __str__(self) -> str:
        return self.value


class Background(str, Enum):
    VIOLET_50 = "bg-violet-50"
    NEUTRAL_50 = "bg-neutral-50"
    NEUTRAL_100 = "bg-neutral-100"

    def __str__(self) -> str:
        return self.value


class TextColor(str, Enum):
    NEUTRAL_600 = "text-neutral-600"
    NEUTRAL_900 = "text-neutral-900"

    def __str__(self) -> str:
        return self.value


__all__ = ["TextSize", "Background", "TextColor"]
