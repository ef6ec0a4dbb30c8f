"""Page contract and page-wide style settings.

A page is anything exposing ``title``, ``output_filename`` and a
``content(settings, builder)`` callable. Everything else is optional and
read with a ``None`` default, so new optional fields never break existing
page implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from sitegen.markup import HtmlBuilder
from sitegen.tailwind import TextColor, TextSize
from sitegen.validation import validate_css_classes

INDEX_FILENAME = "index.html"


@dataclass(frozen=True)
class TextConfig:
    """Typography for a text role (size, font family, colour)."""

    text_size: str
    font: str
    text_color: str

    def __post_init__(self) -> None:
        validate_css_classes(str(self.text_size), "text_size")
        validate_css_classes(self.font, "font")
        validate_css_classes(str(self.text_color), "text_color")

    @property
    def classes(self) -> str:
        return f"{self.text_size} {self.font} {self.text_color}"


def _default_h1() -> TextConfig:
    return TextConfig(
        text_size=TextSize.XL2.value,
        font="font-plex-serif",
        text_color=TextColor.NEUTRAL_600.value,
    )


@dataclass(frozen=True)
class PageSettings:
    """Style settings shared by every page's content callback."""

    h1: TextConfig = field(default_factory=_default_h1)
    body_text_color: str = TextColor.NEUTRAL_600.value

    def __post_init__(self) -> None:
        validate_css_classes(str(self.body_text_color), "body_text_color")


Renderer = Callable[[PageSettings, HtmlBuilder], None]


@runtime_checkable
class Page(Protocol):
    """What the generation pipeline needs from a page.

    Optional members (``footer``, ``page_title``, ``meta_description``,
    ``og_image``, ``structured_data``) may be omitted entirely.
    """

    title: str
    output_filename: str

    def content(self, settings: PageSettings, builder: HtmlBuilder) -> None:
        ...


@dataclass(frozen=True)
class StaticPage:
    """A page defined as a plain value.

    Attributes:
        title: Navigation label.
        output_filename: Output path relative to the site root; ``index.html``
            is the home page.
        content: Renders the page body into the builder.
        footer: Renders the footer region; no footer wrapper when None.
        page_title: Overrides the site title in ``<title>`` and ``og:title``.
        meta_description: Emitted as ``description`` and ``og:description``.
        og_image: Absolute image URL for social previews.
        structured_data: Raw JSON-LD embedded verbatim. Not validated.
    """

    title: str
    output_filename: str
    content: Renderer
    footer: Optional[Renderer] = None
    page_title: Optional[str] = None
    meta_description: Optional[str] = None
    og_image: Optional[str] = None
    structured_data: Optional[str] = None


_OPTIONAL_MEMBERS = ("footer", "page_title", "meta_description", "og_image", "structured_data")


def optional_attr(page: Any, name: str) -> Any:
    """Read an optional page member, treating absence as None."""
    if name not in _OPTIONAL_MEMBERS:
        raise AttributeError(f"{name!r} is not an optional page member")
    return getattr(page, name, None)


def is_index(page: Any) -> bool:
    return page.output_filename == INDEX_FILENAME


__all__ = [
    "INDEX_FILENAME",
    "Page",
    "PageSettings",
    "Renderer",
    "StaticPage",
    "TextConfig",
    "is_index",
    "optional_attr",
]
