"""Navigation bar settings and rendering."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

from sitegen.markup import HtmlBuilder
from sitegen.tailwind import TextSize
from sitegen.validation import (
    validate_css_classes,
    validate_dimension,
    validate_email,
    validate_instagram_handle,
    validate_logo_url,
)


@dataclass(frozen=True)
class Logo:
    image_url: str
    width: int
    height: int
    alt_text: str = "Logo"

    def __post_init__(self) -> None:
        validate_logo_url(self.image_url)
        validate_dimension(self.width, "width")
        validate_dimension(self.height, "height")

    @property
    def style(self) -> str:
        return f"height: {self.height}px; width: {self.width}px;"


@dataclass(frozen=True)
class NavSettings:
    """Colours, branding and social links for the navigation bar.

    ``horizontal_margin`` is a Tailwind spacing step applied as ``md:px-{n}``
    padding on the full-width bar.
    """

    background_color: str
    nav_selected_color: str
    nav_default_color: str
    logo: Logo
    is_sticky: bool = False
    instagram: Optional[str] = None
    email: Optional[str] = None
    blur_nav_background: bool = False
    font_family: str = "font-plex-sans"
    horizontal_margin: str = "16"

    def __post_init__(self) -> None:
        validate_css_classes(self.background_color, "background_color")
        validate_css_classes(self.nav_selected_color, "nav_selected_color")
        validate_css_classes(self.nav_default_color, "nav_default_color")
        validate_css_classes(self.font_family, "font_family")
        validate_css_classes(str(self.horizontal_margin), "horizontal_margin")
        if self.instagram is not None:
            validate_instagram_handle(self.instagram)
        if self.email is not None:
            validate_email(self.email)


def _join(*tokens: str) -> str:
    return " ".join(token for token in tokens if token)


def render_nav(
    selected: Any,
    pages: Sequence[Any],
    settings: NavSettings,
    builder: HtmlBuilder,
) -> None:
    """Render the navigation bar for ``selected`` into ``builder``.

    Items are ``<span>`` elements, never headings. The selected page is
    matched by equality and gets ``nav_selected_color``.
    """
    # Padding, not margin: horizontal margins on a w-full bar overflow narrow viewports.
    padding = f"px-4 sm:px-8 md:px-{settings.horizontal_margin}"
    nav_classes = _join(
        "backdrop-blur-md" if settings.blur_nav_background else "",
        "sticky" if settings.is_sticky else "",
        "z-[255]",
        settings.font_family,
        "flex w-full py-4",
        padding,
        settings.background_color,
    )
    logo = settings.logo
    item_base = _join(
        TextSize.SM.value,
        settings.font_family,
        "mx-1 md:mx-2 vertical-menu horizontal-menu md:text-base lg:text-lg",
    )
    social_classes = _join(settings.nav_default_color, TextSize.SM.value, "md:text-base lg:text-lg")

    with builder.nav(classes=nav_classes):
        with builder.a(href="./index.html"):
            with builder.div(style=logo.style):
                builder.img(src=logo.image_url, alt=logo.alt_text, style=logo.style)

        for page in pages:
            color = settings.nav_selected_color if page == selected else settings.nav_default_color
            with builder.span(classes=_join(item_base, color)):
                with builder.a(
                    href=f"./{page.output_filename}",
                    classes="uppercase z-1 mx-1 md:mx-2 text-nowrap",
                ):
                    builder.text(page.title)

        with builder.div(classes="grow"):
            pass

        with builder.div(classes="flex gap-4 py-4"):
            if settings.instagram is not None:
                with builder.a(
                    href=f"https://www.instagram.com/{settings.instagram}",
                    classes=social_classes,
                ):
                    with builder.i(classes="fa-brands fa-instagram"):
                        pass
            if settings.email is not None:
                with builder.a(href=f"mailto:{settings.email}", classes=social_classes):
                    with builder.i(classes="fa-regular fa-envelope"):
                        pass


__all__ = ["Logo", "NavSettings", "render_nav"]
