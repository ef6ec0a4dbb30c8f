"""Builder objects for assembling a ``Site`` step by step.

Pure convenience: ``build()`` checks required fields and applies the same
defaults as the dataclasses, so a built site is equal to one constructed
directly.

Example:
    def configure(s: SiteBuilder) -> None:
        s.output_path = "build/generated_html"
        s.title = "My Site"
        s.pages = [home, about]
        nav = s.navigation()
        nav.background_color = "bg-white"
        nav.nav_selected_color = "text-blue-600"
        nav.nav_default_color = "text-gray-700"
        nav.logo("images/logo.png", width=120, height=60)
        s.resources().external_stylesheet(FONT_AWESOME_6_7_2)
        s.integrations().google_tag = "G-ABCD1234EF"

    my_site = site(configure)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from sitegen.errors import ConfigurationError
from sitegen.nav import Logo, NavSettings
from sitegen.page import PageSettings
from sitegen.resources import (
    DEFAULT_LOCAL_STYLESHEET,
    ExternalStylesheet,
    InputOutputPair,
    ResourceConfig,
    ResourceStore,
)
from sitegen.core import IntegrationConfig, Site

T = TypeVar("T")


def _require(value: Optional[T], name: str) -> T:
    if value is None:
        raise ConfigurationError(f"{name} must be specified")
    return value


def _apply(builder: T, configure: Optional[Callable[[T], Any]]) -> T:
    if configure is not None:
        configure(builder)
    return builder


class LogoBuilder:
    def __init__(self) -> None:
        self.image_url: Optional[str] = None
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.alt_text: str = "Logo"

    def build(self) -> Logo:
        return Logo(
            image_url=_require(self.image_url, "logo.image_url"),
            width=_require(self.width, "logo.width"),
            height=_require(self.height, "logo.height"),
            alt_text=self.alt_text,
        )


class NavigationBuilder:
    def __init__(self) -> None:
        self.background_color: Optional[str] = None
        self.nav_selected_color: Optional[str] = None
        self.nav_default_color: Optional[str] = None
        self.is_sticky: bool = False
        self.instagram: Optional[str] = None
        self.email: Optional[str] = None
        self.blur_nav_background: bool = False
        self.font_family: str = "font-plex-sans"
        self.horizontal_margin: str = "16"
        self._logo: Optional[Union[Logo, LogoBuilder]] = None

    def logo(
        self,
        image_url: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        *,
        alt_text: str = "Logo",
        configure: Optional[Callable[[LogoBuilder], Any]] = None,
    ) -> LogoBuilder:
        """Set the logo directly or through the returned ``LogoBuilder``.

        ``nav.logo("images/logo.png", width=100, height=50)`` and
        ``nav.logo().image_url = ...`` are equivalent.
        """
        builder = LogoBuilder()
        builder.image_url = image_url
        builder.width = width
        builder.height = height
        builder.alt_text = alt_text
        self._logo = _apply(builder, configure)
        return builder

    def build(self) -> NavSettings:
        background_color = _require(self.background_color, "navigation.background_color")
        selected = _require(self.nav_selected_color, "navigation.nav_selected_color")
        default = _require(self.nav_default_color, "navigation.nav_default_color")
        logo = _require(self._logo, "navigation.logo")
        if isinstance(logo, LogoBuilder):
            logo = logo.build()
        return NavSettings(
            background_color=background_color,
            nav_selected_color=selected,
            nav_default_color=default,
            logo=logo,
            is_sticky=self.is_sticky,
            instagram=self.instagram,
            email=self.email,
            blur_nav_background=self.blur_nav_background,
            font_family=self.font_family,
            horizontal_margin=self.horizontal_margin,
        )


class ResourcesBuilder:
    def __init__(self) -> None:
        self._static_files: list[InputOutputPair] = []
        self._local_stylesheets: list[str] = []
        self._external_stylesheets: list[ExternalStylesheet] = []

    def static_file(
        self,
        input_filename: str,
        output_path: Union[str, Path],
        output_filename: Optional[str] = None,
    ) -> ResourcesBuilder:
        self._static_files.append(
            InputOutputPair(
                input_filename=input_filename,
                output_path=str(output_path),
                output_filename=output_filename,
            )
        )
        return self

    def static_files(self, *files: InputOutputPair) -> ResourcesBuilder:
        self._static_files.extend(files)
        return self

    def local_stylesheet(self, path: str) -> ResourcesBuilder:
        self._local_stylesheets.append(path)
        return self

    def local_stylesheets(self, *paths: str) -> ResourcesBuilder:
        self._local_stylesheets.extend(paths)
        return self

    def external_stylesheet(self, stylesheet: ExternalStylesheet) -> ResourcesBuilder:
        self._external_stylesheets.append(stylesheet)
        return self

    def external_stylesheets(self, *stylesheets: ExternalStylesheet) -> ResourcesBuilder:
        self._external_stylesheets.extend(stylesheets)
        return self

    def build(self) -> ResourceConfig:
        return ResourceConfig(
            static_files=list(self._static_files),
            local_stylesheets=list(self._local_stylesheets) or [DEFAULT_LOCAL_STYLESHEET],
            external_stylesheets=list(self._external_stylesheets),
        )


class IntegrationsBuilder:
    def __init__(self) -> None:
        self.google_tag_id: Optional[str] = None

    @property
    def google_tag(self) -> Optional[str]:
        """Alias for ``google_tag_id``."""
        return self.google_tag_id

    @google_tag.setter
    def google_tag(self, value: Optional[str]) -> None:
        self.google_tag_id = value

    def build(self) -> IntegrationConfig:
        return IntegrationConfig(google_tag_id=self.google_tag_id)


class SiteBuilder:
    def __init__(self) -> None:
        self.output_path: Optional[Union[str, Path]] = None
        self.title: Optional[str] = None
        self.version: str = "1.0.0"
        self.background_color: str = "bg-white"
        self.html_classes: str = ""
        self.body_classes: str = "flex flex-col min-h-screen"
        self.content_classes: str = "flex-1 flex flex-col"
        self.pages: Optional[list[Any]] = None
        self.page_settings: PageSettings = PageSettings()
        self.base_url: Optional[str] = None
        self.default_og_image: Optional[str] = None
        self.lang: str = "en"
        self.og_site_name: Optional[str] = None
        self.resource_store: Optional[ResourceStore] = None
        self._navigation: Optional[NavigationBuilder] = None
        self._resources: Optional[ResourcesBuilder] = None
        self._integrations: Optional[IntegrationsBuilder] = None

    def add_pages(self, pages: Iterable[Any]) -> SiteBuilder:
        self.pages = [*(self.pages or []), *pages]
        return self

    def navigation(self, configure: Optional[Callable[[NavigationBuilder], Any]] = None) -> NavigationBuilder:
        """Return the navigation sub-builder, creating it on first use."""
        if self._navigation is None:
            self._navigation = NavigationBuilder()
        return _apply(self._navigation, configure)

    def resources(self, configure: Optional[Callable[[ResourcesBuilder], Any]] = None) -> ResourcesBuilder:
        if self._resources is None:
            self._resources = ResourcesBuilder()
        return _apply(self._resources, configure)

    def integrations(
        self, configure: Optional[Callable[[IntegrationsBuilder], Any]] = None
    ) -> IntegrationsBuilder:
        if self._integrations is None:
            self._integrations = IntegrationsBuilder()
        return _apply(self._integrations, configure)

    def build(self) -> Site:
        return Site(
            output_path=_require(self.output_path, "output_path"),
            title=_require(self.title, "title"),
            pages=list(_require(self.pages, "pages")),
            version=self.version,
            background_color=self.background_color,
            html_classes=self.html_classes,
            body_classes=self.body_classes,
            content_classes=self.content_classes,
            navigation=self._navigation.build() if self._navigation is not None else None,
            resources=self._resources.build() if self._resources is not None else ResourceConfig(),
            integrations=(
                self._integrations.build() if self._integrations is not None else IntegrationConfig()
            ),
            page_settings=self.page_settings,
            base_url=self.base_url,
            default_og_image=self.default_og_image,
            lang=self.lang,
            og_site_name=self.og_site_name,
            resource_store=self.resource_store,
        )


def site(configure: Callable[[SiteBuilder], Any]) -> Site:
    """Create a ``SiteBuilder``, let ``configure`` fill it in, and build."""
    return _apply(SiteBuilder(), configure).build()


__all__ = [
    "IntegrationsBuilder",
    "LogoBuilder",
    "NavigationBuilder",
    "ResourcesBuilder",
    "SiteBuilder",
    "site",
]
