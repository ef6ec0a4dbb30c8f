"""Site definition files.

Pages are code, but everything else about a site can live in a JSON file::

    {
      "title": "My Site",
      "output_path": "build/generated_html",
      "base_url": "https://example.com",
      "navigation": {
        "background_color": "bg-white",
        "nav_selected_color": "text-blue-600",
        "nav_default_color": "text-gray-700",
        "logo": {"image_url": "images/logo.png", "width": 120, "height": 60}
      },
      "resources": {"static_files": [{"input_filename": "images/logo.png"}]}
    }

``load_site_config`` validates the file; ``SiteFileConfig.to_builder()``
returns a ``SiteBuilder`` that only needs pages.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sitegen.dsl import SiteBuilder
from sitegen.errors import ConfigurationError
from sitegen.resources import (
    DEFAULT_LOCAL_STYLESHEET,
    DirectoryResourceStore,
    ExternalStylesheet,
    InputOutputPair,
)

DEFAULT_CONFIG_NAME = "sitegen.json"


class LogoConfig(BaseModel):
    image_url: str
    width: int
    height: int
    alt_text: str = "Logo"

    model_config = ConfigDict(extra="forbid")


class NavigationConfig(BaseModel):
    background_color: str
    nav_selected_color: str
    nav_default_color: str
    logo: LogoConfig
    is_sticky: bool = False
    instagram: Optional[str] = None
    email: Optional[str] = None
    blur_nav_background: bool = False
    font_family: str = "font-plex-sans"
    horizontal_margin: str = "16"

    model_config = ConfigDict(extra="forbid")


class StaticFileConfig(BaseModel):
    """A static file; ``output_path`` defaults to the site's output path."""

    input_filename: str
    output_path: Optional[str] = None
    output_filename: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class ExternalStylesheetConfig(BaseModel):
    href: str
    integrity: Optional[str] = None
    crossorigin: Optional[str] = None
    referrerpolicy: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class ResourcesConfig(BaseModel):
    static_files: List[StaticFileConfig] = Field(default_factory=list)
    local_stylesheets: List[str] = Field(default_factory=lambda: [DEFAULT_LOCAL_STYLESHEET])
    external_stylesheets: List[ExternalStylesheetConfig] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class IntegrationsConfig(BaseModel):
    google_tag_id: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class SiteFileConfig(BaseModel):
    """Everything about a site except its pages."""

    title: str
    output_path: str
    version: str = "1.0.0"
    background_color: str = "bg-white"
    html_classes: str = ""
    body_classes: str = "flex flex-col min-h-screen"
    content_classes: str = "flex-1 flex flex-col"
    base_url: Optional[str] = None
    default_og_image: Optional[str] = None
    lang: str = "en"
    og_site_name: Optional[str] = None
    resource_root: Optional[str] = None
    navigation: Optional[NavigationConfig] = None
    resources: ResourcesConfig = Field(default_factory=ResourcesConfig)
    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)

    model_config = ConfigDict(extra="forbid")

    def to_builder(self, base_dir: Path | None = None) -> SiteBuilder:
        """Return a ``SiteBuilder`` pre-filled from this file.

        ``resource_root`` is resolved against ``base_dir`` (the config file's
        directory) when relative.
        """
        builder = SiteBuilder()
        builder.output_path = self.output_path
        builder.title = self.title
        builder.version = self.version
        builder.background_color = self.background_color
        builder.html_classes = self.html_classes
        builder.body_classes = self.body_classes
        builder.content_classes = self.content_classes
        builder.base_url = self.base_url
        builder.default_og_image = self.default_og_image
        builder.lang = self.lang
        builder.og_site_name = self.og_site_name
        if self.resource_root is not None:
            root = Path(self.resource_root)
            if base_dir is not None and not root.is_absolute():
                root = base_dir / root
            builder.resource_store = DirectoryResourceStore(root)

        if self.navigation is not None:
            nav = builder.navigation()
            for name in (
                "background_color",
                "nav_selected_color",
                "nav_default_color",
                "is_sticky",
                "instagram",
                "email",
                "blur_nav_background",
                "font_family",
                "horizontal_margin",
            ):
                setattr(nav, name, getattr(self.navigation, name))
            logo = self.navigation.logo
            nav.logo(logo.image_url, logo.width, logo.height, alt_text=logo.alt_text)

        resources = builder.resources()
        for entry in self.resources.static_files:
            resources.static_files(
                InputOutputPair(
                    input_filename=entry.input_filename,
                    output_path=entry.output_path if entry.output_path is not None else self.output_path,
                    output_filename=entry.output_filename,
                )
            )
        resources.local_stylesheets(*self.resources.local_stylesheets)
        resources.external_stylesheets(
            *(ExternalStylesheet(**sheet.model_dump()) for sheet in self.resources.external_stylesheets)
        )

        builder.integrations().google_tag_id = self.integrations.google_tag_id
        return builder


def parse_site_config(data: dict) -> SiteFileConfig:
    if not isinstance(data, dict):
        raise ConfigurationError("Site config must be a JSON object")
    try:
        return SiteFileConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid site config: {exc}") from exc


def load_site_config(path: Path) -> SiteFileConfig:
    """Read and validate a JSON site definition.

    Raises:
        ConfigurationError: The file is missing, not JSON, or fails validation.
    """
    path = Path(path).expanduser()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read site config {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Site config {path} is not valid JSON: {exc}") from exc
    return parse_site_config(data)


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "SiteFileConfig",
    "load_site_config",
    "parse_site_config",
]
