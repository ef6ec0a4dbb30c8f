"""Site configuration: the aggregate consumed by the generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from pathlib import Path, PurePosixPath
from typing import Any, Optional, Union

from sitegen.errors import ConfigurationError, PathSecurityError
from sitegen.nav import NavSettings
from sitegen.page import PageSettings
from sitegen.paths import normalize_relative
from sitegen.resources import InputOutputPair, ResourceConfig, ResourceStore
from sitegen.core import generator
from sitegen.validation import validate_css_classes, validate_google_tag


@dataclass(frozen=True)
class IntegrationConfig:
    """Third-party integrations (analytics, tracking).

    A blank ``google_tag_id`` is normalised to None; anything else must be a
    ``G-``/``GT-`` ID.
    """

    google_tag_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.google_tag_id is not None and not self.google_tag_id.strip():
            object.__setattr__(self, "google_tag_id", None)
        if self.google_tag_id is not None:
            validate_google_tag(self.google_tag_id)


@dataclass(frozen=True)
class BuildResult:
    pages: list[Path]
    sitemap: Optional[Path]
    robots: Optional[Path]
    resources: list[Path]

    def as_dict(self) -> dict:
        return {
            "pages": [str(path) for path in self.pages],
            "sitemap": str(self.sitemap) if self.sitemap else None,
            "robots": str(self.robots) if self.robots else None,
            "resources": [str(path) for path in self.resources],
        }


@dataclass(frozen=True)
class Site:
    """Everything needed to generate a static site.

    Attributes:
        output_path: Directory the HTML files are written to. Prefer a path
            inside the project (e.g. ``build/generated_html``); existing
            files with the same names are overwritten.
        title: Default ``<title>`` for pages without their own.
        version: Free-form site version for tracking.
        background_color: Tailwind background class for ``<body>``.
        html_classes: Classes for ``<html>``; omitted when empty.
        body_classes: Classes for ``<body>``, after ``background_color``.
        content_classes: Classes for the wrapper around page content.
        pages: Pages to generate, in navigation order.
        navigation: Navigation bar settings; no nav when None.
        resources: Static files and stylesheets.
        integrations: Analytics and other third-party snippets.
        page_settings: Style settings passed to every content callback.
        base_url: Absolute site URL without trailing slash. Enables canonical
            links, Open Graph tags, sitemap.xml and robots.txt.
        default_og_image: ``og:image`` for pages that set none.
        lang: ``<html lang>`` value.
        og_site_name: ``og:site_name``; falls back to ``title``.
        resource_store: Where static files are read from; ``resources/``
            relative to the working directory when None.
    """

    output_path: Union[str, Path]
    title: str
    pages: list[Any]
    version: str = "1.0.0"
    background_color: str = "bg-white"
    html_classes: str = ""
    body_classes: str = "flex flex-col min-h-screen"
    content_classes: str = "flex-1 flex flex-col"
    navigation: Optional[NavSettings] = None
    resources: ResourceConfig = field(default_factory=ResourceConfig)
    integrations: IntegrationConfig = field(default_factory=IntegrationConfig)
    page_settings: PageSettings = field(default_factory=PageSettings)
    base_url: Optional[str] = None
    default_og_image: Optional[str] = None
    lang: str = "en"
    og_site_name: Optional[str] = None
    resource_store: Optional[ResourceStore] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        validate_css_classes(self.background_color, "background_color")
        validate_css_classes(self.html_classes, "html_classes")
        validate_css_classes(self.body_classes, "body_classes")
        validate_css_classes(self.content_classes, "content_classes")

        seen: dict[str, str] = {}
        for page in self.pages:
            try:
                key = normalize_relative(page.output_filename, field="output_filename")
            except PathSecurityError:
                # Reported per page by generate_files.
                continue
            if key in seen:
                raise ConfigurationError(
                    f"Duplicate output_filename {page.output_filename!r} "
                    f"(same file as {seen[key]!r}): every page needs its own file"
                )
            seen[key] = page.output_filename

    def with_output_path(self, output_path: Union[str, Path]) -> Site:
        """Return a copy that writes to ``output_path``, static files included.

        Static files whose ``output_path`` is the current output directory, or
        a directory below it, move along with the pages. Others are kept.

        Raises:
            ConfigurationError: ``output_path`` is absolute but static files
                need moving (their paths must stay relative).
        """
        resources = self.resources
        try:
            old = PurePosixPath(normalize_relative(str(self.output_path), field="output_path"))
        except PathSecurityError:
            # Absolute or outside the working directory: no pair can sit below it.
            old = None
        if old is not None:
            moved: list[InputOutputPair] = []
            changed = False
            for pair in resources.static_files:
                try:
                    current = PurePosixPath(normalize_relative(pair.output_path, field="output_path"))
                    below = current.relative_to(old)
                except (PathSecurityError, ValueError):
                    moved.append(pair)
                    continue
                if Path(output_path).is_absolute():
                    raise ConfigurationError(
                        f"Cannot move static files to absolute output path {str(output_path)!r}; "
                        "use a path relative to the working directory"
                    )
                new = PurePosixPath(normalize_relative(str(output_path), field="output_path")) / below
                moved.append(replace(pair, output_path=str(new)))
                changed = True
            if changed:
                resources = replace(resources, static_files=moved)
        return replace(self, output_path=output_path, resources=resources)

    def render_page(self, page: Any) -> str:
        """Return the HTML document for ``page`` without writing it."""
        return generator.render_page(self, page)

    def generate_files(self) -> list[Path]:
        """Generate one HTML file per page.

        Raises:
            DirectoryCreationError: If ``output_path`` cannot be created.
            GenerationError: If any page's content or footer callback fails.
        """
        return generator.generate_files(self)

    def generate_sitemap(self, today: date | None = None) -> Path | None:
        """Write sitemap.xml. Safe to call unconditionally: no-op without ``base_url``."""
        return generator.generate_sitemap(self, today=today)

    def generate_robots_txt(self) -> Path | None:
        """Write robots.txt. Safe to call unconditionally: no-op without ``base_url``."""
        return generator.generate_robots_txt(self)

    def copy_resources(self) -> list[Path]:
        """Copy every configured static file into place.

        Raises:
            ResourceCopyError: If any resource fails (details for each).
        """
        return generator.copy_resources(self)

    def build(self, *, sitemap: bool = True, robots: bool = True, resources: bool = True) -> BuildResult:
        """Run the full pipeline: pages, sitemap, robots.txt, static files."""
        pages = self.generate_files()
        sitemap_path = self.generate_sitemap() if sitemap else None
        robots_path = self.generate_robots_txt() if robots else None
        copied = self.copy_resources() if resources else []
        return BuildResult(pages=pages, sitemap=sitemap_path, robots=robots_path, resources=copied)


__all__ = ["BuildResult", "IntegrationConfig", "Site"]
