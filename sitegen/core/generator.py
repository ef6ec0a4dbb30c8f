"""Static site generation pipeline.

Turns a ``Site`` into files under its output path:
- one HTML document per page (head metadata, SEO tags, nav, content, footer)
- sitemap.xml and robots.txt when the site has a base URL
- static resources copied from the site's resource store

Page rendering and resource copying collect failures and raise one
aggregate error at the end; files written for successful items stay on disk.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from sitegen.errors import DirectoryCreationError, GenerationError, ResourceCopyError
from sitegen.lib.log import get_logger
from sitegen.markup import HtmlBuilder
from sitegen.nav import render_nav
from sitegen.page import is_index, optional_attr
from sitegen.paths import normalize_relative
from sitegen.resources import DirectoryResourceStore, copy_resource
from sitegen.core.templates import ENV
from sitegen.validation import validate_google_tag

if TYPE_CHECKING:
    from sitegen.core.model import Site

logger = get_logger(__name__)

SITEMAP_FILENAME = "sitemap.xml"
ROBOTS_FILENAME = "robots.txt"


def canonical_url(base_url: str, page: Any) -> str:
    """``{base}/`` for the home page, ``{base}/{output_filename}`` otherwise."""
    if is_index(page):
        return f"{base_url}/"
    return f"{base_url}/{page.output_filename}"


def google_tag_snippet(tag: str | None) -> Markup:
    """Render the gtag.js loader and bootstrap; empty for a blank tag."""
    if tag is None or not tag.strip():
        return Markup("")
    validate_google_tag(tag)
    return Markup(ENV.get_template("gtag.html").render(tag=tag))


def _first(*values: Any) -> Any:
    return next((value for value in values if value is not None), None)


def _render_region(renderer: Any, site: Site) -> Markup:
    builder = HtmlBuilder()
    renderer(site.page_settings, builder)
    return builder.render()


def render_page(site: Site, page: Any) -> str:
    """Render the complete HTML document for one page.

    Exceptions from the page's content or footer callbacks propagate.
    """
    title = _first(optional_attr(page, "page_title"), site.title)
    meta_description = optional_attr(page, "meta_description")
    canonical = canonical_url(site.base_url, page) if site.base_url is not None else None
    og_image = _first(optional_attr(page, "og_image"), site.default_og_image)

    nav = None
    if site.navigation is not None:
        nav_builder = HtmlBuilder()
        render_nav(page, site.pages, site.navigation, nav_builder)
        nav = nav_builder.render()

    content = _render_region(page.content, site)
    footer_renderer = optional_attr(page, "footer")
    footer = _render_region(footer_renderer, site) if footer_renderer is not None else None

    return ENV.get_template("document.html").render(
        lang=site.lang,
        html_classes=site.html_classes,
        title=title,
        meta_description=meta_description,
        canonical_url=canonical,
        og_site_name=_first(site.og_site_name, site.title),
        og_image=og_image,
        structured_data=optional_attr(page, "structured_data"),
        local_stylesheets=site.resources.local_stylesheets,
        external_stylesheets=site.resources.external_stylesheets,
        analytics=google_tag_snippet(site.integrations.google_tag_id),
        body_classes=f"{site.background_color} {site.body_classes}".strip(),
        nav=nav,
        content_classes=site.content_classes,
        content=content,
        footer=footer,
    )


def _ensure_output_dir(output_dir: Path) -> None:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"Failed to create output directory '{output_dir}': {exc}"
        ) from exc


def generate_files(site: Site) -> list[Path]:
    """Write one HTML file per page and return the paths written.

    Raises:
        DirectoryCreationError: The output directory cannot be created. No
            page is attempted.
        GenerationError: One or more pages failed; lists each filename and
            its cause. Pages that succeeded are already on disk.
    """
    output_dir = Path(site.output_path)
    _ensure_output_dir(output_dir)

    written: list[Path] = []
    failures: list[tuple[str, BaseException]] = []

    for page in site.pages:
        try:
            relative = normalize_relative(page.output_filename, field="output_filename")
            html = render_page(site, page)
            target = output_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding="utf-8")
        except Exception as exc:
            logger.warning("Failed to generate page %s: %s", page.output_filename, exc)
            failures.append((page.output_filename, exc))
            continue
        logger.debug("Wrote %s", target)
        written.append(target)

    if failures:
        raise GenerationError(failures)

    logger.info("Generated %d page(s) in %s", len(written), output_dir)
    return written


def generate_sitemap(site: Site, today: date | None = None) -> Path | None:
    """Write sitemap.xml listing every page; no-op without a base URL.

    Every URL gets the same ``<lastmod>``: today's date unless ``today`` is
    given. Pages carry no modification time of their own.
    """
    if site.base_url is None:
        return None
    lastmod = (today or date.today()).isoformat()
    xml = ENV.get_template("sitemap.xml").render(
        locations=[canonical_url(site.base_url, page) for page in site.pages],
        lastmod=lastmod,
    )
    output_dir = Path(site.output_path)
    _ensure_output_dir(output_dir)
    target = output_dir / SITEMAP_FILENAME
    target.write_text(xml, encoding="utf-8")
    logger.info("Wrote sitemap with %d URL(s) to %s", len(site.pages), target)
    return target


def robots_txt(base_url: str) -> str:
    return f"User-agent: *\nAllow: /\nSitemap: {base_url}/{SITEMAP_FILENAME}\n"


def generate_robots_txt(site: Site) -> Path | None:
    """Write an allow-all robots.txt pointing at the sitemap; no-op without a base URL."""
    if site.base_url is None:
        return None
    output_dir = Path(site.output_path)
    _ensure_output_dir(output_dir)
    target = output_dir / ROBOTS_FILENAME
    target.write_text(robots_txt(site.base_url), encoding="utf-8")
    logger.info("Wrote %s", target)
    return target


def copy_resources(site: Site) -> list[Path]:
    """Copy every configured static file; collect failures and raise once.

    Raises:
        ResourceCopyError: Lists each failed ``input_filename`` and its cause.
            Copies that succeeded are kept.
    """
    store = site.resource_store if site.resource_store is not None else DirectoryResourceStore()
    copied: list[Path] = []
    failures: list[tuple[str, BaseException]] = []

    for pair in site.resources.static_files:
        try:
            copied.append(copy_resource(pair, store))
        except Exception as exc:
            logger.warning("Failed to copy resource %s: %s", pair.input_filename, exc)
            failures.append((pair.input_filename, exc))

    if failures:
        raise ResourceCopyError(failures)

    if copied:
        logger.info("Copied %d resource(s) from %r", len(copied), store)
    return copied


__all__ = [
    "ROBOTS_FILENAME",
    "SITEMAP_FILENAME",
    "canonical_url",
    "copy_resources",
    "generate_files",
    "generate_robots_txt",
    "generate_sitemap",
    "google_tag_snippet",
    "render_page",
    "robots_txt",
]
