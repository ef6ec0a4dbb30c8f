"""sitegen - static HTML sites from typed Python page definitions.

Pages are values with a content callback; a ``Site`` holds navigation,
stylesheets and SEO settings; generation writes one HTML file per page plus
sitemap.xml and robots.txt.

Example:
    from sitegen import HtmlBuilder, PageSettings, Site, StaticPage

    def home(settings: PageSettings, builder: HtmlBuilder) -> None:
        with builder.h1(classes=settings.h1.classes):
            builder.text("Welcome")

    site = Site(
        output_path="build/generated_html",
        title="My Site",
        pages=[StaticPage(title="Home", output_filename="index.html", content=home)],
        base_url="https://example.com",
    )
    site.generate_files()
    site.generate_sitemap()
    site.generate_robots_txt()
    site.copy_resources()
"""

from sitegen.dsl import (
    IntegrationsBuilder,
    LogoBuilder,
    NavigationBuilder,
    ResourcesBuilder,
    SiteBuilder,
    site,
)
from sitegen.errors import (
    ConfigurationError,
    DirectoryCreationError,
    GenerationError,
    PathSecurityError,
    ResourceCopyError,
    ResourceNotFoundError,
    SitegenError,
)
from sitegen.markup import HtmlBuilder
from sitegen.nav import Logo, NavSettings, render_nav
from sitegen.page import Page, PageSettings, StaticPage, TextConfig
from sitegen.resources import (
    FONT_AWESOME_6_7_2,
    TAILWIND_CSS_3_4_17,
    DirectoryResourceStore,
    ExternalStylesheet,
    InputOutputPair,
    PackageResourceStore,
    ResourceConfig,
    ResourceStore,
    copy_resource,
)
from sitegen.core import BuildResult, IntegrationConfig, Site

__all__ = [
    "BuildResult",
    "ConfigurationError",
    "DirectoryCreationError",
    "DirectoryResourceStore",
    "ExternalStylesheet",
    "FONT_AWESOME_6_7_2",
    "GenerationError",
    "HtmlBuilder",
    "InputOutputPair",
    "IntegrationConfig",
    "IntegrationsBuilder",
    "Logo",
    "LogoBuilder",
    "NavSettings",
    "NavigationBuilder",
    "PackageResourceStore",
    "Page",
    "PageSettings",
    "PathSecurityError",
    "ResourceConfig",
    "ResourceCopyError",
    "ResourceNotFoundError",
    "ResourceStore",
    "ResourcesBuilder",
    "Site",
    "SiteBuilder",
    "SitegenError",
    "StaticPage",
    "TAILWIND_CSS_3_4_17",
    "TextConfig",
    "copy_resource",
    "render_nav",
    "site",
]
