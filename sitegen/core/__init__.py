"""Site configuration and the generation pipeline.

``Site`` aggregates global settings and pages; its methods drive
``sitegen.core.generator``:
- ``generate_files()``: one HTML document per page
- ``generate_sitemap()`` / ``generate_robots_txt()``: SEO artifacts
- ``copy_resources()``: static files from the resource store
"""

from sitegen.core.model import BuildResult, IntegrationConfig, Site

__all__ = ["BuildResult", "IntegrationConfig", "Site"]
