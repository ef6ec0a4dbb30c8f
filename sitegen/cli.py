"""Command line interface: ``sitegen build module:attribute``."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import click

from sitegen.config import DEFAULT_CONFIG_NAME, load_site_config
from sitegen.errors import ConfigurationError, SitegenError
from sitegen.lib.env import get_env
from sitegen.lib.log import configure_logging, get_logger
from sitegen.core import Site
from sitegen.version import VERSION

logger = get_logger(__name__)


def _import_target(target: str) -> Any:
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter(
            f"{target!r} is not in module:attribute form", param_hint="TARGET"
        )
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import {module_name!r}: {exc}", param_hint="TARGET") from exc
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise click.BadParameter(
                f"{module_name!r} has no attribute {attribute!r}", param_hint="TARGET"
            ) from exc
    return obj


def resolve_site(target: str, config_path: Path | None, output: Path | None) -> Site:
    """Turn a TARGET (Site, page list, or factory) plus options into a Site."""
    obj = _import_target(target)
    if callable(obj) and not isinstance(obj, Site):
        obj = obj()

    if isinstance(obj, Site):
        site = obj
        if config_path is not None:
            raise ConfigurationError("--config cannot be combined with a TARGET that is already a Site")
    elif isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        if config_path is None and Path(DEFAULT_CONFIG_NAME).is_file():
            config_path = Path(DEFAULT_CONFIG_NAME)
        if config_path is None:
            raise ConfigurationError(
                f"A page list TARGET needs --config (or a {DEFAULT_CONFIG_NAME} in the working directory)"
            )
        file_config = load_site_config(config_path)
        builder = file_config.to_builder(base_dir=config_path.parent)
        builder.pages = list(obj)
        site = builder.build()
    else:
        raise ConfigurationError(
            f"{target} resolved to {type(obj).__name__}; expected a Site or a list of pages"
        )

    if output is not None:
        site = site.with_output_path(output)
    logger.debug("Resolved %s to site %r (%d page(s))", target, site.title, len(site.pages))
    return site


@click.group()
@click.version_option(VERSION, prog_name="sitegen")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output (each file written)")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool) -> None:
    """Generate static HTML sites from Python page definitions."""
    configure_logging(verbose=verbose, json_logs=json_logs)


@cli.command("build")
@click.argument("target")
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="JSON site definition for a page-list TARGET (default: ./sitegen.json if present)",
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Output directory (overrides the site's output_path; env: SITEGEN_OUTPUT)",
)
@click.option("--sitemap/--no-sitemap", default=True, help="Write sitemap.xml (needs base_url)")
@click.option("--robots/--no-robots", default=True, help="Write robots.txt (needs base_url)")
@click.option("--resources/--no-resources", default=True, help="Copy static files")
def build_command(
    target: str,
    config_path: Path | None,
    output: Path | None,
    sitemap: bool,
    robots: bool,
    resources: bool,
) -> None:
    """Build the site described by TARGET.

    TARGET is ``module:attribute`` naming a Site, a list of pages, or a
    callable returning either.

    \b
    Examples:
        sitegen build mysite:site
        sitegen build mysite.pages:PAGES --config sitegen.json
        sitegen build mysite:make_site -o public --no-robots
    """
    if output is None:
        env_output = get_env("OUTPUT")
        output = Path(env_output) if env_output else None

    try:
        site = resolve_site(target, config_path, output)
        click.echo(f"Building {site.title} to {site.output_path}...")
        result = site.build(sitemap=sitemap, robots=robots, resources=resources)
    except SitegenError as exc:
        click.echo(f"Error building site: {exc}", err=True)
        raise click.exceptions.Exit(1) from exc

    click.echo(
        "Site generated: "
        f"{len(result.pages)} page(s), "
        f"{len(result.resources)} resource(s)"
        + (", sitemap.xml" if result.sitemap else "")
        + (", robots.txt" if result.robots else "")
    )
    click.echo(
        "\nTo preview locally:\n"
        f"  python -m http.server -d {site.output_path}"
    )


__all__ = ["cli", "build_command", "resolve_site"]
