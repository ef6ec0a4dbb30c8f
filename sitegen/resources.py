"""Static resources, stylesheets and the resource mapper.

Static files are looked up by name in a resource store (a directory on disk
or data bundled inside a Python package) and copied into the output tree.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from importlib import resources as importlib_resources
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, runtime_checkable

from sitegen.errors import PathSecurityError, ResourceNotFoundError
from sitegen.lib.log import get_logger
from sitegen.paths import is_within_root, normalize_relative

logger = get_logger(__name__)

DEFAULT_RESOURCE_ROOT = Path("resources")
DEFAULT_LOCAL_STYLESHEET = "css/tailwind.css"


@runtime_checkable
class ResourceStore(Protocol):
    """Read-only lookup of named byte streams."""

    def open(self, name: str) -> BinaryIO:
        """Open ``name`` for binary reading.

        Raises:
            ResourceNotFoundError: If the store has no such resource.
        """
        ...


class DirectoryResourceStore:
    """Resources stored under a directory (``resources/`` by default)."""

    def __init__(self, root: Path | str = DEFAULT_RESOURCE_ROOT) -> None:
        self.root = Path(root)

    def open(self, name: str) -> BinaryIO:
        candidate = self.root / name
        if not is_within_root(candidate, self.root):
            raise PathSecurityError(f"Resource {name!r} resolves outside {self.root}")
        if not candidate.is_file():
            raise ResourceNotFoundError(f"Resource not found in {self.root}: {name}")
        return candidate.open("rb")

    def __repr__(self) -> str:
        return f"DirectoryResourceStore({str(self.root)!r})"


class PackageResourceStore:
    """Resources bundled as package data, e.g. ``PackageResourceStore("mysite.static")``."""

    def __init__(self, package: str) -> None:
        self.package = package

    def open(self, name: str) -> BinaryIO:
        try:
            traversable = importlib_resources.files(self.package)
        except ModuleNotFoundError as exc:
            raise ResourceNotFoundError(f"Resource package not found: {self.package}") from exc
        for part in name.split("/"):
            traversable = traversable.joinpath(part)
        if not traversable.is_file():
            raise ResourceNotFoundError(f"Resource not found in package {self.package}: {name}")
        return traversable.open("rb")

    def __repr__(self) -> str:
        return f"PackageResourceStore({self.package!r})"


@dataclass(frozen=True)
class ExternalStylesheet:
    """A stylesheet loaded from a CDN or other external URL.

    ``integrity`` carries the Subresource Integrity hash when the CDN
    publishes one.
    """

    href: str
    integrity: Optional[str] = None
    crossorigin: Optional[str] = None
    referrerpolicy: Optional[str] = None


# Font Awesome is opt-in: add it explicitly when nav social icons are used.
FONT_AWESOME_6_7_2 = ExternalStylesheet(
    href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.7.2/css/all.min.css",
    integrity=(
        "sha512-Evv84Mr4kqVGRNSgIGL/F/aIDqQb7xQ2vcrdIwxfjThSH8CSR7PBEakCr51Ck+w+/"
        "U6swU2Im1vVX0SVk9ABhg=="
    ),
    crossorigin="anonymous",
    referrerpolicy="no-referrer",
)

# Play CDN: development only, production sites should ship a compiled build.
TAILWIND_CSS_3_4_17 = ExternalStylesheet(href="https://cdn.tailwindcss.com/3.4.17")


@dataclass(frozen=True)
class InputOutputPair:
    """Maps a named resource to ``output_path/(output_filename or input_filename)``."""

    input_filename: str
    output_path: str
    output_filename: Optional[str] = None

    def destination(self) -> Path:
        input_name = normalize_relative(self.input_filename, field="input_filename")
        output_root = normalize_relative(str(self.output_path), field="output_path")
        target = input_name
        if self.output_filename is not None:
            target = normalize_relative(self.output_filename, field="output_filename")
        return Path(output_root) / target


@dataclass(frozen=True)
class ResourceConfig:
    static_files: list[InputOutputPair] = field(default_factory=list)
    local_stylesheets: list[str] = field(default_factory=lambda: [DEFAULT_LOCAL_STYLESHEET])
    external_stylesheets: list[ExternalStylesheet] = field(default_factory=list)


def copy_resource(pair: InputOutputPair, store: ResourceStore | None = None) -> Path:
    """Copy one resource into the output tree and return the written path.

    Path components are validated before anything touches the filesystem;
    the resource is located before any directory is created.

    Raises:
        PathSecurityError: A path component is absolute or traverses upwards.
        ResourceNotFoundError: The store has no resource named ``input_filename``.
    """
    destination = pair.destination()
    store = store if store is not None else DirectoryResourceStore()

    with store.open(normalize_relative(pair.input_filename, field="input_filename")) as source:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("wb") as sink:
            shutil.copyfileobj(source, sink)

    logger.debug("Copied %s to %s", pair.input_filename, destination)
    return destination


__all__ = [
    "DEFAULT_LOCAL_STYLESHEET",
    "DEFAULT_RESOURCE_ROOT",
    "DirectoryResourceStore",
    "ExternalStylesheet",
    "FONT_AWESOME_6_7_2",
    "InputOutputPair",
    "PackageResourceStore",
    "ResourceConfig",
    "ResourceStore",
    "TAILWIND_CSS_3_4_17",
    "copy_resource",
]
