"""sitegen error hierarchy.

All project exceptions inherit from SitegenError, enabling:
- ``except SitegenError`` at top-level boundaries (CLI)
- Fine-grained catches deeper in the stack (``except PathSecurityError``)

Hierarchy:
    SitegenError
    ├── ConfigurationError        # invalid configuration values
    ├── PathSecurityError         # absolute / traversing resource paths
    ├── ResourceNotFoundError     # missing entry in a resource store
    ├── DirectoryCreationError    # output root cannot be created
    ├── GenerationError           # aggregate of per-page failures
    └── ResourceCopyError         # aggregate of per-resource failures
"""

from __future__ import annotations

from collections.abc import Sequence


class SitegenError(Exception):
    """Base class for all sitegen errors."""


class ConfigurationError(SitegenError, ValueError):
    """A configuration value was rejected at construction time."""


class PathSecurityError(SitegenError, ValueError):
    """A resource path is absolute or escapes its base directory."""


class ResourceNotFoundError(SitegenError, LookupError):
    """A named resource is absent from the resource store."""


class DirectoryCreationError(SitegenError, OSError):
    """The output directory could not be created."""


class _AggregateError(SitegenError):
    """Collects per-item failures and reports them in one message."""

    verb = "process"
    noun = "item(s)"

    def __init__(self, failures: Sequence[tuple[str, BaseException]]) -> None:
        self.failures = list(failures)
        lines = "\n".join(f"  - {name}: {exc}" for name, exc in self.failures)
        super().__init__(f"Failed to {self.verb} {len(self.failures)} {self.noun}:\n{lines}")

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.failures]


class GenerationError(_AggregateError):
    """One or more pages failed to render during ``Site.generate_files``."""

    verb = "generate"
    noun = "file(s)"


class ResourceCopyError(_AggregateError):
    """One or more static files failed to copy during ``Site.copy_resources``."""

    verb = "copy"
    noun = "resource(s)"


__all__ = [
    "SitegenError",
    "ConfigurationError",
    "PathSecurityError",
    "ResourceNotFoundError",
    "DirectoryCreationError",
    "GenerationError",
    "ResourceCopyError",
]
