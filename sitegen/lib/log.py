"""structlog setup for the library and the ``sitegen`` command.

Library modules call ``get_logger(__name__)`` at import time; nothing is
emitted until ``configure_logging`` runs (the CLI calls it once per
invocation). Events carry a ``component`` field such as ``core.generator``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from sitegen.lib.env import get_env


class _CurrentStderr:
    """Writes to whatever ``sys.stderr`` is at call time.

    PrintLoggerFactory keeps the file it was given, and click's CliRunner
    swaps ``sys.stderr`` per invocation.
    """

    def write(self, s: str) -> int:
        return sys.stderr.write(s)

    def flush(self) -> None:
        sys.stderr.flush()

    def isatty(self) -> bool:
        return sys.stderr.isatty()


_stderr: TextIO = _CurrentStderr()  # type: ignore[assignment]


def _resolve_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    # SITEGEN_LOG_LEVEL=WARNING silences per-run summaries.
    name = (get_env("LOG_LEVEL") or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(verbose: bool = False, json_logs: bool = False) -> None:
    """Route sitegen events to stderr, as console lines or JSON lines."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(verbose)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=_stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a lazy logger tagged with the module's component name."""
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(component=name.removeprefix("sitegen."))


__all__ = ["configure_logging", "get_logger"]
