"""Exception hierarchy shared by the pipeline, configuration and CLI."""

from __future__ import annotations


class LintLoopError(Exception):
    """Base exception for lintloop errors."""


class CatalogError(LintLoopError):
    """Raised when the root directory cannot be traversed."""


class PatchGenerationError(LintLoopError):
    """Raised when the patch service fails to produce replacement content."""


class FixError(LintLoopError):
    """Raised when reading or writing a file around a patch fails."""


class EventBusClosedError(LintLoopError):
    """Raised when sending on an event bus that has already been closed."""


__all__ = [
    "CatalogError",
    "EventBusClosedError",
    "FixError",
    "LintLoopError",
    "PatchGenerationError",
]
