"""Domain error types."""

from __future__ import annotations

from pathlib import Path


class TemplateLoadError(Exception):
    """Base for failures contained at file or source-root granularity."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class RootResolutionError(TemplateLoadError):
    """Raised when a source root cannot be resolved or listed."""


class ParseError(TemplateLoadError):
    """Raised when one template document does not conform to the expected structure."""


class StreamIOError(TemplateLoadError):
    """Raised when a template file cannot be opened or read."""
