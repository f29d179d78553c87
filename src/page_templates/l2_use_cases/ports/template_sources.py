"""Ports: where template source roots come from."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class BundledRootResolver(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    def __call__(self) -> Path | None:
        """Return the packaged template directory, or None when none is bundled.

        Raises RootResolutionError when the location exists but is not usable
        as a filesystem directory.
        """
        ...


class TemplatePathSource(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Dynamic-configuration accessor for the external template directory."""

    def get_template_path(self) -> str:
        """Return the external template directory, or '' when unset."""
        ...
