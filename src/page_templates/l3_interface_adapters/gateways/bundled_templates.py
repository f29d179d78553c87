"""Gateway: locate the template directory packaged with the application."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

from page_templates.l1_entities.errors import RootResolutionError

_PACKAGE = 'page_templates'
_TEMPLATES_DIRNAME = 'templates'


def resolve_bundled_root() -> Path | None:
    """Return the bundled template directory, or None if the package ships none.

    Raises RootResolutionError when the resource exists but is not on the real
    filesystem (e.g. the package is imported from a zip archive).
    """
    traversable = resources.files(_PACKAGE) / _TEMPLATES_DIRNAME
    if not traversable.is_dir():
        return None
    if not isinstance(traversable, Path):
        raise RootResolutionError(f'Bundled templates are not on the filesystem: {traversable}')
    return traversable


def bundled_template_names() -> set[str]:
    """File stems of the bundled templates, for diagnostics."""
    root = resolve_bundled_root()
    if root is None:
        return set()
    return {p.name.removesuffix('.yml') for p in root.iterdir() if p.name.endswith('.yml')}
