"""Port: template source-root scanner."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from page_templates.l1_entities.template import TemplateRecord


class TemplateScanner(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract non-recursive scanner over one source root."""

    def scan(self, root: Path) -> list[TemplateRecord]:
        """Return successfully parsed records in enumeration order.

        Per-file failures are contained by the scanner. Raises RootResolutionError
        when the root itself cannot be listed.
        """
        ...
