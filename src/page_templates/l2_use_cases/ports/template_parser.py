"""Port: template parser."""

from __future__ import annotations

from typing import BinaryIO, Protocol

from page_templates.l1_entities.template import TemplateRecord


class TemplateParser(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract single-document template parser."""

    def parse(self, stream: BinaryIO) -> TemplateRecord:
        """Parse one serialized template. Raises ParseError on malformed content."""
        ...
