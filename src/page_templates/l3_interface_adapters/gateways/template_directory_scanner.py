"""Gateway: scans one directory for template files — implements TemplateScanner port."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from page_templates.l1_entities.errors import ParseError, RootResolutionError, StreamIOError, TemplateLoadError
from page_templates.l1_entities.template import TemplateRecord
from page_templates.l2_use_cases.ports.template_parser import TemplateParser

log = logging.getLogger('pgt.scanner')

TEMPLATE_SUFFIX = '.yml'


@dataclass(frozen=True)
class ScanOutcome:
    """Result of loading one file — either a record or the error that skipped it."""

    path: Path
    record: TemplateRecord | None = None
    error: TemplateLoadError | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None


class TemplateDirectoryScanner:
    """Parses every ``*.yml`` regular file directly inside a root, skipping bad files."""

    def __init__(self, parser: TemplateParser, suffix: str = TEMPLATE_SUFFIX) -> None:
        self._parser = parser
        self._suffix = suffix

    def scan(self, root: Path) -> list[TemplateRecord]:
        return [o.record for o in self.scan_outcomes(root) if o.record is not None]

    def scan_outcomes(self, root: Path) -> list[ScanOutcome]:
        """Load each matching file in enumeration order. Raises RootResolutionError."""
        outcomes: list[ScanOutcome] = []
        try:
            with os.scandir(root) as entries:
                for entry in entries:
                    if not entry.name.endswith(self._suffix) or not _is_regular_file(entry):
                        continue
                    outcome = self._load(Path(entry.path))
                    if outcome.error is not None:
                        log.error('Skipping template file %s: %s', outcome.path, outcome.error, exc_info=outcome.error)
                    outcomes.append(outcome)
        except OSError as e:
            raise RootResolutionError(f'Cannot list template directory {root}: {e}', root) from e
        return outcomes

    def _load(self, path: Path) -> ScanOutcome:
        try:
            stream = path.open('rb')
        except OSError as e:
            return ScanOutcome(path, error=StreamIOError(f'Cannot open template file: {e}', path))
        with stream:
            try:
                record = self._parser.parse(stream)
            except ParseError as e:
                e.path = path
                return ScanOutcome(path, error=e)
        log.debug('Parsed template %s (plugin=%s)', path, record.plugin_name)
        return ScanOutcome(path, record=record)


def _is_regular_file(entry: os.DirEntry) -> bool:
    # follows symlinks; dangling links and links to directories are skipped
    try:
        return entry.is_file()
    except OSError:
        return False
