"""Use case: load templates from source roots once, then answer read queries."""

from __future__ import annotations

import logging
from pathlib import Path

from page_templates.l1_entities.errors import RootResolutionError
from page_templates.l1_entities.index_state import IndexState
from page_templates.l1_entities.template import TemplateRecord
from page_templates.l2_use_cases.ports.template_scanner import TemplateScanner
from page_templates.l2_use_cases.ports.template_sources import BundledRootResolver, TemplatePathSource

log = logging.getLogger('pgt.index')


class TemplateIndex:
    """Owns the template collection.

    ``initialize()`` scans the bundled root, then the externally configured root,
    and freezes the result. Reads after that need no locking since nothing
    mutates the collection again.
    """

    def __init__(
        self,
        scanner: TemplateScanner,
        bundled_root: BundledRootResolver,
        path_source: TemplatePathSource,
    ) -> None:
        self._scanner = scanner
        self._bundled_root = bundled_root
        self._path_source = path_source
        self._state = IndexState.UNINITIALIZED
        self._records: tuple[TemplateRecord, ...] = ()
        self._positions: dict[str, int] = {}

    @property
    def state(self) -> IndexState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is IndexState.READY

    def initialize(self) -> None:
        """Load both source roots. Never raises; failing roots contribute nothing."""
        if self._state is not IndexState.UNINITIALIZED:
            log.warning('Template index already %s; ignoring initialize()', self._state.value)
            return
        self._state = IndexState.LOADING

        records: list[TemplateRecord] = []
        try:
            bundled = self._resolve_bundled_root()
            if bundled is not None:
                records.extend(self._scan_root(bundled, 'bundled'))

            template_path = self._path_source.get_template_path()
            if template_path:
                records.extend(self._scan_root(Path(template_path), 'external'))
            else:
                log.debug('No external template path configured')
        except Exception as e:
            log.error('Template loading aborted early: %s', e, exc_info=True)
        finally:
            self._freeze(records)
            self._state = IndexState.READY
        log.info('Template index ready: %d template(s)', len(self._records))

    def list_all(self) -> tuple[TemplateRecord, ...]:
        return self._records

    def lookup(self, plugin_name: str) -> TemplateRecord | None:
        """Return the first record loaded for *plugin_name* (exact match), or None."""
        pos = self._positions.get(plugin_name)
        if pos is None:
            return None
        return self._records[pos]

    def _resolve_bundled_root(self) -> Path | None:
        try:
            root = self._bundled_root()
        except Exception as e:
            log.error('Failed to resolve bundled template directory: %s', e, exc_info=True)
            return None
        if root is None or not root.is_dir():
            log.debug('No bundled template directory')
            return None
        return root

    def _scan_root(self, root: Path, kind: str) -> list[TemplateRecord]:
        try:
            found = self._scanner.scan(root)
        except RootResolutionError as e:
            log.error('Failed to read %s template directory %s: %s', kind, root, e, exc_info=True)
            return []
        except Exception as e:
            log.error('Unexpected failure scanning %s template directory %s: %s', kind, root, e, exc_info=True)
            return []
        log.info('Loaded %d template(s) from %s directory %s', len(found), kind, root)
        return found

    def _freeze(self, records: list[TemplateRecord]) -> None:
        self._records = tuple(records)
        positions: dict[str, int] = {}
        for pos, record in enumerate(self._records):
            name = record.plugin_name
            if not name:
                # no canonical name: listed, never looked up
                continue
            # first loaded wins: bundled shadows external
            positions.setdefault(name, pos)
        self._positions = positions
