"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from page_templates.l1_entities.errors import RootResolutionError
from page_templates.l1_entities.template import PluginIdentity, TemplateRecord

TEMPLATE_YAML = """\
plugin:
  name: "{display}"
  englishName: "{name}"
groupRule:
  - app=${{application}}&environment=${{environment}}
keyRule:
  - sermant.{name}.globalConfig
elementList:
  - name: application
    required: true
configTemplates:
  - key: sermant.{name}.globalConfig
    value: "enabled: false"
"""

MALFORMED_YAML = 'plugin: [unclosed\n  englishName: broken\n'


def write_template(directory: Path, filename: str, name: str, display: str = '') -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(TEMPLATE_YAML.format(name=name, display=display or name), encoding='utf-8')
    return path


def write_malformed(directory: Path, filename: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(MALFORMED_YAML, encoding='utf-8')
    return path


def make_record(name: str | None, **extra) -> TemplateRecord:
    plugin = PluginIdentity(english_name=name) if name is not None else None
    return TemplateRecord(plugin=plugin, **extra)


# --- Protocol-conforming Fakes ---


class FakeScanner:
    """Fake TemplateScanner: returns canned records per root, records every scan."""

    def __init__(self, by_root: dict[Path, list[TemplateRecord]] | None = None) -> None:
        self._by_root = dict(by_root or {})
        self._failing: set[Path] = set()
        self._crashing: set[Path] = set()
        self.scanned: list[Path] = []

    def scan(self, root: Path) -> list[TemplateRecord]:
        self.scanned.append(root)
        if root in self._failing:
            raise RootResolutionError(f'Cannot list template directory {root}', root)
        if root in self._crashing:
            raise RuntimeError(f'scanner blew up on {root}')
        return list(self._by_root.get(root, []))

    def fail_on(self, root: Path) -> None:
        self._failing.add(root)

    def crash_on(self, root: Path) -> None:
        self._crashing.add(root)


class FakePathSource:
    """Fake TemplatePathSource that counts how often it is consulted."""

    def __init__(self, template_path: str = '') -> None:
        self._template_path = template_path
        self.calls = 0

    def get_template_path(self) -> str:
        self.calls += 1
        return self._template_path


# --- Standard Fixtures ---


@pytest.fixture(autouse=True)
def _restore_pgt_logger():
    logger = logging.getLogger('pgt')
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def bundled_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'bundled'
    d.mkdir()
    return d


@pytest.fixture
def external_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'external'
    d.mkdir()
    return d


@pytest.fixture
def sample_config_yaml(tmp_path: Path, external_dir: Path) -> Path:
    p = tmp_path / 'config.yaml'
    p.write_text(
        f'dynamic_config:\n  template_path: "{external_dir}"\nlogging:\n  level: "DEBUG"\n',
        encoding='utf-8',
    )
    return p
