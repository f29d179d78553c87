"""Gateway: YAML template parser — implements TemplateParser port."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, BinaryIO

import yaml
from pydantic import ValidationError

from page_templates.l1_entities.errors import ParseError
from page_templates.l1_entities.template import TemplateRecord

log = logging.getLogger('pgt.parser')

# Document key -> attribute name. Dotted keys address the nested plugin object.
DEFAULT_FIELD_MAPPING: dict[str, str] = {
    'plugin.englishName': 'english_name',
    'groupRule': 'group_rule',
    'keyRule': 'key_rule',
    'elementList': 'element_list',
    'configTemplates': 'config_templates',
}


class YamlTemplateParser:
    """Parses one YAML template document into a TemplateRecord.

    Keys are renamed through a declarative field mapping before validation, so
    template authors can keep the camelCase spelling used by the web console.
    """

    def __init__(self, field_mapping: Mapping[str, str] | None = None) -> None:
        mapping = DEFAULT_FIELD_MAPPING if field_mapping is None else field_mapping
        self._renames = _group_by_parent(mapping)

    def parse(self, stream: BinaryIO) -> TemplateRecord:
        try:
            data = yaml.safe_load(stream)
        except (yaml.YAMLError, OSError, UnicodeDecodeError, RecursionError) as e:
            raise ParseError(f'Malformed template document: {e}') from e
        if data is None:
            raise ParseError('Empty template document')
        if not isinstance(data, dict):
            raise ParseError(f'Template document must be a mapping, got {type(data).__name__}')

        try:
            return TemplateRecord.model_validate(self._rename(data, ''))
        except (ValidationError, RecursionError) as e:
            raise ParseError(f'Template document does not match the template structure: {e}') from e

    def _rename(self, node: dict[Any, Any], parent: str) -> dict[str, Any]:
        renames = self._renames.get(parent, {})
        out: dict[str, Any] = {}
        for raw_key, value in node.items():
            # YAML allows non-string keys (``1: one``); attribute names are strings
            key = str(raw_key)
            path = f'{parent}.{key}' if parent else key
            if path in self._renames and isinstance(value, dict):
                value = self._rename(value, path)
            target = renames.get(key, key)
            if target in out:
                log.debug('Duplicate template field %r (from %r); keeping the later value', target, key)
            out[target] = value
        return out


def _group_by_parent(mapping: Mapping[str, str]) -> dict[str, dict[str, str]]:
    """Split dotted mapping keys into {parent_path: {key: attribute}}."""
    grouped: dict[str, dict[str, str]] = {}
    for source, attr in mapping.items():
        parent, _, key = source.rpartition('.')
        grouped.setdefault(parent, {})[key] = attr
        # ancestors must be present so _rename descends into them
        ancestor = parent.rpartition('.')[0]
        while ancestor:
            grouped.setdefault(ancestor, {})
            ancestor = ancestor.rpartition('.')[0]
    return grouped
