"""Gateway: YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import yaml

from page_templates.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads the raw service configuration from YAML, with merge and override support.

    Validation against defaults happens in ``build_app_config`` so callers can
    pick sections out of the raw dict first.
    """

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        data = _read_config(config_path)
        if overrides:
            deep_merge(data, overrides)
        return data


def _read_config(config_path: str | None) -> dict:
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        return _read_mapping(path)
    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.exists():
            return _read_mapping(default_path)
    return {}


def _read_mapping(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file must contain a mapping: {path}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
