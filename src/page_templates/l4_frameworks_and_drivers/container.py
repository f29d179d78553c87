"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

import logging
from pathlib import Path

from page_templates.l1_entities.config import AppConfig
from page_templates.l2_use_cases.ports.template_parser import TemplateParser
from page_templates.l2_use_cases.ports.template_sources import BundledRootResolver
from page_templates.l2_use_cases.template_index import TemplateIndex
from page_templates.l2_use_cases.template_query_use_case import GetTemplateListUseCase, GetTemplateUseCase
from page_templates.l3_interface_adapters.gateways.bundled_templates import resolve_bundled_root
from page_templates.l3_interface_adapters.gateways.template_directory_scanner import TemplateDirectoryScanner
from page_templates.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from page_templates.l3_interface_adapters.gateways.yaml_template_parser import YamlTemplateParser
from page_templates.l4_frameworks_and_drivers.infra_config import build_app_config
from page_templates.l4_frameworks_and_drivers.logging_setup import setup_logging

log = logging.getLogger('pgt.container')


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        *,
        bundled_root_resolver: BundledRootResolver | None = None,
        parser: TemplateParser | None = None,
    ) -> None:
        self.config = config
        self.parser: TemplateParser = parser or YamlTemplateParser()
        self.scanner = TemplateDirectoryScanner(self.parser)
        self.index = TemplateIndex(
            scanner=self.scanner,
            bundled_root=bundled_root_resolver or resolve_bundled_root,
            path_source=config.dynamic_config,
        )
        self.get_template_list = GetTemplateListUseCase(self.index)
        self.get_template = GetTemplateUseCase(self.index)


def bootstrap(
    config_path: str | None = None,
    overrides: dict | None = None,
    *,
    bundled_root_resolver: BundledRootResolver | None = None,
) -> DependencyContainer:
    """Service startup: load config, configure logging, load templates once.

    Config errors propagate; template loading failures never do.
    """
    raw = YamlConfigLoader().load_raw(config_path, overrides=overrides)
    config = build_app_config(raw)
    log_file = Path(config.logging.file) if config.logging.file else None
    setup_logging(config.logging.level, log_file)

    container = DependencyContainer(config, bundled_root_resolver=bundled_root_resolver)
    container.index.initialize()
    log.info('Template service started with %d template(s)', len(container.index.list_all()))
    return container
