"""Template Pydantic models — pure data, no I/O."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PluginIdentity(BaseModel):
    """Identifies the plugin a template renders for; keyed by ``english_name``."""

    model_config = ConfigDict(frozen=True, extra='allow')

    name: str = ''  # display name, may be localized
    english_name: str = ''


class TemplateRecord(BaseModel):
    """One parsed configuration-page template.

    Unknown document keys are kept as extra attributes so rendering metadata
    reaches the API layer unchanged.
    """

    model_config = ConfigDict(frozen=True, extra='allow')

    plugin: PluginIdentity | None = None
    group_rule: list[str] = Field(default_factory=list)
    key_rule: list[str] = Field(default_factory=list)
    element_list: list[dict[Any, Any]] = Field(default_factory=list)
    config_templates: list[dict[Any, Any]] = Field(default_factory=list)

    @property
    def plugin_name(self) -> str | None:
        """Canonical plugin name, or None when the template has no plugin identity."""
        if self.plugin is None:
            return None
        return self.plugin.english_name
