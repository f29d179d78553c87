"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DynamicConfig(BaseModel):
    template_path: str = ''  # external template directory; empty = skip

    def get_template_path(self) -> str:
        return self.template_path


class LoggingConfig(BaseModel):
    level: str = 'INFO'
    file: str | None = None


class AppConfig(BaseModel):
    dynamic_config: DynamicConfig = Field(default_factory=DynamicConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
