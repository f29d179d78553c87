"""Use cases: template queries wrapped in the API result envelope."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

from page_templates.l1_entities.template import TemplateRecord
from page_templates.l2_use_cases.template_index import TemplateIndex

T = TypeVar('T')


class ResultCode(enum.Enum):
    SUCCESS = 'success'
    FAIL = 'fail'


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Success/failure envelope handed to the API layer."""

    code: ResultCode
    data: T | None = None

    @property
    def ok(self) -> bool:
        return self.code is ResultCode.SUCCESS


class GetTemplateListUseCase:
    """Returns every loaded template."""

    def __init__(self, index: TemplateIndex) -> None:
        self._index = index

    def execute(self) -> QueryResult[list[TemplateRecord]]:
        return QueryResult(ResultCode.SUCCESS, list(self._index.list_all()))


class GetTemplateUseCase:
    """Finds the template for one plugin by canonical name."""

    def __init__(self, index: TemplateIndex) -> None:
        self._index = index

    def execute(self, plugin_name: str) -> QueryResult[TemplateRecord]:
        record = self._index.lookup(plugin_name)
        if record is None:
            return QueryResult(ResultCode.FAIL)
        return QueryResult(ResultCode.SUCCESS, record)
