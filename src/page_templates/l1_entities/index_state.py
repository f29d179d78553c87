"""L1 entity: template index lifecycle state."""

from __future__ import annotations

import enum


class IndexState(enum.Enum):
    UNINITIALIZED = 'uninitialized'
    LOADING = 'loading'
    READY = 'ready'
