"""Logging setup for the ``pgt`` logger namespace."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'
_HANDLER_MARK = '_pgt_handler'


def setup_logging(level: str = 'INFO', log_file: Path | None = None) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the ``pgt`` logger.

    Safe to call more than once: handlers installed by a previous call are replaced.
    """
    root = logging.getLogger('pgt')
    for handler in [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]:
        root.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_MARK, True)
        root.addHandler(handler)

    root.setLevel(level.upper())
    root.debug('Logging configured (level=%s, file=%s)', level, log_file)
    return root
