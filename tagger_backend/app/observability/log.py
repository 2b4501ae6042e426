# tagger_backend/app/observability/log.py
from __future__ import annotations

import logging

from tagger_backend.app.config.manifest import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def get_logger(name: str) -> logging.Logger:
    """
    Named logger under the 'tagger' namespace with one stream handler.
    Safe to call repeatedly (handlers are only attached once).
    """
    log = logging.getLogger(f"tagger.{name}")
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
        log.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return log
