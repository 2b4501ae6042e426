# tagger_backend/app/config/manifest.py
from __future__ import annotations

import os
from typing import Dict, List

from .paths import get_taxonomy_dir, taxonomy_files

# ---- Locale + export settings ----
DEFAULT_LOCALE: str = os.getenv("TAGGER_DEFAULT_LOCALE", "en").strip() or "en"
EXPORT_DELIMITER: str = os.getenv("TAGGER_EXPORT_DELIMITER", ", ")
LOG_LEVEL: str = os.getenv("TAGGER_LOG_LEVEL", "INFO").upper()
MAX_SESSIONS: int = int(os.getenv("TAGGER_MAX_SESSIONS", "500"))

# Chip colours per filter section, cycled by filter position.
FILTER_PALETTE: List[str] = ["fc5c65", "fd9644", "fed330", "26de81", "2bcbba", "45aaf2"]

LOAD_FAILURE_MESSAGE = "Could not retrieve tags."


def available_locales() -> List[str]:
    return [p.stem for p in taxonomy_files()]

def validate_manifest() -> Dict[str, object]:
    locales = available_locales()
    status = "ok" if DEFAULT_LOCALE in locales else "missing_default"
    return {
        "status": status,
        "taxonomy_dir": str(get_taxonomy_dir()),
        "default_locale": DEFAULT_LOCALE,
        "locales": locales,
    }

__all__ = [
    "DEFAULT_LOCALE", "EXPORT_DELIMITER", "LOG_LEVEL", "MAX_SESSIONS", "FILTER_PALETTE",
    "LOAD_FAILURE_MESSAGE",
    "available_locales", "validate_manifest",
]
