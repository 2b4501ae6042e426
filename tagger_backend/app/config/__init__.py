# tagger_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# Locale/export settings live in manifest.py
from .manifest import (
    DEFAULT_LOCALE,
    EXPORT_DELIMITER,
    FILTER_PALETTE,
    LOAD_FAILURE_MESSAGE,
    LOG_LEVEL,
    available_locales,
    validate_manifest,
)

# Path helpers live in paths.py
from .paths import (
    REPO_ROOT,
    APP_ROOT,
    get_taxonomy_dir,
    resolve_taxonomy_file,
    taxonomy_files,
)

__all__ = [
    # manifest
    "DEFAULT_LOCALE",
    "EXPORT_DELIMITER",
    "FILTER_PALETTE",
    "LOAD_FAILURE_MESSAGE",
    "LOG_LEVEL",
    "available_locales",
    "validate_manifest",
    # paths
    "REPO_ROOT",
    "APP_ROOT",
    "get_taxonomy_dir",
    "resolve_taxonomy_file",
    "taxonomy_files",
]
