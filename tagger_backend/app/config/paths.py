# tagger_backend/app/config/paths.py
from __future__ import annotations

"""
Central path resolution for the tagger backend.

Env overrides:
    TAXONOMY_DIR

Defaults:
    <repo_root>/tagger_backend/app/taxonomy/data

Exports:
    - constants: REPO_ROOT, APP_ROOT, TAXONOMY_DIR
    - getters: get_taxonomy_dir()
    - resolvers: resolve_taxonomy_file()
"""

import os
from pathlib import Path

# ──────────────────────────────────────────────────────────────────────────────
_THIS_FILE = Path(__file__).resolve()

def _resolve_repo_root() -> Path:
    p = _THIS_FILE
    for _ in range(6):
        if (p.parent / "tagger_backend" / "app").exists():
            return p.parent
        p = p.parent
    return _THIS_FILE.parents[3]

REPO_ROOT: Path = _resolve_repo_root()
APP_ROOT: Path = REPO_ROOT / "tagger_backend" / "app"

_TAXONOMY_SUFFIXES = (".yaml", ".yml")

def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

_default_taxonomy = APP_ROOT / "taxonomy" / "data"


def get_taxonomy_dir() -> Path:
    """Read TAXONOMY_DIR on every call so tests can point it at a tmp tree."""
    return (_env_path("TAXONOMY_DIR") or _default_taxonomy).resolve()

TAXONOMY_DIR: Path = get_taxonomy_dir()

# ── Resolvers
def resolve_taxonomy_file(locale: str) -> Path:
    """
    Return the taxonomy file for a locale (first existing suffix wins).
    Falls back to '<locale>.yaml' so callers get a stable path to report.
    """
    base = get_taxonomy_dir()
    for suffix in _TAXONOMY_SUFFIXES:
        candidate = base / f"{locale}{suffix}"
        if candidate.exists():
            return candidate
    return base / f"{locale}{_TAXONOMY_SUFFIXES[0]}"

def taxonomy_files() -> list[Path]:
    base = get_taxonomy_dir()
    if not base.exists():
        return []
    return sorted(p for p in base.iterdir() if p.suffix in _TAXONOMY_SUFFIXES)

__all__ = [
    # constants
    "REPO_ROOT", "APP_ROOT", "TAXONOMY_DIR",
    # getters
    "get_taxonomy_dir",
    # resolvers
    "resolve_taxonomy_file", "taxonomy_files",
]
