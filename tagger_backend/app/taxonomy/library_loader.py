# tagger_backend/app/taxonomy/library_loader.py
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, List, Protocol

import yaml
from pydantic import ValidationError

from tagger_backend.app.config.manifest import available_locales
from tagger_backend.app.config.paths import resolve_taxonomy_file
from tagger_backend.app.observability.log import get_logger
from .models import TaxonomyDoc
from .taxonomy import Taxonomy

log = get_logger("library_loader")

class TaxonomyLoadError(RuntimeError):
    """The taxonomy for a locale could not be retrieved or parsed."""
    def __init__(self, locale: str, reason: str):
        super().__init__(f"taxonomy for locale {locale!r} unavailable: {reason}")
        self.locale = locale
        self.reason = reason

class TaxonomyProvider(Protocol):
    async def load(self, locale: str) -> Taxonomy: ...

# -----------------------------------------------------------------------------
# Internal IO helpers
# -----------------------------------------------------------------------------
def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")

def _load_yaml_from(path: Path) -> Any:
    try:
        return yaml.safe_load(_read_text(path))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

# -----------------------------------------------------------------------------
# Public loader API
# -----------------------------------------------------------------------------
def load_taxonomy_file(path: Path, locale: str) -> Taxonomy:
    """
    Parse one taxonomy file of the shape:
    categories:
      Industry: {label: Industry}
    filters:
      Industries: [Retail, Healthcare]
    tags:
      - {name: Retail, category: Industry, filter: Industries, level1: Industry, level2: null}
    Raises TaxonomyLoadError on any read/parse/shape problem.
    """
    if not path.exists():
        raise TaxonomyLoadError(locale, f"file not found: {path}")
    try:
        raw = _load_yaml_from(path)
    except (OSError, ValueError) as e:
        raise TaxonomyLoadError(locale, str(e)) from e
    if not isinstance(raw, dict):
        raise TaxonomyLoadError(locale, f"expected a mapping at top level of {path}")
    try:
        doc = TaxonomyDoc.model_validate(raw)
    except ValidationError as e:
        raise TaxonomyLoadError(locale, f"invalid taxonomy shape: {e.error_count()} error(s)") from e
    taxonomy = Taxonomy.from_doc(locale, doc)
    log.info(f"[taxonomy] loaded {locale} from {path} ({len(taxonomy)} tags)")
    return taxonomy

def list_locales() -> List[str]:
    return available_locales()

class FileTaxonomyProvider:
    """Default provider: reads <TAXONOMY_DIR>/<locale>.yaml off the event loop."""

    async def load(self, locale: str) -> Taxonomy:
        path = resolve_taxonomy_file(locale)
        try:
            return await asyncio.to_thread(load_taxonomy_file, path, locale)
        except TaxonomyLoadError as e:
            log.warning(f"[taxonomy] {e}")
            raise
