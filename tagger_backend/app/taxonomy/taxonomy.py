# tagger_backend/app/taxonomy/taxonomy.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from tagger_backend.app.observability.log import get_logger
from .models import Tag, TaxonomyDoc

log = get_logger("taxonomy")

class Taxonomy:
    """
    Read-only snapshot of the tag catalog for one locale.

    - filters: filter name -> ordered tag names (key order is display order)
    - categories: category name -> metadata (key order is sort order)
    - get_tag(name): Tag or None when the name has no record
    """
    def __init__(
        self,
        locale: str,
        filters: Dict[str, List[str]],
        categories: Dict[str, Dict[str, Any]],
        tags: Iterable[Tag],
    ):
        self.locale = locale
        self._filters: Dict[str, List[str]] = {k: list(v or []) for k, v in filters.items()}
        self._categories: Dict[str, Dict[str, Any]] = {k: dict(v or {}) for k, v in categories.items()}
        self._tags: Dict[str, Tag] = {}
        for tag in tags:
            if tag.name in self._tags:
                log.warning(f"[{locale}] duplicate tag name {tag.name!r}; keeping first record")
                continue
            self._tags[tag.name] = tag
        # Precompute positions for the orderer.
        self._filter_pos = {name: i for i, name in enumerate(self._filters)}
        self._category_pos = {name: i for i, name in enumerate(self._categories)}

    @classmethod
    def from_doc(cls, locale: str, doc: TaxonomyDoc) -> "Taxonomy":
        return cls(locale, doc.filters, doc.categories, doc.tags)

    # ---- lookups ----
    def get_tag(self, name: str) -> Optional[Tag]:
        return self._tags.get(name)

    def get_filters(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self._filters.items()}

    def get_categories(self) -> Dict[str, Dict[str, Any]]:
        return {k: dict(v) for k, v in self._categories.items()}

    # ---- positions (None when absent) ----
    def filter_position(self, name: str) -> Optional[int]:
        return self._filter_pos.get(name)

    def category_position(self, name: str) -> Optional[int]:
        return self._category_pos.get(name)

    @property
    def filter_count(self) -> int:
        return len(self._filter_pos)

    @property
    def category_count(self) -> int:
        return len(self._category_pos)

    def has_filter(self, name: str) -> bool:
        return name in self._filter_pos

    def has_category(self, name: str) -> bool:
        return name in self._category_pos

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return (
            f"Taxonomy(locale={self.locale!r}, filters={len(self._filters)}, "
            f"categories={len(self._categories)}, tags={len(self._tags)})"
        )
