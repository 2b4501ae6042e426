# tagger_backend/app/services/selection/selection_set.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from tagger_backend.app.taxonomy.models import Tag
from tagger_backend.app.taxonomy.taxonomy import Taxonomy

class UnknownTagGroupError(ValueError):
    """A selection entry names a category or filter the taxonomy does not have."""

@dataclass(frozen=True)
class SelectionEntry:
    # Snapshot of the tag at click time; never a live reference.
    name: str
    category: str
    filter: str
    path: str = ""

    @classmethod
    def from_tag(cls, tag: Tag) -> "SelectionEntry":
        return cls(name=tag.name, category=tag.category, filter=tag.filter, path=tag.path)

    def key(self) -> Tuple[str, str, str, str]:
        return (self.name, self.category, self.filter, self.path)

@dataclass(frozen=True)
class SelectionChanged:
    entry: SelectionEntry
    selected: bool
    size: int

class SelectionSet:
    """
    Chosen tags in activation order. Uniqueness is by the full
    (name, category, filter, path) tuple; toggle flips membership.

    When a taxonomy is attached, new entries must use a category and a
    filter the taxonomy knows about. Removing an entry is always allowed.
    """
    def __init__(self, taxonomy: Optional[Taxonomy] = None):
        self._taxonomy = taxonomy
        self._entries: List[SelectionEntry] = []

    def _validate(self, entry: SelectionEntry) -> None:
        tx = self._taxonomy
        if tx is None:
            return
        if not tx.has_category(entry.category):
            raise UnknownTagGroupError(f"unknown category {entry.category!r}")
        if not tx.has_filter(entry.filter):
            raise UnknownTagGroupError(f"unknown filter {entry.filter!r}")

    def toggle(self, entry: SelectionEntry) -> SelectionChanged:
        try:
            idx = self._entries.index(entry)
        except ValueError:
            self._validate(entry)
            self._entries.append(entry)
            return SelectionChanged(entry=entry, selected=True, size=len(self._entries))
        del self._entries[idx]
        return SelectionChanged(entry=entry, selected=False, size=len(self._entries))

    def contains(self, entry: SelectionEntry) -> bool:
        return entry in self._entries

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> List[SelectionEntry]:
        return list(self._entries)

    def keys(self) -> List[Tuple[str, str, str, str]]:
        return [e.key() for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SelectionEntry]:
        return iter(list(self._entries))

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries
