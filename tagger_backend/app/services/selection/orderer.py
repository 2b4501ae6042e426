# tagger_backend/app/services/selection/orderer.py
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from tagger_backend.app.taxonomy.taxonomy import Taxonomy
from .selection_set import SelectionEntry

# Purpose:
# Canonical display/export order for a selection:
#   category position -> filter position -> path -> name.
# Python's sort is stable, so full ties keep their input order.

def _position(pos: Optional[int], unknown: int) -> int:
    # Values the taxonomy does not list sort after every known one.
    return unknown if pos is None else pos

def sort_key(entry: SelectionEntry, taxonomy: Taxonomy) -> Tuple[int, int, str, str]:
    return (
        _position(taxonomy.category_position(entry.category), taxonomy.category_count),
        _position(taxonomy.filter_position(entry.filter), taxonomy.filter_count),
        entry.path,
        entry.name,
    )

def order_selection(entries: Iterable[SelectionEntry], taxonomy: Taxonomy) -> List[SelectionEntry]:
    return sorted(entries, key=lambda e: sort_key(e, taxonomy))
