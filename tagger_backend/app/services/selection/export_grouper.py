# tagger_backend/app/services/selection/export_grouper.py
from __future__ import annotations

from typing import Dict, Iterable, List

from tagger_backend.app.config.manifest import EXPORT_DELIMITER
from .selection_set import SelectionEntry

# Purpose:
# Partition an already-ordered selection by category. Category order in the
# result is first-occurrence order; names keep the incoming order.

def group_by_category(ordered: Iterable[SelectionEntry]) -> Dict[str, List[str]]:
    groups: Dict[str, List[str]] = {}
    for entry in ordered:
        groups.setdefault(entry.category, []).append(entry.name)
    return groups

# Copy-ready text per category, for the rendering layer.
def export_strings(groups: Dict[str, List[str]], delimiter: str = EXPORT_DELIMITER) -> Dict[str, str]:
    return {category: delimiter.join(names) for category, names in groups.items()}
