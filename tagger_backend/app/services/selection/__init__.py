# tagger_backend/app/services/selection/__init__.py
"""
Selection engine: search filter, selection set, orderer, export grouper.

    from tagger_backend.app.services.selection import (
        filter_tags, SelectionSet, SelectionEntry, order_selection, group_by_category,
    )
"""

from __future__ import annotations

from .search_filter import FilterSection, TagMatch, color_for_position, filter_tags, matches  # noqa: F401
from .selection_set import (  # noqa: F401
    SelectionChanged,
    SelectionEntry,
    SelectionSet,
    UnknownTagGroupError,
)
from .orderer import order_selection, sort_key  # noqa: F401
from .export_grouper import export_strings, group_by_category  # noqa: F401

__all__ = [
    # search
    "FilterSection", "TagMatch", "color_for_position", "filter_tags", "matches",
    # selection
    "SelectionChanged", "SelectionEntry", "SelectionSet", "UnknownTagGroupError",
    # ordering + export
    "order_selection", "sort_key", "export_strings", "group_by_category",
]
