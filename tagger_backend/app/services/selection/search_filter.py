# tagger_backend/app/services/selection/search_filter.py
from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from pydantic import BaseModel

from tagger_backend.app.config.manifest import FILTER_PALETTE
from tagger_backend.app.observability.log import get_logger
from tagger_backend.app.taxonomy.taxonomy import Taxonomy

# Purpose:
# Turn a search term + taxonomy into renderable sections, one per filter,
# in taxonomy order. Matching is a case-insensitive substring test on the
# tag name; nothing is ranked.

log = get_logger("search_filter")

class TagMatch(BaseModel):
    name: str
    category: str
    filter: str
    path: str
    selected: bool = False

class FilterSection(BaseModel):
    filter: str
    color: str
    tags: List[TagMatch] = []

def color_for_position(index: int, palette: Optional[List[str]] = None) -> str:
    colors = palette or FILTER_PALETTE
    return colors[index % len(colors)]

def matches(search_term: str, name: str) -> bool:
    return (search_term or "").lower() in name.lower()

def filter_tags(
    taxonomy: Taxonomy,
    search_term: str = "",
    selected: Optional[Iterable[Tuple[str, str, str, str]]] = None,
) -> List[FilterSection]:
    """
    Every filter yields a section (possibly empty). Tag names with no record
    are skipped. `selected` holds (name, category, filter, path) keys used to
    flag chips that are already in the selection.
    """
    chosen: Set[Tuple[str, str, str, str]] = set(selected or ())
    sections: List[FilterSection] = []
    for index, (filter_name, tag_names) in enumerate(taxonomy.get_filters().items()):
        section = FilterSection(filter=filter_name, color=color_for_position(index))
        for tag_name in tag_names:
            tag = taxonomy.get_tag(tag_name)
            if tag is None:
                log.debug(f"[{taxonomy.locale}] no record for {tag_name!r} in filter {filter_name!r}; skipped")
                continue
            if not matches(search_term, tag.name):
                continue
            key = (tag.name, tag.category, tag.filter, tag.path)
            section.tags.append(TagMatch(
                name=tag.name,
                category=tag.category,
                filter=tag.filter,
                path=tag.path,
                selected=key in chosen,
            ))
        sections.append(section)
    return sections
