# tagger_backend/app/taxonomy/models.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Purpose:
# Typed records for one locale's tag catalog:
# - Tag: a selectable item (name/category/filter + optional two-level hierarchy)
# - TaxonomyDoc: the raw file shape validated before a Taxonomy is built.

PATH_SEPARATOR = "/"

class Tag(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    category: str
    filter: str
    level1: Optional[str] = None
    level2: Optional[str] = None

    @property
    def path(self) -> str:
        # Sub-tags show their parent as a prefix.
        if self.level2 is not None:
            return f"{self.level1}{PATH_SEPARATOR}"
        return ""

class TaxonomyDoc(BaseModel):
    # Purpose: the on-disk shape; mapping order is preserved by YAML + dict.
    locale: Optional[str] = None
    categories: Dict[str, Dict[str, Any]] = {}
    filters: Dict[str, List[str]] = {}
    tags: List[Tag] = []
