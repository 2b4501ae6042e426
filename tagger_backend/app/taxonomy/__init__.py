# tagger_backend/app/taxonomy/__init__.py
from .models import Tag, TaxonomyDoc, PATH_SEPARATOR
from .taxonomy import Taxonomy
from .library_loader import (
    FileTaxonomyProvider,
    TaxonomyLoadError,
    TaxonomyProvider,
    list_locales,
    load_taxonomy_file,
)

__all__ = [
    "Tag", "TaxonomyDoc", "PATH_SEPARATOR", "Taxonomy",
    "FileTaxonomyProvider", "TaxonomyLoadError", "TaxonomyProvider",
    "list_locales", "load_taxonomy_file",
]
