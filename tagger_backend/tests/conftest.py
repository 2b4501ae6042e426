from __future__ import annotations
import os
import textwrap
import pytest
from fastapi.testclient import TestClient

from tagger_backend.app.taxonomy.models import Tag
from tagger_backend.app.taxonomy.taxonomy import Taxonomy

SAMPLE_EN = textwrap.dedent("""
locale: en
categories:
  Industry: {label: Industry}
  Product: {label: Product}
  Language: {label: Language}
filters:
  Industries: [Retail, Healthcare, Ghost Tag]
  Products: [Cloud, Storage, Product, product, prod uct]
  Languages: [EN, DE]
tags:
  - {name: Retail, category: Industry, filter: Industries, level1: Retail, level2: null}
  - {name: Healthcare, category: Industry, filter: Industries, level1: Healthcare, level2: null}
  - {name: Cloud, category: Product, filter: Products, level1: Cloud, level2: null}
  - {name: Storage, category: Product, filter: Products, level1: Cloud, level2: Storage}
  - {name: Product, category: Product, filter: Products, level1: Product, level2: null}
  - {name: product, category: Product, filter: Products, level1: product, level2: null}
  - {name: prod uct, category: Product, filter: Products, level1: prod uct, level2: null}
  - {name: EN, category: Language, filter: Languages, level1: EN, level2: null}
  - {name: DE, category: Language, filter: Languages, level1: DE, level2: null}
""").strip()

SAMPLE_FR = textwrap.dedent("""
locale: fr
categories:
  Secteur: {}
filters:
  Secteurs: [Commerce]
tags:
  - {name: Commerce, category: Secteur, filter: Secteurs}
""").strip()

# --- Taxonomy dir override (session-wide, read lazily by the loader) ---------
@pytest.fixture(scope="session", autouse=True)
def tmp_taxonomy_dir(tmp_path_factory):
    tmp = tmp_path_factory.mktemp("taxonomy")
    (tmp / "en.yaml").write_text(SAMPLE_EN, encoding="utf-8")
    (tmp / "fr.yaml").write_text(SAMPLE_FR, encoding="utf-8")
    (tmp / "xx.yaml").write_text("categories: [not, a, mapping", encoding="utf-8")
    os.environ["TAXONOMY_DIR"] = str(tmp)
    return tmp

@pytest.fixture(scope="session")
def client(tmp_taxonomy_dir):
    from tagger_backend.app.main import app
    return TestClient(app)

@pytest.fixture(autouse=True)
def reset_sessions():
    from tagger_backend.app.services.session import store
    store.clear_sessions()
    yield
    store.clear_sessions()

# --- In-memory taxonomy for engine tests --------------------------------------
def _tag(name, category, filter, level1=None, level2=None):
    return Tag(name=name, category=category, filter=filter, level1=level1, level2=level2)

@pytest.fixture
def taxonomy():
    tags = [
        _tag("Retail", "Industry", "Industries", "Retail"),
        _tag("Healthcare", "Industry", "Industries", "Healthcare"),
        _tag("Cloud", "Product", "Products", "Cloud"),
        _tag("Storage", "Product", "Products", "Cloud", "Storage"),
        _tag("Backup", "Product", "Products", "Cloud", "Backup"),
        _tag("EN", "Language", "Languages", "EN"),
    ]
    return Taxonomy(
        "en",
        filters={
            "Industries": ["Retail", "Healthcare", "Missing"],
            "Products": ["Cloud", "Storage", "Backup"],
            "Languages": ["EN"],
        },
        categories={"Industry": {}, "Product": {}, "Language": {}},
        tags=tags,
    )
