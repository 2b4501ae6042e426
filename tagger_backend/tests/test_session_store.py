# tests/test_session_store.py
# Purpose:
# Session registry: creation, lookup, and least-recently-used eviction.
import asyncio

from tagger_backend.app.services.session import store

class StaticProvider:
    def __init__(self, taxonomy):
        self.taxonomy = taxonomy

    async def load(self, locale):
        return self.taxonomy

def _create(taxonomy, cap):
    return asyncio.run(store.create_session("en", provider=StaticProvider(taxonomy), max_sessions=cap))

def test_cap_evicts_oldest_session(taxonomy):
    first = _create(taxonomy, 2)
    second = _create(taxonomy, 2)
    third = _create(taxonomy, 2)
    assert store.session_count() == 2
    assert store.get_session(first.session_id) is None
    assert store.get_session(second.session_id) is second
    assert store.get_session(third.session_id) is third

def test_lookup_refreshes_recency(taxonomy):
    first = _create(taxonomy, 2)
    second = _create(taxonomy, 2)
    assert store.get_session(first.session_id) is first
    _create(taxonomy, 2)
    assert store.get_session(first.session_id) is first
    assert store.get_session(second.session_id) is None

def test_drop_session(taxonomy):
    s = _create(taxonomy, 5)
    assert store.drop_session(s.session_id) is True
    assert store.drop_session(s.session_id) is False
