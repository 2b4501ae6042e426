# tagger_backend/app/services/session/store.py
from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Optional

from tagger_backend.app.config.manifest import MAX_SESSIONS
from tagger_backend.app.observability.log import get_logger
from tagger_backend.app.taxonomy.library_loader import TaxonomyProvider
from tagger_backend.app.utils.req_id import new_session_id
from .controller import TaggerSession

log = get_logger("session_store")

# In-process registry of live sessions (no persistence across restarts).
# Least recently used sessions are evicted once the cap is reached.
_LOCK = threading.Lock()
_SESSIONS: "OrderedDict[str, TaggerSession]" = OrderedDict()

def _evict_over(limit: int) -> None:
    while len(_SESSIONS) > max(1, limit):
        sid, _ = _SESSIONS.popitem(last=False)
        log.info(f"[{sid}] evicted (session cap {limit})")

async def create_session(
    locale: Optional[str] = None,
    provider: Optional[TaxonomyProvider] = None,
    max_sessions: Optional[int] = None,
) -> TaggerSession:
    session = TaggerSession(new_session_id(), locale=locale, provider=provider)
    await session.start()
    with _LOCK:
        _SESSIONS[session.session_id] = session
        _evict_over(MAX_SESSIONS if max_sessions is None else max_sessions)
    return session

def get_session(session_id: str) -> Optional[TaggerSession]:
    with _LOCK:
        session = _SESSIONS.get(session_id)
        if session is not None:
            _SESSIONS.move_to_end(session_id)
        return session

def drop_session(session_id: str) -> bool:
    with _LOCK:
        return _SESSIONS.pop(session_id, None) is not None

def session_count() -> int:
    with _LOCK:
        return len(_SESSIONS)

def clear_sessions() -> None:
    with _LOCK:
        _SESSIONS.clear()
