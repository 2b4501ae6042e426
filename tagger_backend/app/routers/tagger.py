# tagger_backend/app/routers/tagger.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import TypeAdapter, ValidationError

from tagger_backend.app.config.manifest import DEFAULT_LOCALE
from tagger_backend.app.services.selection import FilterSection, UnknownTagGroupError
from tagger_backend.app.services.session import (
    CategoryNotSelectedError,
    Intent,
    SessionNotReadyError,
    SessionView,
    TaggerSession,
)
from tagger_backend.app.services.session import store
from tagger_backend.app.taxonomy.library_loader import list_locales
from tagger_backend.app.utils.strings import clean_locale

router = APIRouter(tags=["tagger"])

_INTENT = TypeAdapter(Intent)

def _session_or_404(sid: str) -> TaggerSession:
    session = store.get_session(sid)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="session not found")
    return session

# ---------- Locales ----------
# What it does:
# List locales that have a taxonomy file, flagging the requested one.
@router.get("/locales")
def get_locales(locale: Optional[str] = Query(None)) -> Dict[str, Any]:
    current = clean_locale(locale, DEFAULT_LOCALE)
    return {
        "current": current,
        "locales": [{"locale": loc, "selected": loc == current} for loc in list_locales()],
    }

# ---------- Sessions ----------
# What it does:
# Start a session for ?locale= (default en). A failed taxonomy load still
# returns 201 with state "error" so the client can show its message.
@router.post("/sessions", status_code=status.HTTP_201_CREATED, response_model=SessionView)
async def create_session(locale: Optional[str] = Query(None)) -> SessionView:
    session = await store.create_session(clean_locale(locale, DEFAULT_LOCALE))
    return session.view()

@router.get("/sessions/{sid}", response_model=SessionView)
def get_session(sid: str) -> SessionView:
    return _session_or_404(sid).view()

@router.delete("/sessions/{sid}")
def delete_session(sid: str) -> Dict[str, bool]:
    if not store.drop_session(sid):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="session not found")
    return {"ok": True}

# What it does:
# Filtered sections only; read-only (neither search term nor selection change).
@router.get("/sessions/{sid}/results", response_model=List[FilterSection])
def get_results(sid: str, search: str = "") -> List[FilterSection]:
    session = _session_or_404(sid)
    try:
        return session.search_results(search)
    except SessionNotReadyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

# What it does:
# Route one classified UI intent (toggle_tag / update_search /
# copy_category / set_locale) to the session and return the new view.
@router.post("/sessions/{sid}/events", response_model=SessionView)
async def post_event(sid: str, payload: Dict[str, Any]) -> SessionView:
    session = _session_or_404(sid)
    try:
        intent = _INTENT.validate_python(payload)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors(include_url=False))
    try:
        return await session.dispatch(intent)
    except SessionNotReadyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except UnknownTagGroupError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CategoryNotSelectedError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"nothing selected in category {e.category!r}")
