# tagger_backend/app/utils/req_id.py
from __future__ import annotations
from uuid import uuid4

def new_session_id(prefix: str = "sess") -> str:
    return f"{prefix}-{uuid4().hex[:12]}"
