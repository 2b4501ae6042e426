# tagger_backend/app/services/session/__init__.py
from .controller import (
    STATE_ERROR,
    STATE_LOADING,
    STATE_READY,
    CategoryNotSelectedError,
    SessionNotReadyError,
    SessionView,
    TaggerSession,
)
from .intents import CopyCategory, Intent, SetLocale, ToggleTag, UpdateSearch

__all__ = [
    "STATE_ERROR", "STATE_LOADING", "STATE_READY",
    "CategoryNotSelectedError", "SessionNotReadyError", "SessionView", "TaggerSession",
    "CopyCategory", "Intent", "SetLocale", "ToggleTag", "UpdateSearch",
]
