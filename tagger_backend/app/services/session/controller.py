# tagger_backend/app/services/session/controller.py
from __future__ import annotations

from typing import Dict, List, Optional, Set

from pydantic import BaseModel

from tagger_backend.app.config.manifest import (
    DEFAULT_LOCALE,
    EXPORT_DELIMITER,
    LOAD_FAILURE_MESSAGE,
)
from tagger_backend.app.observability.log import get_logger
from tagger_backend.app.services.selection import (
    FilterSection,
    SelectionEntry,
    SelectionSet,
    UnknownTagGroupError,
    export_strings,
    filter_tags,
    group_by_category,
    order_selection,
)
from tagger_backend.app.taxonomy.library_loader import (
    FileTaxonomyProvider,
    TaxonomyLoadError,
    TaxonomyProvider,
)
from tagger_backend.app.taxonomy.taxonomy import Taxonomy
from .intents import CopyCategory, Intent, SetLocale, ToggleTag, UpdateSearch

log = get_logger("session")

STATE_LOADING = "loading"
STATE_READY = "ready"
STATE_ERROR = "error"

class SessionNotReadyError(RuntimeError):
    """An intent arrived before the taxonomy finished loading (or after it failed)."""

class CategoryNotSelectedError(LookupError):
    """Copy was requested for a category with no selected tags."""
    def __init__(self, category: str):
        super().__init__(category)
        self.category = category

class SelectedTagView(BaseModel):
    name: str
    category: str
    filter: str
    path: str

class SessionView(BaseModel):
    session_id: str
    state: str
    locale: str
    search_term: str
    search_enabled: bool
    message: Optional[str] = None
    results: List[FilterSection] = []
    selection: List[SelectedTagView] = []
    selection_visible: bool = False
    export_groups: Dict[str, List[str]] = {}
    exports: Dict[str, str] = {}
    copied: List[str] = []
    copy_text: Optional[str] = None

class TaggerSession:
    """
    Owns everything one browsing session needs: the loaded taxonomy, the
    running selection, the current search term and which categories have
    already been copied. All mutations go through dispatch().
    """
    def __init__(
        self,
        session_id: str,
        locale: Optional[str] = None,
        provider: Optional[TaxonomyProvider] = None,
        delimiter: str = EXPORT_DELIMITER,
    ):
        self.session_id = session_id
        self.locale = (locale or DEFAULT_LOCALE).strip() or DEFAULT_LOCALE
        self.provider: TaxonomyProvider = provider or FileTaxonomyProvider()
        self.delimiter = delimiter
        self.state = STATE_LOADING
        self.taxonomy: Optional[Taxonomy] = None
        self.selection = SelectionSet()
        self.search_term = ""
        self.copied: Set[str] = set()
        self.error: Optional[str] = None

    # -------- lifecycle --------
    async def start(self) -> SessionView:
        """Load the taxonomy once; a failure is terminal for this session."""
        self.state = STATE_LOADING
        try:
            taxonomy = await self.provider.load(self.locale)
        except TaxonomyLoadError as e:
            self.taxonomy = None
            self.state = STATE_ERROR
            self.error = e.reason
            log.warning(f"[{self.session_id}] load failed for {self.locale}: {e.reason}")
            return self.view()
        self.taxonomy = taxonomy
        self.selection = SelectionSet(taxonomy)
        self.search_term = ""
        self.copied.clear()
        self.error = None
        self.state = STATE_READY
        log.info(f"[{self.session_id}] ready ({self.locale}, {len(taxonomy)} tags)")
        return self.view()

    @property
    def ready(self) -> bool:
        return self.state == STATE_READY and self.taxonomy is not None

    def _require_ready(self) -> Taxonomy:
        if not self.ready:
            raise SessionNotReadyError(f"session {self.session_id} is {self.state}")
        return self.taxonomy  # type: ignore[return-value]

    # -------- intent dispatch --------
    async def dispatch(self, intent: Intent) -> SessionView:
        if isinstance(intent, SetLocale):
            return await self.set_locale(intent.locale)
        if isinstance(intent, ToggleTag):
            self.toggle(intent)
            return self.view()
        if isinstance(intent, UpdateSearch):
            self.update_search(intent.term)
            return self.view()
        if isinstance(intent, CopyCategory):
            text = self.copy_category(intent.category)
            view = self.view()
            view.copy_text = text
            return view
        raise TypeError(f"unsupported intent {type(intent).__name__}")

    async def set_locale(self, locale: str) -> SessionView:
        # A new locale is a fresh page: selection and search start over.
        self.locale = locale
        self.selection = SelectionSet()
        self.search_term = ""
        self.copied.clear()
        return await self.start()

    def toggle(self, intent: ToggleTag):
        taxonomy = self._require_ready()
        entry = SelectionEntry(
            name=intent.name,
            category=intent.category,
            filter=intent.filter,
            path=intent.path,
        )
        # New entries must match a taxonomy record exactly; removal is always allowed.
        if not self.selection.contains(entry):
            tag = taxonomy.get_tag(entry.name)
            if tag is None:
                raise UnknownTagGroupError(f"unknown tag {entry.name!r}")
            if SelectionEntry.from_tag(tag) != entry:
                raise UnknownTagGroupError(f"tag {entry.name!r} does not match its taxonomy record")
        changed = self.selection.toggle(entry)
        # Copy buttons are rebuilt whenever the selection changes.
        self.copied.clear()
        log.debug(f"[{self.session_id}] toggled {entry.key()} -> {changed.selected}")
        return changed

    def update_search(self, term: str) -> List[FilterSection]:
        self._require_ready()
        self.search_term = term or ""
        return self.search_results(self.search_term)

    def search_results(self, term: str) -> List[FilterSection]:
        """Filtered sections for `term` without storing it on the session."""
        taxonomy = self._require_ready()
        return filter_tags(taxonomy, term or "", self.selection.keys())

    def copy_category(self, category: str) -> str:
        exports = self.exports()
        if category not in exports:
            raise CategoryNotSelectedError(category)
        self.copied.add(category)
        return exports[category]

    # -------- derived data --------
    def ordered_selection(self) -> List[SelectionEntry]:
        taxonomy = self._require_ready()
        return order_selection(self.selection.entries, taxonomy)

    def export_groups(self) -> Dict[str, List[str]]:
        return group_by_category(self.ordered_selection())

    def exports(self) -> Dict[str, str]:
        return export_strings(self.export_groups(), self.delimiter)

    def view(self) -> SessionView:
        if not self.ready:
            return SessionView(
                session_id=self.session_id,
                state=self.state,
                locale=self.locale,
                search_term=self.search_term,
                search_enabled=False,
                message=LOAD_FAILURE_MESSAGE if self.state == STATE_ERROR else None,
            )
        taxonomy = self.taxonomy
        ordered = order_selection(self.selection.entries, taxonomy)
        groups = group_by_category(ordered)
        return SessionView(
            session_id=self.session_id,
            state=self.state,
            locale=self.locale,
            search_term=self.search_term,
            search_enabled=True,
            results=filter_tags(taxonomy, self.search_term, self.selection.keys()),
            selection=[
                SelectedTagView(name=e.name, category=e.category, filter=e.filter, path=e.path)
                for e in ordered
            ],
            selection_visible=bool(ordered),
            export_groups=groups,
            exports=export_strings(groups, self.delimiter),
            copied=[c for c in groups if c in self.copied],
        )
