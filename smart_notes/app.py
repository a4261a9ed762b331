"""Application context tying the notes engine together.

One ``NotesApp`` is built per process. It owns the note store, the draft
being composed, the current filters and the persistence backend, and is
the only thing a presentation layer needs to talk to.
"""

from __future__ import annotations

import logging
from typing import Optional

from smart_notes.config import Settings
from smart_notes.debounce import DEFAULT_DELAY, Debouncer
from smart_notes.draft import DraftState
from smart_notes.errors import PersistenceFailure
from smart_notes.filters import apply_filters, distinct_tags
from smart_notes.keywords import ALL, Color
from smart_notes.metrics import (
    NOTES_COMMITTED,
    NOTES_DELETED,
    PERSISTENCE_FAILURES,
    STORED_NOTES,
)
from smart_notes.models import FilterSpec, Note
from smart_notes.storage import JsonNoteStorage, NotePersistence
from smart_notes.store import NoteStore

logger = logging.getLogger(__name__)


class NotesApp:
    """Owns all mutable state of the notes engine."""

    def __init__(
        self,
        persistence: NotePersistence,
        search_delay: float = DEFAULT_DELAY,
    ) -> None:
        self._persistence = persistence
        self.store = NoteStore()
        self.draft = DraftState()
        self.filters = FilterSpec()
        self._search_debouncer = Debouncer(search_delay)

    @classmethod
    def from_settings(cls, settings: Settings) -> NotesApp:
        storage = JsonNoteStorage(settings.storage_path, key=settings.storage_key)
        return cls(storage, search_delay=settings.search_debounce_seconds)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> int:
        """Replace the store with whatever the backend holds.

        A backend that raises is treated as holding no notes.
        """
        try:
            notes = self._persistence.load()
        except Exception:
            PERSISTENCE_FAILURES.labels(operation="load").inc()
            logger.exception("Loading notes failed — starting with an empty collection")
            notes = []
        self.store.replace_all(notes)
        STORED_NOTES.set(len(self.store))
        return len(self.store)

    def _persist(self) -> None:
        # PersistenceFailure propagates; the in-memory change stays applied
        self._persistence.save(self.store.all())

    # ------------------------------------------------------------------
    # Draft
    # ------------------------------------------------------------------

    def update_draft(self, title: str, content: str) -> DraftState:
        self.draft.on_text_changed(title, content)
        return self.draft

    def set_draft_color(self, color: Color | str) -> DraftState:
        self.draft.set_manual_color(Color(color))
        return self.draft

    def add_draft_tag(self, text: str) -> DraftState:
        self.draft.add_manual_tag(text)
        return self.draft

    def remove_draft_tag(self, index: int) -> DraftState:
        self.draft.remove_tag(index)
        return self.draft

    def clear_draft(self) -> DraftState:
        self.draft.clear()
        return self.draft

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    def save_note(self) -> Note:
        """Commit the draft, store it first, clear the draft and persist.

        Raises EmptyContent (nothing changes) or PersistenceFailure (the note
        is already stored in memory and the draft is already cleared).
        """
        note = self.draft.commit()
        self.store.insert_front(note)
        NOTES_COMMITTED.labels(color=note.color.value).inc()
        STORED_NOTES.set(len(self.store))
        logger.info("Saved note %s — '%s' [%s]", note.id, note.title, note.color.value)
        self.draft.clear()
        try:
            self._persist()
        except PersistenceFailure as exc:
            exc.note = note
            raise
        return note

    def delete_note(self, note_id: str) -> bool:
        """Delete a note by id. Unknown ids are ignored and nothing is saved."""
        if not self.store.delete_by_id(note_id):
            return False
        NOTES_DELETED.inc()
        STORED_NOTES.set(len(self.store))
        logger.info("Deleted note %s", note_id)
        self._persist()
        return True

    def get_note(self, note_id: str) -> Optional[Note]:
        return self.store.get(note_id)

    # ------------------------------------------------------------------
    # Filters and queries
    # ------------------------------------------------------------------

    def set_color_filter(self, color: Color | str) -> None:
        self.filters.color_filter = ALL if color == ALL else Color(color)

    def set_tag_filter(self, tag: str) -> None:
        self.filters.tag_filter = tag

    def set_search_filter(self, text: str) -> None:
        self.filters.search_text = text

    def schedule_search(self, text: str) -> None:
        """Debounced search update; only the last text in a burst applies."""
        self._search_debouncer.schedule(self.set_search_filter, text)

    @property
    def search_pending(self) -> bool:
        return self._search_debouncer.pending

    def visible_notes(self) -> list[Note]:
        return apply_filters(self.filters, self.store.all())

    def available_tags(self) -> list[str]:
        return distinct_tags(self.store)
