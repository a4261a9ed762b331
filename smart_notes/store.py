"""In-memory note collection, most recent first."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Optional

from smart_notes.models import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """Ordered collection of notes. New notes always go to the front."""

    def __init__(self, notes: Iterable[Note] = ()) -> None:
        self._notes: deque[Note] = deque(notes)

    def insert_front(self, note: Note) -> None:
        self._notes.appendleft(note)

    def delete_by_id(self, note_id: str) -> bool:
        """Remove the note with *note_id*. Returns False if it was not stored."""
        for note in self._notes:
            if note.id == note_id:
                self._notes.remove(note)
                return True
        logger.debug("delete_by_id: %s not in store", note_id)
        return False

    def replace_all(self, notes: Iterable[Note]) -> None:
        """Swap in a loaded collection, keeping its order."""
        self._notes = deque(notes)

    def get(self, note_id: str) -> Optional[Note]:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def all(self) -> list[Note]:
        """Snapshot of every note in store order."""
        return list(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))

    def __len__(self) -> int:
        return len(self._notes)
