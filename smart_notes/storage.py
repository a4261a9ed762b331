"""JSON file-based storage layer for notes.

The whole collection is written as one JSON document holding the note list
under a fixed key. Loading fails open: anything missing or malformed means
"no notes yet".
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from smart_notes.errors import PersistenceFailure
from smart_notes.metrics import PERSISTENCE_FAILURES
from smart_notes.models import NOTE_LIST, Note

logger = logging.getLogger("smart_notes.storage")

DEFAULT_STORAGE_KEY = "smartNotes"


class NotePersistence(Protocol):
    """What the engine needs from a storage backend."""

    def load(self) -> list[Note]: ...

    def save(self, notes: Sequence[Note]) -> None: ...


class JsonNoteStorage:
    """Manages note persistence using a local JSON file."""

    def __init__(self, storage_path: Path, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._path = Path(storage_path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Note]:
        """Read notes from disk. Returns an empty list on any failure."""
        if not self._path.exists():
            logger.info("No storage file found at %s — starting fresh", self._path)
            return []
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
            notes = NOTE_LIST.validate_python(raw.get(self._key, []))
        except (OSError, json.JSONDecodeError, ValidationError, ValueError) as exc:
            PERSISTENCE_FAILURES.labels(operation="load").inc()
            logger.error("Failed to load notes: %s — starting fresh", exc)
            return []
        logger.info("Loaded %d notes from %s", len(notes), self._path)
        return notes

    def save(self, notes: Sequence[Note]) -> None:
        """Write the full collection. Raises PersistenceFailure on error."""
        payload = {self._key: NOTE_LIST.dump_python(list(notes), mode="json")}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            PERSISTENCE_FAILURES.labels(operation="save").inc()
            logger.error("Failed to save %d notes to %s: %s", len(notes), self._path, exc)
            raise PersistenceFailure("save", str(exc)) from exc
        logger.debug("Saved %d notes to %s", len(notes), self._path)
