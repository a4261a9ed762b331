"""Error types raised by the notes engine.

Every error is local and recoverable: callers show the message to the user
and carry on with the in-memory state they already have.
"""

from __future__ import annotations


class NotesError(Exception):
    """Base class for all notes engine errors."""


class EmptyContent(NotesError):
    """A draft was committed without content."""

    def __init__(self) -> None:
        super().__init__("Por favor, escribe algo en tu nota antes de guardar.")


class TagRejected(NotesError):
    """A manual tag could not be added to the draft."""

    def __init__(self, tag: str, message: str) -> None:
        super().__init__(message)
        self.tag = tag


class DuplicateTag(TagRejected):
    def __init__(self, tag: str) -> None:
        super().__init__(tag, "Esta etiqueta ya está agregada.")


class TagLimitExceeded(TagRejected):
    def __init__(self, tag: str, limit: int) -> None:
        super().__init__(tag, f"Máximo {limit} etiquetas por nota.")
        self.limit = limit


class PersistenceFailure(NotesError):
    """Saving notes failed. In-memory state is kept as is."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"No se pudo guardar la nota ({operation}): {reason}")
        self.operation = operation
        # set when the failed save followed a commit that is already in memory
        self.note = None
