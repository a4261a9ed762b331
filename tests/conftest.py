"""Shared fixtures for the Smart Notes test-suite."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from smart_notes.keywords import Color
from smart_notes.models import Note

_BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def make_note(
    content: str = "content",
    *,
    title: str = "Title",
    color: Color = Color.GRAY,
    tags: tuple[str, ...] = ("General",),
    minutes: int = 0,
    note_id: str | None = None,
) -> Note:
    """Build a Note with sensible defaults for tests."""
    extra = {"id": note_id} if note_id else {}
    return Note(
        title=title,
        content=content,
        color=color,
        tags=tags,
        created_at=_BASE_TIME + timedelta(minutes=minutes),
        **extra,
    )


@pytest.fixture()
def sample_notes() -> list[Note]:
    """Four notes, most recent first."""
    return [
        make_note("Entregar informe", title="Informe", color=Color.RED, tags=("Trabajo",), minutes=3, note_id="n4"),
        make_note("Idea para la app", title="App", color=Color.BLUE, tags=("Proyecto", "Trabajo"), minutes=2, note_id="n3"),
        make_note("Comprar leche", title="Súper", color=Color.GREEN, tags=("General",), minutes=1, note_id="n2"),
        make_note("Cita médica", title="Doctor", color=Color.RED, tags=("Salud",), minutes=0, note_id="n1"),
    ]
