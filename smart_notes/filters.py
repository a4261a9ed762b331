"""Filtering and tag indexing over note sequences.

Both functions are pure. ``apply_filters`` only ever drops notes, so the
result keeps whatever order the input had.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from smart_notes.keywords import ALL
from smart_notes.metrics import FILTER_EVALUATIONS
from smart_notes.models import FilterSpec, Note


def _matches_search(note: Note, needle: str) -> bool:
    return (
        needle in note.title.lower()
        or needle in note.content.lower()
        or any(needle in tag.lower() for tag in note.tags)
    )


def apply_filters(spec: FilterSpec, notes: Sequence[Note]) -> list[Note]:
    """Return the notes matching color, then tag, then search text."""
    FILTER_EVALUATIONS.inc()
    filtered = list(notes)

    if spec.color_filter != ALL:
        filtered = [n for n in filtered if n.color == spec.color_filter]

    if spec.tag_filter != ALL:
        filtered = [n for n in filtered if spec.tag_filter in n.tags]

    if spec.search_text:
        needle = spec.search_text.lower()
        filtered = [n for n in filtered if _matches_search(n, needle)]

    return filtered


def distinct_tags(notes: Iterable[Note]) -> list[str]:
    """Every tag in use, once each, sorted."""
    return sorted({tag for note in notes for tag in note.tags})
