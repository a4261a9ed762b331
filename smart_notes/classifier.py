"""Keyword classifier for notes.

Maps free text to a color and up to three topic tags by scanning the
static tables in :mod:`smart_notes.keywords`. Matching is plain substring
containment on lowercased text, first match wins.
"""

from __future__ import annotations

from smart_notes.keywords import (
    COLOR_KEYWORDS,
    DEFAULT_COLOR,
    DEFAULT_TAG,
    MAX_SUGGESTED_TAGS,
    TAG_KEYWORDS,
    Color,
)


def capitalize(word: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    return word[:1].upper() + word[1:]


def suggest_color(text: str) -> Color:
    """Return the color of the first trigger word found in *text*."""
    normalized = text.lower()
    for color, keywords in COLOR_KEYWORDS:
        for keyword in keywords:
            if keyword in normalized:
                return color
    return DEFAULT_COLOR


def suggest_tags(text: str) -> list[str]:
    """Return up to three capitalized tags triggered by *text*.

    Falls back to ``["General"]`` so the result is never empty.
    """
    normalized = text.lower()
    found: list[str] = []
    for keyword in TAG_KEYWORDS:
        if keyword in normalized:
            found.append(capitalize(keyword))
            if len(found) >= MAX_SUGGESTED_TAGS:
                break
    return found or [DEFAULT_TAG]
