"""Scratch state for the note currently being composed.

Color and tags are re-suggested from the text on every edit. A manual
color choice sticks until the draft is cleared, even when the text is
blanked out. Manual tag edits only apply to the current suggestion and
are replaced by the next edit.
"""

from __future__ import annotations

import logging

from smart_notes.classifier import capitalize, suggest_color, suggest_tags
from smart_notes.errors import DuplicateTag, EmptyContent, TagLimitExceeded
from smart_notes.keywords import DEFAULT_COLOR, DEFAULT_TAG, MAX_TAGS, UNTITLED, Color
from smart_notes.models import Note

logger = logging.getLogger(__name__)


class DraftState:
    """Mutable draft feeding the classifier and, on commit, the store."""

    def __init__(self) -> None:
        self.title = ""
        self.content = ""
        self.color: Color = DEFAULT_COLOR
        self.tags: list[str] = [DEFAULT_TAG]
        self.color_overridden = False

    def on_text_changed(self, title: str, content: str) -> None:
        """Store the new text and re-derive color and tags from it."""
        self.title = title
        self.content = content
        full_text = f"{title} {content}"

        if not full_text.strip():
            if not self.color_overridden:
                self.color = DEFAULT_COLOR
            self.tags = [DEFAULT_TAG]
            return

        if not self.color_overridden:
            self.color = suggest_color(full_text)
        self.tags = suggest_tags(full_text)

    def set_manual_color(self, color: Color) -> None:
        self.color = Color(color)
        self.color_overridden = True

    def add_manual_tag(self, text: str) -> None:
        """Add a user tag on top of the current suggestion.

        Blank input is ignored. Raises DuplicateTag or TagLimitExceeded
        and leaves the draft untouched when the tag is rejected.
        """
        stripped = text.strip()
        if not stripped:
            return

        tag = capitalize(stripped)
        if tag.lower() in (t.lower() for t in self.tags):
            logger.info("Rejected duplicate tag '%s'", tag)
            raise DuplicateTag(tag)
        if len(self.tags) >= MAX_TAGS:
            logger.info("Rejected tag '%s': draft already has %d tags", tag, MAX_TAGS)
            raise TagLimitExceeded(tag, MAX_TAGS)

        if self.tags == [DEFAULT_TAG]:
            self.tags = [tag]
        else:
            self.tags.append(tag)

    def remove_tag(self, index: int) -> None:
        """Remove the tag at *index*; an emptied list falls back to General."""
        if not 0 <= index < len(self.tags):
            raise IndexError(f"tag index {index} out of range")
        del self.tags[index]
        if not self.tags:
            self.tags = [DEFAULT_TAG]

    def clear(self) -> None:
        self.title = ""
        self.content = ""
        self.color = DEFAULT_COLOR
        self.tags = [DEFAULT_TAG]
        self.color_overridden = False

    def commit(self) -> Note:
        """Materialize the draft into a new Note. The draft is not cleared."""
        content = self.content.strip()
        if not content:
            raise EmptyContent()
        return Note(
            title=self.title.strip() or UNTITLED,
            content=content,
            color=self.color,
            tags=tuple(self.tags),
        )

    def snapshot(self) -> dict:
        """Plain view of what the composer shows."""
        return {
            "title": self.title,
            "content": self.content,
            "color": self.color.value,
            "color_label": self.color.label,
            "tags": list(self.tags),
            "color_overridden": self.color_overridden,
        }
