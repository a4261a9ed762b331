"""Pydantic models for notes and the current filter view."""

from datetime import UTC, datetime
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from smart_notes.keywords import ALL, DEFAULT_COLOR, DEFAULT_TAG, MAX_TAGS, UNTITLED, Color


class Note(BaseModel):
    """A committed note. Never changed after creation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = Field(default=UNTITLED, min_length=1, description="Note title")
    content: str = Field(..., min_length=1, description="Note content")
    color: Color = Field(default=DEFAULT_COLOR, description="Color category")
    tags: tuple[str, ...] = Field(
        default=(DEFAULT_TAG,),
        min_length=1,
        max_length=MAX_TAGS,
        description="Capitalized topic tags",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Creation timestamp (UTC)",
    )

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be blank")
        return value

    @field_validator("tags")
    @classmethod
    def _tags_distinct(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        seen = {tag.lower() for tag in value}
        if len(seen) != len(value):
            raise ValueError("tags must be distinct")
        return value


# Persisted blob: a JSON list of notes stored under a fixed key
NOTE_LIST = TypeAdapter(list[Note])


class FilterSpec(BaseModel):
    """Current view filters. ``"all"`` disables the color or tag filter."""

    model_config = ConfigDict(validate_assignment=True)

    color_filter: Color | Literal["all"] = ALL
    tag_filter: str = ALL
    search_text: str = ""
