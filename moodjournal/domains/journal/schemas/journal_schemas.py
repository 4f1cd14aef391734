"""Journal request/response schemas."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from moodjournal.domains.moods.constants import MOOD_MAX, MOOD_MIN


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped


class Attachment(_CamelModel):
    id: str
    filename: str
    original_name: str
    mimetype: str
    size: int = Field(ge=0)
    url: str


class EntryCreate(_CamelModel):
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    mood: Optional[int] = Field(default=None, ge=MOOD_MIN, le=MOOD_MAX)
    mood_emoji: Optional[str] = Field(default=None, max_length=16)
    tags: List[str] = Field(default_factory=list)
    attachments: List[Attachment] = Field(default_factory=list)
    is_voice_note: bool = False

    @field_validator("title", "content")
    @classmethod
    def strip_text(cls, value: Optional[str]) -> Optional[str]:
        return _not_blank(value)


class EntryUpdate(_CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = Field(default=None, min_length=1)
    mood: Optional[int] = Field(default=None, ge=MOOD_MIN, le=MOOD_MAX)
    mood_emoji: Optional[str] = Field(default=None, max_length=16)
    tags: Optional[List[str]] = None
    attachments: Optional[List[Attachment]] = None
    is_voice_note: Optional[bool] = None

    @field_validator("title", "content")
    @classmethod
    def strip_text(cls, value: Optional[str]) -> Optional[str]:
        return _not_blank(value)


class SearchFilters(_CamelModel):
    """Transient search criteria; every field is optional."""

    query: Optional[str] = None
    mood: Optional[List[int]] = None
    tags: Optional[List[str]] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    def is_empty(self) -> bool:
        return not (
            (self.query or "").strip()
            or self.mood
            or any((tag or "").strip() for tag in self.tags or [])
            or (self.date_from or "").strip()
            or (self.date_to or "").strip()
        )


class EntryResponse(_CamelModel):
    id: int
    user_id: int
    title: str
    content: str
    mood: Optional[int]
    mood_emoji: Optional[str]
    tags: List[str]
    attachments: List[Dict[str, Any]]
    is_voice_note: bool
    word_count: int
    ai_insights: Optional[Dict[str, Any]]
    created_at: str
    updated_at: str
