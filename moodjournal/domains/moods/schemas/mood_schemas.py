"""Mood check-in request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from moodjournal.domains.moods.constants import MOOD_MAX, MOOD_MIN


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MoodLogCreate(_CamelModel):
    mood: int = Field(ge=MOOD_MIN, le=MOOD_MAX)
    mood_emoji: Optional[str] = Field(default=None, max_length=16)
    entry_id: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    notes: Optional[str] = Field(default=None, max_length=2000)


class MoodLogResponse(_CamelModel):
    id: int
    user_id: int
    entry_id: Optional[int]
    mood: int
    mood_emoji: str
    tags: List[str]
    notes: Optional[str]
    created_at: str
