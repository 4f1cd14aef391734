"""Mood mappers for DTO responses."""

from __future__ import annotations

from moodjournal.domains.moods.models import MoodLog
from moodjournal.domains.moods.schemas.mood_schemas import MoodLogResponse


def map_mood_log(log: MoodLog) -> dict:
    return MoodLogResponse(
        id=log.id,
        user_id=log.user_id,
        entry_id=log.entry_id,
        mood=log.mood,
        mood_emoji=log.mood_emoji,
        tags=list(log.tags or []),
        notes=log.notes,
        created_at=log.created_at.isoformat() if log.created_at else "",
    ).model_dump(by_alias=True)
