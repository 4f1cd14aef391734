"""Journal services: entry store CRUD with event emission and AI enrichment."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Iterable, List, Optional

from flask import current_app

from moodjournal.core.errors import AIServiceFailure, InvalidFilter
from moodjournal.core.events import event_bus
from moodjournal.core.insights.ai_service import count_words, get_ai_service
from moodjournal.core.utils.decorators import translate_store_errors
from moodjournal.domains.journal.events import (
    JOURNAL_ENTRY_CREATED,
    JOURNAL_ENTRY_DELETED,
    JOURNAL_ENTRY_UPDATED,
)
from moodjournal.domains.journal.models import Entry
from moodjournal.domains.moods.constants import emoji_for_mood, validate_mood
from moodjournal.extensions import db

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title",
    "content",
    "mood",
    "mood_emoji",
    "tags",
    "attachments",
    "is_voice_note",
)


@translate_store_errors
def create_entry(
    user_id: int,
    *,
    title: str,
    content: str,
    mood: Optional[int] = None,
    mood_emoji: Optional[str] = None,
    tags: Optional[List[str]] = None,
    attachments: Optional[List[dict]] = None,
    is_voice_note: bool = False,
    with_insights: bool = True,
) -> Entry:
    title_text = _require_text(title)
    content_text = _require_text(content)
    mood_val = validate_mood(mood)
    entry = Entry(
        user_id=user_id,
        title=title_text,
        content=content_text,
        mood=mood_val,
        mood_emoji=(mood_emoji or "").strip() or emoji_for_mood(mood_val),
        tags=_normalize_tags(tags),
        attachments=list(attachments or []),
        is_voice_note=bool(is_voice_note),
        word_count=count_words(content_text),
    )
    db.session.add(entry)
    db.session.commit()
    event_bus.emit(
        JOURNAL_ENTRY_CREATED,
        {
            "entry_id": entry.id,
            "user_id": user_id,
            "mood": entry.mood,
            "mood_emoji": entry.mood_emoji,
            "tags": list(entry.tags or []),
            "created_at": entry.created_at.isoformat(),
        },
        user_id=user_id,
    )
    if with_insights:
        _attach_insights(entry)
    return entry


@translate_store_errors
def update_entry(user_id: int, entry_id: int, **fields: Any) -> Optional[Entry]:
    entry = Entry.query.filter_by(id=entry_id, user_id=user_id).first()
    if not entry:
        return None
    with_insights = fields.pop("with_insights", True)
    changed = []
    for key in UPDATABLE_FIELDS:
        if key not in fields:
            continue
        val = fields[key]
        if key in ("title", "content"):
            val = _require_text(val)
        elif key == "mood":
            val = validate_mood(val)
        elif key == "mood_emoji":
            val = (val or "").strip() or None
        elif key == "tags":
            val = _normalize_tags(val)
        elif key == "attachments":
            val = list(val or [])
        elif key == "is_voice_note":
            val = bool(val)
        setattr(entry, key, val)
        changed.append(key)

    if "content" in changed:
        entry.word_count = count_words(entry.content)
        # Insights describe the old text; regenerated below when possible.
        entry.ai_insights = None
    if "mood" in changed and "mood_emoji" not in changed:
        entry.mood_emoji = emoji_for_mood(entry.mood)
    db.session.commit()
    event_bus.emit(
        JOURNAL_ENTRY_UPDATED,
        {
            "entry_id": entry.id,
            "user_id": user_id,
            "fields": changed,
            "updated_at": entry.updated_at.isoformat(),
        },
        user_id=user_id,
    )
    if with_insights and "content" in changed:
        _attach_insights(entry)
    return entry


@translate_store_errors
def delete_entry(user_id: int, entry_id: int) -> bool:
    entry = Entry.query.filter_by(id=entry_id, user_id=user_id).first()
    if not entry:
        return False
    db.session.delete(entry)
    db.session.commit()
    event_bus.emit(
        JOURNAL_ENTRY_DELETED,
        {"entry_id": entry_id, "user_id": user_id},
        user_id=user_id,
    )
    return True


@translate_store_errors
def get_entry(user_id: int, entry_id: int) -> Optional[Entry]:
    return Entry.query.filter_by(id=entry_id, user_id=user_id).first()


@translate_store_errors
def list_entries(user_id: int, limit: int = 50, offset: int = 0) -> List[Entry]:
    if limit < 0 or offset < 0:
        raise InvalidFilter("limit and offset must be non-negative")
    return (
        Entry.query.filter_by(user_id=user_id)
        .order_by(Entry.created_at.desc(), Entry.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


@translate_store_errors
def list_all_entries(user_id: int) -> List[Entry]:
    return (
        Entry.query.filter_by(user_id=user_id)
        .order_by(Entry.created_at.desc(), Entry.id.desc())
        .all()
    )


@translate_store_errors
def list_entries_in_range(user_id: int, start: datetime, end: datetime) -> List[Entry]:
    """Entries created within ``[start, end]`` (both inclusive), newest first."""
    return (
        Entry.query.filter(
            Entry.user_id == user_id,
            Entry.created_at >= start,
            Entry.created_at <= end,
        )
        .order_by(Entry.created_at.desc(), Entry.id.desc())
        .all()
    )


def list_entries_for_month(user_id: int, year: int, month: int) -> List[Entry]:
    if not 1 <= month <= 12:
        raise InvalidFilter("month must be between 1 and 12")
    if not 1 <= year <= 9998:
        raise InvalidFilter("year out of range")
    start = datetime(year, month, 1)
    next_month = datetime(year + 1, 1, 1) if month == 12 else datetime(year, month + 1, 1)
    return list_entries_in_range(user_id, start, next_month - timedelta(microseconds=1))


def _attach_insights(entry: Entry) -> Entry:
    """Best-effort enrichment; the entry is already committed when this runs."""
    service = get_ai_service()
    if service is None:
        return entry
    if len(entry.content) <= current_app.config.get("AI_MIN_CONTENT_LENGTH", 50):
        return entry
    try:
        insights = service.generate_insights(entry.content)
    except AIServiceFailure as exc:
        logger.warning("AI insights unavailable for entry %s: %s", entry.id, exc)
        return entry
    entry.ai_insights = insights.model_dump(by_alias=True)
    if entry.mood is None:
        entry.mood = insights.sentiment.mood
        entry.mood_emoji = emoji_for_mood(entry.mood)
    db.session.commit()
    return entry


def _require_text(value: Optional[str]) -> str:
    text = (value or "").strip()
    if not text:
        raise ValueError("validation_error")
    return text


def _normalize_tags(tags: Optional[Iterable[str]]) -> List[str]:
    return [tag.strip() for tag in (tags or []) if tag and tag.strip()]
