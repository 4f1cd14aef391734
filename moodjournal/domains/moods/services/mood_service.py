"""Mood log store: quick check-ins and entry-linked mood records."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from moodjournal.core.errors import InvalidFilter, NotFound, StoreUnavailable
from moodjournal.core.events import EventRecord, event_bus
from moodjournal.core.utils.decorators import translate_store_errors
from moodjournal.domains.journal.events import JOURNAL_ENTRY_CREATED
from moodjournal.domains.journal.models import Entry
from moodjournal.domains.moods.constants import emoji_for_mood, validate_mood
from moodjournal.domains.moods.events import MOODS_MOOD_LOGGED
from moodjournal.domains.moods.models import MoodLog
from moodjournal.extensions import db

logger = logging.getLogger(__name__)


@translate_store_errors
def create_mood_log(
    user_id: int,
    *,
    mood: int,
    mood_emoji: Optional[str] = None,
    entry_id: Optional[int] = None,
    tags: Optional[List[str]] = None,
    notes: Optional[str] = None,
) -> MoodLog:
    mood_val = validate_mood(mood)
    if mood_val is None:
        raise ValueError("validation_error")
    if entry_id is not None:
        owned = Entry.query.filter_by(id=entry_id, user_id=user_id).first()
        if not owned:
            raise NotFound("entry")
    log = MoodLog(
        user_id=user_id,
        entry_id=entry_id,
        mood=mood_val,
        mood_emoji=(mood_emoji or "").strip() or emoji_for_mood(mood_val),
        tags=[t.strip() for t in (tags or []) if t and t.strip()],
        notes=(notes or "").strip() or None,
    )
    db.session.add(log)
    db.session.commit()
    event_bus.emit(
        MOODS_MOOD_LOGGED,
        {
            "mood_log_id": log.id,
            "user_id": user_id,
            "entry_id": entry_id,
            "mood": log.mood,
            "created_at": log.created_at.isoformat(),
        },
        user_id=user_id,
    )
    return log


@translate_store_errors
def list_mood_logs(user_id: int, limit: int = 30) -> List[MoodLog]:
    if limit < 0:
        raise InvalidFilter("limit must be non-negative")
    return (
        MoodLog.query.filter_by(user_id=user_id)
        .order_by(MoodLog.created_at.desc(), MoodLog.id.desc())
        .limit(limit)
        .all()
    )


@translate_store_errors
def list_mood_logs_in_range(user_id: int, start: datetime, end: datetime) -> List[MoodLog]:
    return (
        MoodLog.query.filter(
            MoodLog.user_id == user_id,
            MoodLog.created_at >= start,
            MoodLog.created_at <= end,
        )
        .order_by(MoodLog.created_at.desc(), MoodLog.id.desc())
        .all()
    )


def on_entry_created(event: EventRecord) -> None:
    """Record a linked check-in when an entry is written with an explicit mood."""
    payload = event.payload or {}
    if payload.get("mood") is None:
        return
    # The entry is already committed; a missing check-in must not fail the save.
    try:
        log = create_mood_log(
            payload["user_id"],
            mood=payload["mood"],
            mood_emoji=payload.get("mood_emoji"),
            entry_id=payload["entry_id"],
            tags=payload.get("tags"),
        )
    except StoreUnavailable:
        logger.error("Linked mood log not recorded for entry %s", payload["entry_id"])
        return
    logger.debug("Linked mood log %s to entry %s", log.id, payload["entry_id"])


def register_subscriptions() -> None:
    event_bus.subscribe(JOURNAL_ENTRY_CREATED, on_entry_created)
