"""Mood domain event catalog."""

from __future__ import annotations

MOODS_MOOD_LOGGED = "moods.mood.logged"

EVENT_CATALOG = {
    MOODS_MOOD_LOGGED: {
        "version": "v1",
        "payload": {
            "mood_log_id": "int",
            "user_id": "int",
            "entry_id": "int?",
            "mood": "int",
            "created_at": "datetime",
        },
    },
}

__all__ = ["EVENT_CATALOG", "MOODS_MOOD_LOGGED"]
