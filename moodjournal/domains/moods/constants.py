"""Mood scale shared by entries and mood check-ins."""

from __future__ import annotations

from typing import Optional

MOOD_MIN = 1
MOOD_MAX = 5

MOOD_EMOJIS = {
    1: "😢",
    2: "😕",
    3: "😐",
    4: "😊",
    5: "😄",
}

MOOD_LABELS = {
    1: "Very Sad",
    2: "Sad",
    3: "Neutral",
    4: "Happy",
    5: "Very Happy",
}


def emoji_for_mood(mood: Optional[int]) -> Optional[str]:
    if mood is None:
        return None
    return MOOD_EMOJIS.get(mood)


def validate_mood(mood: Optional[int]) -> Optional[int]:
    if mood is None:
        return None
    if isinstance(mood, bool):
        raise ValueError("validation_error")
    try:
        mood_int = int(mood)
    except (TypeError, ValueError):
        raise ValueError("validation_error")
    if mood_int < MOOD_MIN or mood_int > MOOD_MAX:
        raise ValueError("validation_error")
    return mood_int
