"""Mood averaging and wellness score.

The wellness score is mood-only: ``round(average_mood * 20)`` clamped to
[0, 100], where the average covers every non-null mood in the snapshot.
No recorded mood means an average of 0 and a score of 0.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

WELLNESS_MIN = 0
WELLNESS_MAX = 100
MOOD_TO_SCORE = 20


def round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def average_mood(moods: Iterable[Optional[int]]) -> float:
    values = [m for m in moods if m is not None]
    if not values:
        return 0.0
    return sum(values) / len(values)


def wellness_score(mean_mood: float) -> int:
    score = int(round_half_up(mean_mood * MOOD_TO_SCORE))
    return max(WELLNESS_MIN, min(WELLNESS_MAX, score))
