"""Dashboard statistics assembled from one entry snapshot per call."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Tuple

from flask import current_app

from moodjournal.core.utils.decorators import translate_store_errors
from moodjournal.domains.dashboard.services.streaks import (
    DEFAULT_HORIZON_DAYS,
    calculate_streak,
)
from moodjournal.domains.dashboard.services.wellness import (
    average_mood,
    round_half_up,
    wellness_score,
)
from moodjournal.domains.journal.models import Entry
from moodjournal.extensions import db

Snapshot = List[Tuple[datetime, Optional[int]]]


@dataclass(frozen=True)
class DashboardStats:
    streak: int
    total_entries: int
    average_mood: float
    wellness_score: int

    def to_dict(self) -> dict:
        return {
            "streak": self.streak,
            "totalEntries": self.total_entries,
            "averageMood": self.average_mood,
            "wellnessScore": self.wellness_score,
        }


@translate_store_errors
def fetch_snapshot(user_id: int) -> Snapshot:
    """Every (created_at, mood) pair for the user in a single SELECT."""
    rows = db.session.execute(
        db.select(Entry.created_at, Entry.mood).where(Entry.user_id == user_id)
    ).all()
    return [(row.created_at, row.mood) for row in rows]


def compute_stats(snapshot: Snapshot, today: date, horizon_days: int = DEFAULT_HORIZON_DAYS) -> DashboardStats:
    mean = average_mood(mood for _, mood in snapshot)
    return DashboardStats(
        streak=calculate_streak(today, (created.date() for created, _ in snapshot), horizon_days),
        total_entries=len(snapshot),
        average_mood=round_half_up(mean, 1),
        wellness_score=wellness_score(mean),
    )


def get_dashboard_stats(user_id: int, today: Optional[date] = None) -> DashboardStats:
    snapshot = fetch_snapshot(user_id)
    horizon = int(current_app.config.get("STREAK_HORIZON_DAYS", DEFAULT_HORIZON_DAYS))
    return compute_stats(snapshot, today or datetime.utcnow().date(), horizon)
