"""Standalone mood check-in."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from moodjournal.extensions import db


class MoodLog(db.Model):
    __tablename__ = "mood_log"
    __table_args__ = (db.Index("ix_mood_log_user_created_at", "user_id", "created_at"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(db.Integer, index=True, nullable=False)
    entry_id: Mapped[int | None] = mapped_column(db.ForeignKey("entry.id", ondelete="SET NULL"))
    mood: Mapped[int] = mapped_column(db.Integer, nullable=False)
    mood_emoji: Mapped[str] = mapped_column(db.String(16), nullable=False)
    tags: Mapped[list] = mapped_column(db.JSON, nullable=False, default=list)
    notes: Mapped[str | None] = mapped_column(db.Text)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False)
