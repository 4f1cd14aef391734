"""Personal journal entry."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from moodjournal.extensions import db


class Entry(db.Model):
    __tablename__ = "entry"
    __table_args__ = (
        db.Index("ix_entry_user_created_at", "user_id", "created_at"),
        db.Index("ix_entry_user_mood", "user_id", "mood"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(db.Integer, index=True, nullable=False)
    title: Mapped[str] = mapped_column(db.String(255), nullable=False)
    content: Mapped[str] = mapped_column(db.Text, nullable=False)
    mood: Mapped[int | None] = mapped_column(db.Integer)
    mood_emoji: Mapped[str | None] = mapped_column(db.String(16))
    tags: Mapped[list] = mapped_column(db.JSON, nullable=False, default=list)
    attachments: Mapped[list] = mapped_column(db.JSON, nullable=False, default=list)
    is_voice_note: Mapped[bool] = mapped_column(default=False, nullable=False)
    word_count: Mapped[int] = mapped_column(default=0, nullable=False)
    ai_insights: Mapped[dict | None] = mapped_column(db.JSON)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
