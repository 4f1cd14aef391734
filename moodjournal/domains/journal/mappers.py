"""Journal mappers for DTO responses."""

from __future__ import annotations

from moodjournal.domains.journal.models import Entry
from moodjournal.domains.journal.schemas.journal_schemas import EntryResponse


def map_entry(entry: Entry) -> dict:
    return EntryResponse(
        id=entry.id,
        user_id=entry.user_id,
        title=entry.title,
        content=entry.content,
        mood=entry.mood,
        mood_emoji=entry.mood_emoji,
        tags=list(entry.tags or []),
        attachments=list(entry.attachments or []),
        is_voice_note=bool(entry.is_voice_note),
        word_count=entry.word_count or 0,
        ai_insights=entry.ai_insights,
        created_at=entry.created_at.isoformat() if entry.created_at else "",
        updated_at=entry.updated_at.isoformat() if entry.updated_at else "",
    ).model_dump(by_alias=True)


def render_entries_text(entries) -> str:
    """Plain-text export: title, date, body, separator per entry."""
    blocks = []
    for entry in entries:
        day = entry.created_at.date().isoformat() if entry.created_at else ""
        blocks.append(f"{entry.title}\n{day}\n\n{entry.content}\n\n---\n\n")
    return "".join(blocks)
