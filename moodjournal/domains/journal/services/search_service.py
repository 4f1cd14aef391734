"""Entry search: compose SearchFilters into one user-scoped, ordered result set.

Predicates are AND-combined across categories:

- ``query``: case-insensitive substring of title OR content
- ``mood``: entry mood is a member of the set (null moods never match)
- ``tags``: entry tags intersect the set (OR within the category)
- ``date_from``/``date_to``: inclusive bounds on ``created_at``

A filter object with no field set yields an empty result; callers that want
every entry use ``journal_service.list_entries`` instead.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import List, Optional, Set

from sqlalchemy.orm import Query

from moodjournal.core.errors import InvalidFilter
from moodjournal.core.utils.decorators import translate_store_errors
from moodjournal.domains.journal.models import Entry
from moodjournal.domains.journal.schemas.journal_schemas import SearchFilters
from moodjournal.domains.moods.constants import validate_mood
from moodjournal.extensions import db

LIKE_ESCAPE = "\\"


@translate_store_errors
def search_entries(user_id: int, filters: SearchFilters) -> List[Entry]:
    if filters.is_empty():
        return []
    text = (filters.query or "").strip() or None
    date_from = parse_bound(filters.date_from, end_of_day=False)
    date_to = parse_bound(filters.date_to, end_of_day=True)
    moods = _mood_set(filters.mood)
    tags = _tag_set(filters.tags)
    # Blank values are dropped above; nothing left must not widen to a full listing.
    if not (text or moods or tags or date_from or date_to):
        return []

    query = build_search_query(
        user_id,
        text=text,
        moods=moods,
        date_from=date_from,
        date_to=date_to,
    )
    entries = query.all()
    if tags:
        # JSON array overlap is not portable across backends; filter the narrowed set here.
        entries = [entry for entry in entries if tags.intersection(entry.tags or [])]
    return entries


def build_search_query(
    user_id: int,
    *,
    text: Optional[str] = None,
    moods: Optional[Set[int]] = None,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
) -> Query:
    query = Entry.query.filter(Entry.user_id == user_id)
    if text:
        like = f"%{_escape_like(text)}%"
        query = query.filter(
            db.or_(
                Entry.title.ilike(like, escape=LIKE_ESCAPE),
                Entry.content.ilike(like, escape=LIKE_ESCAPE),
            )
        )
    if moods:
        query = query.filter(Entry.mood.isnot(None), Entry.mood.in_(sorted(moods)))
    if date_from is not None:
        query = query.filter(Entry.created_at >= date_from)
    if date_to is not None:
        query = query.filter(Entry.created_at <= date_to)
    return query.order_by(Entry.created_at.desc(), Entry.id.desc())


def parse_bound(raw: Optional[str], *, end_of_day: bool) -> Optional[datetime]:
    """Parse an ISO-8601 date or datetime into a naive UTC datetime.

    A bare ``YYYY-MM-DD`` covers the whole UTC day: midnight for a lower
    bound, the last microsecond of the day for an upper bound.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        if len(text) == 10:
            day = date.fromisoformat(text)
            return datetime.combine(day, time.max if end_of_day else time.min)
        moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise InvalidFilter(f"invalid date bound: {raw!r}") from exc
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def _mood_set(values: Optional[List[int]]) -> Set[int]:
    moods: Set[int] = set()
    for value in values or []:
        try:
            mood = validate_mood(value)
        except ValueError as exc:
            raise InvalidFilter(f"invalid mood value: {value!r}") from exc
        if mood is None:
            raise InvalidFilter("invalid mood value: None")
        moods.add(mood)
    return moods


def _tag_set(values: Optional[List[str]]) -> Set[str]:
    return {tag.strip() for tag in values or [] if tag and tag.strip()}


def _escape_like(text: str) -> str:
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
