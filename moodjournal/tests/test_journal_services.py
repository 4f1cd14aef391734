"""Tests for journal entry services: CRUD, derived fields, and enrichment."""

from datetime import datetime

import pytest

pytestmark = pytest.mark.integration

from moodjournal.core.errors import AIServiceFailure, InvalidFilter, StoreUnavailable
from moodjournal.core.insights.schemas import EntryInsights, SentimentAnalysis
from moodjournal.domains.journal.models import Entry
from moodjournal.domains.journal.services import journal_service
from moodjournal.domains.moods.models import MoodLog
from moodjournal.domains.moods.services import mood_service
from moodjournal.extensions import db

LONG_CONTENT = (
    "Spent the afternoon hiking with friends and felt calm, grateful and "
    "genuinely rested for the first time in weeks."
)


class FakeInsightService:
    def __init__(self, mood=4, fail=False):
        self.mood = mood
        self.fail = fail
        self.calls = []

    def generate_insights(self, text):
        self.calls.append(text)
        if self.fail:
            raise AIServiceFailure("provider_error: timeout")
        words = len(text.split())
        return EntryInsights(
            sentiment=SentimentAnalysis(
                mood=self.mood, confidence=0.9, emotions=["calm"], topics=["friends"]
            ),
            word_count=words,
            reading_time=1,
            key_themes=["rest"],
            suggestions=["Plan another hike"],
        )


@pytest.fixture
def fake_ai(app):
    service = FakeInsightService()
    app.config["ENABLE_INSIGHTS"] = True
    app.extensions["ai_service"] = service
    return service


class TestCreateEntry:
    def test_create_sets_word_count_and_emoji(self, app):
        entry = journal_service.create_entry(
            1, title="Good day", content="I had a wonderful day", mood=4
        )

        assert entry.id is not None
        assert entry.word_count == 5
        assert entry.mood_emoji == "😊"
        assert entry.tags == []
        assert entry.ai_insights is None

    def test_create_keeps_explicit_emoji_and_cleans_tags(self, app):
        entry = journal_service.create_entry(
            1,
            title="t",
            content="c",
            mood=2,
            mood_emoji="🌧",
            tags=[" Work ", "", "Family"],
        )

        assert entry.mood_emoji == "🌧"
        assert entry.tags == ["Work", "Family"]

    def test_create_without_mood_leaves_mood_empty(self, app):
        entry = journal_service.create_entry(1, title="t", content="no mood today")

        assert entry.mood is None
        assert entry.mood_emoji is None

    def test_attachments_round_trip(self, app):
        attachment = {
            "id": "a1",
            "filename": "a1.png",
            "originalName": "photo.png",
            "mimetype": "image/png",
            "size": 2048,
            "url": "/uploads/a1.png",
        }
        entry = journal_service.create_entry(
            1, title="Photo", content="pic", attachments=[attachment], is_voice_note=True
        )

        stored = db.session.get(Entry, entry.id)
        assert stored.attachments == [attachment]
        assert stored.is_voice_note is True

    @pytest.mark.parametrize(("title", "content"), [("", "body"), ("title", "   ")])
    def test_blank_title_or_content_rejected(self, app, title, content):
        with pytest.raises(ValueError):
            journal_service.create_entry(1, title=title, content=content)
        assert Entry.query.count() == 0

    def test_out_of_range_mood_rejected(self, app):
        with pytest.raises(ValueError):
            journal_service.create_entry(1, title="t", content="c", mood=6)

    def test_mood_creates_linked_mood_log(self, app):
        entry = journal_service.create_entry(1, title="t", content="c", mood=5, tags=["Work"])

        logs = MoodLog.query.filter_by(user_id=1).all()
        assert len(logs) == 1
        assert logs[0].entry_id == entry.id
        assert logs[0].mood == 5
        assert logs[0].tags == ["Work"]

    def test_mood_log_outage_does_not_fail_saved_entry(self, app, monkeypatch):
        def _down(*args, **kwargs):
            raise StoreUnavailable("store_unavailable")

        monkeypatch.setattr(mood_service, "create_mood_log", _down)

        entry = journal_service.create_entry(1, title="t", content="c", mood=4)

        assert db.session.get(Entry, entry.id) is not None
        assert MoodLog.query.count() == 0

    def test_no_mood_no_mood_log(self, app):
        journal_service.create_entry(1, title="t", content="c")

        assert MoodLog.query.count() == 0


class TestInsightEnrichment:
    def test_long_content_gets_insights_and_inferred_mood(self, app, fake_ai):
        entry = journal_service.create_entry(1, title="Hike", content=LONG_CONTENT)

        assert fake_ai.calls == [LONG_CONTENT]
        assert entry.ai_insights["sentiment"]["mood"] == 4
        assert entry.ai_insights["keyThemes"] == ["rest"]
        assert entry.mood == 4
        assert entry.mood_emoji == "😊"

    def test_explicit_mood_is_not_overwritten(self, app, fake_ai):
        entry = journal_service.create_entry(1, title="Hike", content=LONG_CONTENT, mood=2)

        assert entry.mood == 2
        assert entry.ai_insights is not None

    def test_short_content_skips_insights(self, app, fake_ai):
        entry = journal_service.create_entry(1, title="Short", content="Quick note.")

        assert fake_ai.calls == []
        assert entry.ai_insights is None

    def test_provider_failure_still_saves_entry(self, app, fake_ai):
        fake_ai.fail = True

        entry = journal_service.create_entry(1, title="Hike", content=LONG_CONTENT)

        stored = db.session.get(Entry, entry.id)
        assert stored is not None
        assert stored.ai_insights is None
        assert stored.mood is None

    def test_insights_disabled_skips_provider(self, app, fake_ai):
        app.config["ENABLE_INSIGHTS"] = False

        journal_service.create_entry(1, title="Hike", content=LONG_CONTENT)

        assert fake_ai.calls == []


class TestUpdateAndDelete:
    def test_update_recomputes_derived_fields(self, app):
        entry = journal_service.create_entry(1, title="t", content="one two", mood=1)

        updated = journal_service.update_entry(
            1, entry.id, content="one two three four", mood=5
        )

        assert updated.word_count == 4
        assert updated.mood == 5
        assert updated.mood_emoji == "😄"
        assert updated.title == "t"

    def test_update_can_clear_mood(self, app):
        entry = journal_service.create_entry(1, title="t", content="c", mood=3)

        updated = journal_service.update_entry(1, entry.id, mood=None)

        assert updated.mood is None
        assert updated.mood_emoji is None

    def test_update_other_users_entry_returns_none(self, app):
        entry = journal_service.create_entry(1, title="t", content="c")

        assert journal_service.update_entry(2, entry.id, title="hijack") is None
        assert db.session.get(Entry, entry.id).title == "t"

    def test_update_content_regenerates_insights(self, app, fake_ai):
        entry = journal_service.create_entry(1, title="t", content="short")

        journal_service.update_entry(1, entry.id, content=LONG_CONTENT)

        assert fake_ai.calls == [LONG_CONTENT]

    def test_short_content_edit_clears_old_insights(self, app, fake_ai):
        entry = journal_service.create_entry(1, title="Hike", content=LONG_CONTENT)
        assert entry.ai_insights is not None

        updated = journal_service.update_entry(1, entry.id, content="short now")

        assert updated.ai_insights is None
        assert db.session.get(Entry, entry.id).ai_insights is None

    def test_failed_regeneration_clears_old_insights(self, app, fake_ai):
        entry = journal_service.create_entry(1, title="Hike", content=LONG_CONTENT)
        fake_ai.fail = True

        updated = journal_service.update_entry(1, entry.id, content=LONG_CONTENT + " Again.")

        assert updated.ai_insights is None

    def test_title_edit_keeps_insights(self, app, fake_ai):
        entry = journal_service.create_entry(1, title="Hike", content=LONG_CONTENT)

        updated = journal_service.update_entry(1, entry.id, title="Hike day")

        assert updated.ai_insights is not None
        assert fake_ai.calls == [LONG_CONTENT]

    def test_delete_scoped_to_owner(self, app):
        entry = journal_service.create_entry(1, title="t", content="c")

        assert journal_service.delete_entry(2, entry.id) is False
        assert journal_service.delete_entry(1, entry.id) is True
        assert journal_service.get_entry(1, entry.id) is None


class TestListing:
    def test_list_is_newest_first_with_window(self, app, make_entry):
        old = make_entry(1, created_at=datetime(2026, 1, 1))
        mid = make_entry(1, created_at=datetime(2026, 1, 2))
        new = make_entry(1, created_at=datetime(2026, 1, 3))
        make_entry(2, created_at=datetime(2026, 1, 4))

        assert [e.id for e in journal_service.list_entries(1)] == [new.id, mid.id, old.id]
        assert [e.id for e in journal_service.list_entries(1, limit=1, offset=1)] == [mid.id]

    def test_negative_window_rejected(self, app):
        with pytest.raises(InvalidFilter):
            journal_service.list_entries(1, limit=-1)

    def test_month_listing(self, app, make_entry):
        make_entry(1, created_at=datetime(2026, 1, 31, 23, 59))
        feb_first = make_entry(1, created_at=datetime(2026, 2, 1, 0, 0))
        feb_last = make_entry(1, created_at=datetime(2026, 2, 28, 23, 59, 59))
        make_entry(1, created_at=datetime(2026, 3, 1))

        entries = journal_service.list_entries_for_month(1, 2026, 2)

        assert [e.id for e in entries] == [feb_last.id, feb_first.id]

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_out_of_range(self, app, month):
        with pytest.raises(InvalidFilter):
            journal_service.list_entries_for_month(1, 2026, month)
