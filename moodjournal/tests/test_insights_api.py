from datetime import datetime, timedelta

import pytest

pytestmark = pytest.mark.integration

from moodjournal.core.errors import AIServiceFailure
from moodjournal.core.insights.ai_service import DEFAULT_WRITING_PROMPT
from moodjournal.core.insights.schemas import (
    EntryInsights,
    SentimentAnalysis,
    WeeklyInsights,
)


class StubInsights:
    def __init__(self):
        self.weekly_texts = None
        self.fail = False

    def generate_insights(self, text):
        if self.fail:
            raise AIServiceFailure("provider_error: timeout")
        return EntryInsights(
            sentiment=SentimentAnalysis(mood=4, confidence=0.7),
            word_count=len(text.split()),
            reading_time=1,
        )

    def generate_weekly_insights(self, texts):
        self.weekly_texts = texts
        return WeeklyInsights(mood_trend="Steady", wellness_score=72)

    def generate_writing_prompt(self):
        return "Describe a small win."


@pytest.fixture
def stub(app):
    service = StubInsights()
    app.config["ENABLE_INSIGHTS"] = True
    app.extensions["ai_service"] = service
    return service


def test_analyze_returns_insights(client, auth_headers, stub):
    resp = client.post(
        "/api/ai/analyze", json={"text": "Today was long but good."}, headers=auth_headers
    )

    assert resp.status_code == 200
    insights = resp.get_json()["insights"]
    assert insights["sentiment"]["mood"] == 4
    assert insights["wordCount"] == 5
    assert insights["readingTime"] == 1


def test_analyze_rejects_short_text(client, auth_headers, stub):
    resp = client.post("/api/ai/analyze", json={"text": "short"}, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "text_too_short"


def test_analyze_provider_failure_is_502(client, auth_headers, stub):
    stub.fail = True

    resp = client.post(
        "/api/ai/analyze", json={"text": "Today was long but good."}, headers=auth_headers
    )

    assert resp.status_code == 502
    assert resp.get_json()["error"] == "ai_unavailable"


def test_analyze_when_disabled_is_502(client, auth_headers):
    resp = client.post(
        "/api/ai/analyze", json={"text": "Today was long but good."}, headers=auth_headers
    )

    assert resp.status_code == 502


def test_weekly_insights_without_entries_is_neutral(client, auth_headers, stub):
    resp = client.get("/api/ai/weekly-insights", headers=auth_headers)

    insights = resp.get_json()["insights"]
    assert insights["moodTrend"] == "Insufficient data for analysis"
    assert insights["wellnessScore"] == 50
    assert stub.weekly_texts is None


def test_weekly_insights_uses_last_seven_days(client, auth_headers, stub, make_entry):
    now = datetime.utcnow()
    make_entry(1, created_at=now - timedelta(days=1), content="recent")
    make_entry(1, created_at=now - timedelta(days=10), content="old")
    make_entry(2, created_at=now - timedelta(days=1), content="someone else")

    resp = client.get("/api/ai/weekly-insights", headers=auth_headers)

    assert resp.get_json()["insights"]["wellnessScore"] == 72
    assert stub.weekly_texts == ["recent"]


def test_writing_prompt(client, auth_headers, stub):
    resp = client.get("/api/ai/writing-prompt", headers=auth_headers)

    assert resp.get_json() == {"ok": True, "prompt": "Describe a small win."}


def test_writing_prompt_default_when_disabled(client, auth_headers):
    resp = client.get("/api/ai/writing-prompt", headers=auth_headers)

    assert resp.get_json()["prompt"] == DEFAULT_WRITING_PROMPT
