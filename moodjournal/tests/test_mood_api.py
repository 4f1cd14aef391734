import pytest

pytestmark = pytest.mark.integration

from moodjournal.domains.moods.services import mood_service


def test_log_mood_check_in(client, auth_headers):
    resp = client.post(
        "/api/moods",
        json={"mood": 3, "tags": ["Work"], "notes": "  meh afternoon  "},
        headers=auth_headers,
    )

    assert resp.status_code == 201
    log = resp.get_json()["moodLog"]
    assert log["mood"] == 3
    assert log["moodEmoji"] == "😐"
    assert log["entryId"] is None
    assert log["notes"] == "meh afternoon"


@pytest.mark.parametrize("payload", [{}, {"mood": 0}, {"mood": 6}, {"mood": "sad"}])
def test_mood_validation(client, auth_headers, payload):
    resp = client.post("/api/moods", json=payload, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_link_to_foreign_entry_is_not_found(client, auth_headers, headers_for):
    entry_id = client.post(
        "/api/entries", json={"title": "t", "content": "c"}, headers=auth_headers
    ).get_json()["entry"]["id"]

    resp = client.post(
        "/api/moods", json={"mood": 4, "entryId": entry_id}, headers=headers_for(2)
    )

    assert resp.status_code == 404


def test_list_moods_newest_first_with_limit(client, auth_headers):
    for mood in (1, 2, 3):
        client.post("/api/moods", json={"mood": mood}, headers=auth_headers)

    resp = client.get("/api/moods?limit=2", headers=auth_headers)

    items = resp.get_json()["items"]
    assert [item["mood"] for item in items] == [3, 2]


def test_entry_with_mood_appears_in_mood_history(client, auth_headers):
    entry_id = client.post(
        "/api/entries",
        json={"title": "t", "content": "c", "mood": 5},
        headers=auth_headers,
    ).get_json()["entry"]["id"]

    items = client.get("/api/moods", headers=auth_headers).get_json()["items"]

    assert len(items) == 1
    assert items[0]["entryId"] == entry_id


def test_list_mood_logs_service_rejects_negative_limit(app):
    from moodjournal.core.errors import InvalidFilter

    with pytest.raises(InvalidFilter):
        mood_service.list_mood_logs(1, limit=-1)


def test_list_mood_logs_in_range(app):
    from datetime import datetime, timedelta

    from moodjournal.domains.moods.models import MoodLog
    from moodjournal.extensions import db

    base = datetime(2026, 6, 10, 12, 0)
    for days, mood in ((0, 4), (3, 2), (9, 5)):
        db.session.add(
            MoodLog(user_id=1, mood=mood, mood_emoji="x", tags=[], created_at=base - timedelta(days=days))
        )
    db.session.add(MoodLog(user_id=2, mood=1, mood_emoji="x", tags=[], created_at=base))
    db.session.commit()

    logs = mood_service.list_mood_logs_in_range(1, base - timedelta(days=7), base)

    assert [log.mood for log in logs] == [4, 2]
