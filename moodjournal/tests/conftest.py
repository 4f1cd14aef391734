import sys
from datetime import datetime
from pathlib import Path

import pytest
from flask_jwt_extended import create_access_token

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from moodjournal import create_app
from moodjournal.domains.journal.models import Entry
from moodjournal.extensions import db


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")
    config.addinivalue_line("markers", "slow: Slow running tests")
    config.addinivalue_line("markers", "smoke: Quick smoke tests for CI")


@pytest.fixture()
def app():
    """Per-test app bound to a fresh in-memory database."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    try:
        yield app
    finally:
        app.extensions.pop("ai_service", None)
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


def _auth_headers(user_id: int) -> dict[str, str]:
    token = create_access_token(identity=str(user_id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_headers(app):
    """Bearer headers for user 1."""
    return _auth_headers(1)


@pytest.fixture()
def headers_for(app):
    """Factory for bearer headers of any user id."""
    return _auth_headers


def _add_entry(
    user_id: int,
    *,
    created_at: datetime,
    mood: int | None = None,
    title: str = "Entry",
    content: str = "Some words",
    tags: list[str] | None = None,
) -> Entry:
    """Insert an entry with a fixed timestamp, bypassing the service layer."""
    entry = Entry(
        user_id=user_id,
        title=title,
        content=content,
        mood=mood,
        tags=list(tags or []),
        attachments=[],
        word_count=len(content.split()),
        created_at=created_at,
        updated_at=created_at,
    )
    db.session.add(entry)
    db.session.commit()
    return entry


@pytest.fixture()
def make_entry(app):
    return _add_entry
