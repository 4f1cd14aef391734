"""MoodJournal application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify

from moodjournal.config import config_by_name
from moodjournal.core.errors import MoodJournalError
from moodjournal.core.events.event_bus import event_bus
from moodjournal.extensions import init_extensions


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the MoodJournal Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(
        __name__,
        instance_path=str(instance_root),
        instance_relative_config=True,
    )
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    _configure_logging(app)

    # Normalize relative sqlite paths to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if db_uri.startswith("sqlite:///") and not db_uri.startswith("sqlite:////"):
        db_path = db_uri.replace("sqlite:///", "", 1)
        abs_path = project_root / db_path
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{abs_path}"

    init_extensions(app)
    _import_models()
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_subscriptions()

    app.extensions["event_bus"] = event_bus

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    return app


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logging.getLogger("moodjournal").setLevel(level)
    app.logger.setLevel(level)


def _import_models() -> None:
    """Make every table known to the metadata (create_all, Alembic autogenerate)."""
    from moodjournal.domains.journal.models import entry  # noqa: F401
    from moodjournal.domains.moods.models import mood_log  # noqa: F401


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from moodjournal.core.insights.controllers import insights_api_bp
    from moodjournal.domains.dashboard.controllers.dashboard_api import dashboard_api_bp
    from moodjournal.domains.journal.controllers.export_api import export_api_bp
    from moodjournal.domains.journal.controllers.journal_api import journal_api_bp
    from moodjournal.domains.moods.controllers.mood_api import mood_api_bp

    app.register_blueprint(dashboard_api_bp, url_prefix="/api/dashboard")
    app.register_blueprint(journal_api_bp, url_prefix="/api/entries")
    app.register_blueprint(export_api_bp, url_prefix="/api/export")
    app.register_blueprint(mood_api_bp, url_prefix="/api/moods")
    app.register_blueprint(insights_api_bp, url_prefix="/api/ai")


def _register_subscriptions() -> None:
    from moodjournal.domains.moods.services import mood_service

    mood_service.register_subscriptions()


def _register_error_handlers(app: Flask) -> None:
    """JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(MoodJournalError)
    def _domain_error(exc: MoodJournalError):
        if exc.status_code >= 500:
            app.logger.warning("%s: %s", type(exc).__name__, exc)
        body = {"ok": False, "error": exc.error_code}
        if exc.status_code == 400 and exc.args:
            body["details"] = str(exc)
        return jsonify(body), exc.status_code

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
