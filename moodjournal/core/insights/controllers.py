"""AI insight endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from pydantic import ValidationError

from moodjournal.core.errors import AIServiceFailure
from moodjournal.core.insights.ai_service import DEFAULT_WRITING_PROMPT, get_ai_service
from moodjournal.core.insights.schemas import AnalyzeRequest, WeeklyInsights
from moodjournal.domains.journal.services import journal_service
from moodjournal.extensions import limiter

insights_api_bp = Blueprint("insights_api", __name__)

WEEKLY_WINDOW = timedelta(days=7)


def _ai_limit() -> str:
    return current_app.config.get("AI_RATELIMIT", "20/minute")


def _require_service():
    service = get_ai_service()
    if service is None:
        raise AIServiceFailure("insights_disabled")
    return service


def _insufficient_data() -> WeeklyInsights:
    return WeeklyInsights(
        mood_trend="Insufficient data for analysis",
        key_patterns=[],
        recommendations=["Try writing more entries this week to get personalized insights!"],
        wellness_score=50,
    )


@insights_api_bp.post("/analyze")
@jwt_required()
@limiter.limit(_ai_limit)
def analyze():
    payload = request.get_json(silent=True) or {}
    try:
        data = AnalyzeRequest.model_validate(payload)
    except ValidationError:
        return jsonify({"ok": False, "error": "text_too_short"}), 400
    insights = _require_service().generate_insights(data.text)
    return jsonify({"ok": True, "insights": insights.model_dump(by_alias=True)})


@insights_api_bp.get("/weekly-insights")
@jwt_required()
@limiter.limit(_ai_limit)
def weekly_insights():
    user_id = int(get_jwt_identity())
    end = datetime.utcnow()
    entries = journal_service.list_entries_in_range(user_id, end - WEEKLY_WINDOW, end)
    if not entries:
        return jsonify({"ok": True, "insights": _insufficient_data().model_dump(by_alias=True)})
    insights = _require_service().generate_weekly_insights([e.content for e in entries])
    return jsonify({"ok": True, "insights": insights.model_dump(by_alias=True)})


@insights_api_bp.get("/writing-prompt")
@jwt_required()
def writing_prompt():
    service = get_ai_service()
    prompt = service.generate_writing_prompt() if service else DEFAULT_WRITING_PROMPT
    return jsonify({"ok": True, "prompt": prompt})
