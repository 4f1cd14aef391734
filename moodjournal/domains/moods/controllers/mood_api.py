"""Mood check-in JSON API."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from pydantic import ValidationError

from moodjournal.core.utils.pagination import parse_int_arg, resolve_window
from moodjournal.domains.moods.mappers import map_mood_log
from moodjournal.domains.moods.schemas.mood_schemas import MoodLogCreate
from moodjournal.domains.moods.services import mood_service

mood_api_bp = Blueprint("mood_api", __name__)


@mood_api_bp.get("")
@jwt_required()
def list_moods():
    user_id = int(get_jwt_identity())
    limit, _ = resolve_window(
        parse_int_arg(request.args.get("limit"), "limit"),
        0,
        default_limit=current_app.config["MOOD_LOG_DEFAULT_LIMIT"],
        max_limit=current_app.config["ENTRY_LIST_MAX_LIMIT"],
    )
    logs = mood_service.list_mood_logs(user_id, limit=limit)
    return jsonify({"ok": True, "items": [map_mood_log(log) for log in logs]})


@mood_api_bp.post("")
@jwt_required()
def create_mood():
    payload = request.get_json(silent=True) or {}
    try:
        data = MoodLogCreate.model_validate(payload)
    except ValidationError as exc:
        return (
            jsonify(
                {
                    "ok": False,
                    "error": "validation_error",
                    "details": exc.errors(include_url=False, include_context=False),
                }
            ),
            400,
        )
    user_id = int(get_jwt_identity())
    try:
        log = mood_service.create_mood_log(
            user_id,
            mood=data.mood,
            mood_emoji=data.mood_emoji,
            entry_id=data.entry_id,
            tags=data.tags,
            notes=data.notes,
        )
    except ValueError:
        return jsonify({"ok": False, "error": "validation_error"}), 400
    return jsonify({"ok": True, "moodLog": map_mood_log(log)}), 201
