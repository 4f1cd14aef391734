"""Journal JSON API."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from pydantic import ValidationError

from moodjournal.core.errors import NotFound
from moodjournal.core.utils.pagination import parse_int_arg, resolve_window
from moodjournal.domains.journal.mappers import map_entry
from moodjournal.domains.journal.schemas.journal_schemas import (
    EntryCreate,
    EntryUpdate,
    SearchFilters,
)
from moodjournal.domains.journal.services import journal_service, search_service

journal_api_bp = Blueprint("journal_api", __name__)


def _validation_error(exc: ValidationError):
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


@journal_api_bp.get("")
@jwt_required()
def list_entries():
    user_id = int(get_jwt_identity())
    limit, offset = resolve_window(
        parse_int_arg(request.args.get("limit"), "limit"),
        parse_int_arg(request.args.get("offset"), "offset"),
        default_limit=current_app.config["ENTRY_LIST_DEFAULT_LIMIT"],
        max_limit=current_app.config["ENTRY_LIST_MAX_LIMIT"],
    )
    entries = journal_service.list_entries(user_id, limit=limit, offset=offset)
    return jsonify(
        {
            "ok": True,
            "items": [map_entry(e) for e in entries],
            "limit": limit,
            "offset": offset,
        }
    )


@journal_api_bp.get("/<int:entry_id>")
@jwt_required()
def get_entry(entry_id: int):
    user_id = int(get_jwt_identity())
    entry = journal_service.get_entry(user_id, entry_id)
    if not entry:
        raise NotFound("entry")
    return jsonify({"ok": True, "entry": map_entry(entry)})


@journal_api_bp.post("")
@jwt_required()
def create_entry():
    payload = request.get_json(silent=True) or {}
    try:
        data = EntryCreate.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    user_id = int(get_jwt_identity())
    try:
        entry = journal_service.create_entry(
            user_id,
            title=data.title,
            content=data.content,
            mood=data.mood,
            mood_emoji=data.mood_emoji,
            tags=data.tags,
            attachments=[a.model_dump(by_alias=True) for a in data.attachments],
            is_voice_note=data.is_voice_note,
        )
    except ValueError:
        return jsonify({"ok": False, "error": "validation_error"}), 400
    return jsonify({"ok": True, "entry": map_entry(entry)}), 201


@journal_api_bp.route("/<int:entry_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_entry(entry_id: int):
    payload = request.get_json(silent=True) or {}
    try:
        data = EntryUpdate.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    fields = data.model_dump(exclude_unset=True)
    if "attachments" in fields:
        fields["attachments"] = [a.model_dump(by_alias=True) for a in data.attachments or []]
    user_id = int(get_jwt_identity())
    try:
        entry = journal_service.update_entry(user_id, entry_id, **fields)
    except ValueError:
        return jsonify({"ok": False, "error": "validation_error"}), 400
    if not entry:
        raise NotFound("entry")
    return jsonify({"ok": True, "entry": map_entry(entry)})


@journal_api_bp.delete("/<int:entry_id>")
@jwt_required()
def delete_entry(entry_id: int):
    user_id = int(get_jwt_identity())
    if not journal_service.delete_entry(user_id, entry_id):
        raise NotFound("entry")
    return jsonify({"ok": True})


@journal_api_bp.post("/search")
@jwt_required()
def search_entries():
    payload = request.get_json(silent=True) or {}
    try:
        filters = SearchFilters.model_validate(payload)
    except ValidationError as exc:
        return _validation_error(exc)
    user_id = int(get_jwt_identity())
    entries = search_service.search_entries(user_id, filters)
    return jsonify({"ok": True, "items": [map_entry(e) for e in entries], "total": len(entries)})


@journal_api_bp.get("/calendar/<int:year>/<int:month>")
@jwt_required()
def calendar_entries(year: int, month: int):
    user_id = int(get_jwt_identity())
    entries = journal_service.list_entries_for_month(user_id, year, month)
    return jsonify({"ok": True, "year": year, "month": month, "items": [map_entry(e) for e in entries]})
