"""Journal export downloads."""

from __future__ import annotations

from datetime import datetime

from flask import Blueprint, Response, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from moodjournal.domains.journal.mappers import map_entry, render_entries_text
from moodjournal.domains.journal.services import journal_service

export_api_bp = Blueprint("export_api", __name__)

EXPORT_FORMATS = ("json", "txt")


@export_api_bp.get("/<fmt>")
@jwt_required()
def export_entries(fmt: str):
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        return jsonify({"ok": False, "error": "unsupported_format"}), 400
    user_id = int(get_jwt_identity())
    entries = journal_service.list_all_entries(user_id)
    stamp = datetime.utcnow().strftime("%Y%m%d%H%M%S")
    disposition = f'attachment; filename="diary-entries-{stamp}.{fmt}"'
    if fmt == "json":
        response = jsonify([map_entry(e) for e in entries])
    else:
        response = Response(render_entries_text(entries), mimetype="text/plain")
    response.headers["Content-Disposition"] = disposition
    return response
