"""Dashboard statistics API."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from moodjournal.domains.dashboard.services.dashboard_service import get_dashboard_stats

dashboard_api_bp = Blueprint("dashboard_api", __name__)


@dashboard_api_bp.get("/stats")
@jwt_required()
def stats():
    user_id = int(get_jwt_identity())
    data = get_dashboard_stats(user_id)
    return jsonify({"ok": True, **data.to_dict()})
