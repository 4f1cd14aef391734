"""Limit/offset helpers for listing endpoints."""

from __future__ import annotations

from typing import Optional, Tuple

from moodjournal.core.errors import InvalidFilter


def resolve_window(
    limit: Optional[int],
    offset: Optional[int],
    *,
    default_limit: int,
    max_limit: int,
) -> Tuple[int, int]:
    """Return a sanitized ``(limit, offset)`` pair.

    Missing values fall back to defaults, oversized limits are capped and
    negative values are rejected rather than silently corrected.
    """
    if limit is None:
        limit = default_limit
    if offset is None:
        offset = 0
    if limit < 0 or offset < 0:
        raise InvalidFilter("limit and offset must be non-negative")
    return min(limit, max_limit), offset


def parse_int_arg(raw: Optional[str], name: str) -> Optional[int]:
    """Parse an optional integer query-string argument."""
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidFilter(f"{name} must be an integer")
