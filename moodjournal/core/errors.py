"""Error taxonomy shared by every MoodJournal domain."""

from __future__ import annotations


class MoodJournalError(Exception):
    """Base exception for MoodJournal operations."""

    error_code = "unexpected_error"
    status_code = 500


class InvalidFilter(MoodJournalError, ValueError):
    """Raised when search or listing input is malformed (bad dates, negative limits)."""

    error_code = "validation_error"
    status_code = 400


class NotFound(MoodJournalError):
    """Raised when a record does not exist or belongs to another user."""

    error_code = "not_found"
    status_code = 404


class StoreUnavailable(MoodJournalError):
    """Raised when the persistence layer cannot be reached."""

    error_code = "store_unavailable"
    status_code = 503


class AIServiceFailure(MoodJournalError):
    """Raised when the external insight provider fails or times out."""

    error_code = "ai_unavailable"
    status_code = 502
