"""AI insight provider adapter and endpoints."""

from moodjournal.core.insights.ai_service import (
    DEFAULT_WRITING_PROMPT,
    AIInsightService,
    get_ai_service,
)

__all__ = ["AIInsightService", "DEFAULT_WRITING_PROMPT", "get_ai_service"]
