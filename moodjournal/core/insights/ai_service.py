"""AI insight provider backed by the OpenAI chat completions API.

All calls use JSON mode and are bounded by the configured timeout; an
operation that needs two calls shares one deadline between them. Retries
are disabled: a failed call is reported once as ``AIServiceFailure`` and the
caller decides on a neutral fallback.
"""

from __future__ import annotations

import json
import logging
import math
import time
from typing import Any, Dict, List, Optional

import openai
from flask import current_app

from moodjournal.core.errors import AIServiceFailure
from moodjournal.core.insights.schemas import (
    EntryInsights,
    SentimentAnalysis,
    WeeklyInsights,
)

logger = logging.getLogger(__name__)

DEFAULT_WRITING_PROMPT = (
    "What are three things you're grateful for today, and why do they matter to you?"
)
WORDS_PER_MINUTE = 200

SENTIMENT_SYSTEM_PROMPT = """You are an expert emotional intelligence analyst. Analyze the sentiment and emotional content of diary entries.
Provide a mood rating from 1-5 (1=very negative, 5=very positive), confidence score 0-1,
list of emotions detected, and key topics/themes.
Respond with JSON in this exact format: {
  "mood": number,
  "confidence": number,
  "emotions": ["emotion1", "emotion2"],
  "topics": ["topic1", "topic2"]
}"""

INSIGHTS_SYSTEM_PROMPT = """You are a personal wellness coach and journal analyst. Analyze diary entries to provide helpful insights and suggestions.
Focus on patterns, emotional well-being, and constructive recommendations.
Respond with JSON in this format: {
  "keyThemes": ["theme1", "theme2"],
  "suggestions": ["suggestion1", "suggestion2"]
}"""

WEEKLY_SYSTEM_PROMPT = """You are a mental health and wellness analyst. Analyze a week's worth of diary entries to identify patterns and provide insights.
Provide a wellness score from 1-100, mood trend description, key patterns observed, and personalized recommendations.
Respond with JSON in this format: {
  "moodTrend": "description of mood over the week",
  "keyPatterns": ["pattern1", "pattern2"],
  "recommendations": ["rec1", "rec2"],
  "wellnessScore": number
}"""

PROMPT_SYSTEM_PROMPT = (
    "You are a creative writing coach specializing in personal reflection and journaling. "
    "Generate thoughtful, engaging writing prompts that encourage self-reflection and personal growth."
)


def count_words(text: str) -> int:
    return len(text.split())


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _number(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


class AIInsightService:
    """Thin adapter over the OpenAI client returning validated insight models."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        model: str = "gpt-4o",
        timeout: float = 15.0,
        client: Any = None,
    ) -> None:
        self.model = model
        self.timeout = timeout
        self.client = client or openai.OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    def _chat(
        self,
        messages: List[Dict[str, str]],
        *,
        json_mode: bool,
        timeout: Optional[float] = None,
    ) -> str:
        kwargs: Dict[str, Any] = {"model": self.model, "messages": messages}
        if timeout is not None:
            kwargs["timeout"] = timeout
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = self.client.chat.completions.create(**kwargs)
        except openai.OpenAIError as exc:
            raise AIServiceFailure(f"provider_error: {exc}") from exc
        try:
            return response.choices[0].message.content or ""
        except (AttributeError, IndexError) as exc:
            raise AIServiceFailure("empty_response") from exc

    def _chat_json(
        self, system_prompt: str, user_prompt: str, *, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        content = self._chat(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            json_mode=True,
            timeout=timeout,
        )
        try:
            data = json.loads(content or "{}")
        except json.JSONDecodeError as exc:
            raise AIServiceFailure("invalid_json") from exc
        if not isinstance(data, dict):
            raise AIServiceFailure("invalid_json")
        return data

    def analyze_sentiment(self, text: str) -> SentimentAnalysis:
        result = self._chat_json(SENTIMENT_SYSTEM_PROMPT, f'Analyze this diary entry: "{text}"')
        return SentimentAnalysis(
            mood=int(_clamp(round(_number(result.get("mood"), 3)), 1, 5)),
            confidence=_clamp(_number(result.get("confidence"), 0.5), 0.0, 1.0),
            emotions=_string_list(result.get("emotions")),
            topics=_string_list(result.get("topics")),
        )

    def generate_insights(self, text: str) -> EntryInsights:
        word_count = count_words(text)
        deadline = time.monotonic() + self.timeout
        sentiment = self.analyze_sentiment(text)
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise AIServiceFailure("timeout")
        result = self._chat_json(
            INSIGHTS_SYSTEM_PROMPT,
            f'Analyze this diary entry and provide wellness insights: "{text}"',
            timeout=remaining,
        )
        return EntryInsights(
            sentiment=sentiment,
            word_count=word_count,
            reading_time=math.ceil(word_count / WORDS_PER_MINUTE),
            key_themes=_string_list(result.get("keyThemes")),
            suggestions=_string_list(result.get("suggestions")),
        )

    def generate_weekly_insights(self, texts: List[str]) -> WeeklyInsights:
        combined = "\n\n".join(texts)
        result = self._chat_json(
            WEEKLY_SYSTEM_PROMPT,
            f'Analyze these diary entries from the past week: "{combined}"',
        )
        return WeeklyInsights(
            mood_trend=str(result.get("moodTrend") or "No clear trend identified"),
            key_patterns=_string_list(result.get("keyPatterns")),
            recommendations=_string_list(result.get("recommendations")),
            wellness_score=int(_clamp(round(_number(result.get("wellnessScore"), 50)), 1, 100)),
        )

    def generate_writing_prompt(self) -> str:
        """Return a fresh prompt, or the default prompt when the provider fails."""
        try:
            content = self._chat(
                [
                    {"role": "system", "content": PROMPT_SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": (
                            "Generate a unique, inspiring writing prompt for a diary entry that "
                            "encourages personal reflection and emotional exploration."
                        ),
                    },
                ],
                json_mode=False,
            )
        except AIServiceFailure as exc:
            logger.warning("Writing prompt generation failed: %s", exc)
            return DEFAULT_WRITING_PROMPT
        return content.strip() or DEFAULT_WRITING_PROMPT


def get_ai_service() -> Optional[AIInsightService]:
    """Return the app-scoped insight service, or None when insights are disabled."""
    if not current_app.config.get("ENABLE_INSIGHTS", False):
        return None
    service = current_app.extensions.get("ai_service")
    if service is None:
        api_key = current_app.config.get("OPENAI_API_KEY")
        if not api_key:
            return None
        service = AIInsightService(
            api_key,
            model=current_app.config.get("OPENAI_MODEL", "gpt-4o"),
            timeout=float(current_app.config.get("AI_TIMEOUT_SECONDS", 15)),
        )
        current_app.extensions["ai_service"] = service
    return service
