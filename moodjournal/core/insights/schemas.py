"""Structured payloads returned by the insight provider."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SentimentAnalysis(_CamelModel):
    mood: int = Field(ge=1, le=5)
    confidence: float = Field(ge=0, le=1)
    emotions: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)


class EntryInsights(_CamelModel):
    sentiment: SentimentAnalysis
    word_count: int
    reading_time: int
    key_themes: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class WeeklyInsights(_CamelModel):
    mood_trend: str
    key_patterns: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    wellness_score: int = Field(ge=1, le=100)


class AnalyzeRequest(BaseModel):
    text: str = Field(min_length=10)
