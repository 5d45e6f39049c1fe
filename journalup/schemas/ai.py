"""Pydantic schemas for AI endpoints: entry analysis, chat and memory graph."""

from typing import Any, Literal

from pydantic import Field

from journalup.schemas.base import CamelModel
from journalup.schemas.metrics import MetricType


class SentimentAnalysis(CamelModel):
    score: float = Field(..., ge=-1, le=1, description="-1 (negative) to 1 (positive)")
    label: Literal["positive", "negative", "neutral"]
    confidence: float = Field(..., ge=0, le=1)


class GrowthIndicator(CamelModel):
    type: MetricType
    confidence: float = Field(..., ge=0, le=1)
    evidence: str


class EntryAnalysis(CamelModel):
    sentiment: SentimentAnalysis
    growth_indicators: list[GrowthIndicator]


class AnalyzeRequest(CamelModel):
    content: str = Field(..., min_length=1, max_length=20000)


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=8000)
    context: str | None = Field(default=None, max_length=8000)


class ChatResponse(CamelModel):
    message: str


class GraphRequest(CamelModel):
    data: dict[str, Any]


class GraphResponse(CamelModel):
    success: bool
    message: str
