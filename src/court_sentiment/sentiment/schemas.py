"""
Sentiment result schema.

`SentimentResult` is the value handed to the review moderation workflow;
it is computed per call and persisted by the caller.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class SentimentLabel(str, Enum):
    """Categorical polarity derived from the score."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SentimentResult(BaseModel):
    """
    Outcome of one scoring call.

    matched_terms holds one annotation per contributing keyword, e.g.
    "+sạch sẽ (1x, w:1.2)", in positive → negative → strong negative order.
    """
    score: float = Field(..., ge=-1.0, le=1.0, description="Polarity, -1 very negative to 1 very positive")
    label: SentimentLabel
    confidence: float = Field(..., ge=0.0, le=1.0, description="Keyword-density confidence")
    flagged: bool = Field(..., description="Whether the review should be hidden automatically")
    matched_terms: List[str] = Field(default_factory=list)
