"""
Sentiment scoring package.

Main components:
- schemas: SentimentResult and labels
- scoring: pure rule-based scoring (full and synchronous variants)
- scorer: scoring strategies (rule-based, external model)
- service: analyze_sentiment entry point
"""

from court_sentiment.sentiment.schemas import SentimentLabel, SentimentResult
from court_sentiment.sentiment.scoring import (
    analyze_sentiment_sync,
    score_text,
    should_auto_flag,
    should_auto_flag_sync,
)
from court_sentiment.sentiment.scorer import (
    ExternalModelScorer,
    RuleBasedScorer,
    SentimentScorer,
)
from court_sentiment.sentiment.service import SentimentService, analyze_sentiment

__all__ = [
    # Models
    "SentimentLabel",
    "SentimentResult",
    # Scoring functions
    "score_text",
    "analyze_sentiment_sync",
    "should_auto_flag",
    "should_auto_flag_sync",
    # Strategies
    "SentimentScorer",
    "RuleBasedScorer",
    "ExternalModelScorer",
    # Entry point
    "SentimentService",
    "analyze_sentiment",
]
