"""
Review sentiment analysis and keyword management for the court booking platform.

Main components:
- keywords: keyword store access, caching, fallback lexicon, admin operations
- sentiment: rule-based and external-model scoring strategies
- cli: command-line entry point
"""

from court_sentiment.sentiment.service import analyze_sentiment
from court_sentiment.sentiment.scoring import analyze_sentiment_sync
from court_sentiment.sentiment.schemas import SentimentLabel, SentimentResult

__all__ = [
    "analyze_sentiment",
    "analyze_sentiment_sync",
    "SentimentLabel",
    "SentimentResult",
]
