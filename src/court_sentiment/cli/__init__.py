"""
CLI module for sentiment analysis and keyword maintenance.
"""

from court_sentiment.cli.commands import main

__all__ = ["main"]
