"""
Exception hierarchy for the sentiment subsystem.

Read failures of the keyword store never leave the accessor; everything
raised from here reaches administrative callers only.
"""

from typing import List


class CourtSentimentError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(CourtSentimentError):
    """
    Keyword mutation input violates one or more field constraints.

    Attributes:
        errors: Every violated rule, in check order
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class StoreUnavailableError(CourtSentimentError):
    """The persistent keyword store could not be read or written."""


class KeywordNotFoundError(CourtSentimentError):
    """No keyword exists with the requested id."""

    def __init__(self, keyword_id: int):
        self.keyword_id = keyword_id
        super().__init__(f"Keyword {keyword_id} not found")


class DuplicateKeywordError(CourtSentimentError):
    """A keyword with the same (text, type, language) already exists."""

    def __init__(self, text: str, polarity_class: str, language: str):
        self.text = text
        self.polarity_class = polarity_class
        self.language = language
        super().__init__(
            f"Keyword '{text}' already exists for type {polarity_class} and language {language}"
        )
