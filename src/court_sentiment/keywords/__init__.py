"""Keyword management module.

Provides the persistent keyword store, the cached accessor with its
fallback lexicon, validation, and administrative operations.
"""

from .accessor import KeywordAccessor
from .admin import KeywordAdmin
from .cache import KeywordCache
from .fallback import get_fallback_keywords
from .schemas import Keyword, KeywordCreate, KeywordUpdate, LexiconSnapshot, PolarityClass
from .store import KeywordStore, SqlKeywordStore
from .validation import validate_keyword_data

__all__ = [
    # Access
    "KeywordAccessor",
    "KeywordCache",
    "get_fallback_keywords",
    # Storage
    "KeywordStore",
    "SqlKeywordStore",
    # Admin
    "KeywordAdmin",
    # Models
    "Keyword",
    "KeywordCreate",
    "KeywordUpdate",
    "LexiconSnapshot",
    "PolarityClass",
    # Validation
    "validate_keyword_data",
]
