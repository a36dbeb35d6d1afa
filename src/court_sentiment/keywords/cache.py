"""
In-memory lexicon cache keyed by language tag.

Entries are immutable snapshots replaced wholesale, so a reader never sees
a half-refreshed lexicon. Expiry is lazy: staleness is checked on read.
"""

from typing import Dict, Optional

import structlog

from .schemas import LexiconSnapshot

logger = structlog.get_logger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


class KeywordCache:
    """
    Per-language snapshot cache with time-based expiry.

    Args:
        ttl_seconds: Maximum snapshot age served as fresh
    """

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS):
        self.ttl_seconds = ttl_seconds
        self._entries: Dict[str, LexiconSnapshot] = {}

    def get_fresh(self, language: str, now: float) -> Optional[LexiconSnapshot]:
        """Return the cached snapshot if it is younger than the TTL."""
        snapshot = self._entries.get(language)
        if snapshot is None:
            return None
        if now - snapshot.loaded_at >= self.ttl_seconds:
            return None
        return snapshot

    def get_any(self, language: str) -> Optional[LexiconSnapshot]:
        """Return the cached snapshot regardless of age."""
        return self._entries.get(language)

    def put(self, language: str, snapshot: LexiconSnapshot) -> None:
        self._entries[language] = snapshot

    def invalidate(self, language: Optional[str] = None) -> None:
        """
        Drop one language's snapshot, or every snapshot when language is None.
        """
        if language is not None:
            self._entries.pop(language, None)
        else:
            self._entries = {}
        logger.debug("keyword_cache_invalidated", language=language or "*")

    def __contains__(self, language: str) -> bool:
        return language in self._entries

    def __len__(self) -> int:
        return len(self._entries)
