"""
Keyword store accessor.

Produces a `LexiconSnapshot` per language as cheaply and reliably as
possible and keeps keyword mutations consistent with the cache.

Read path, in order of preference:
1. fresh cached snapshot (no I/O)
2. store read, cached on success
3. stale cached snapshot for the same language (store error only)
4. hardcoded fallback lexicon

`get_keywords` never raises. Mutations propagate store failures.
"""

import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import structlog
from pydantic import BaseModel

from court_sentiment.config import settings
from court_sentiment.errors import (
    DuplicateKeywordError,
    StoreUnavailableError,
    ValidationError,
)

from .cache import KeywordCache
from .fallback import get_fallback_keywords
from .schemas import Keyword, KeywordCreate, KeywordUpdate, LexiconSnapshot, PolarityClass
from .store import KeywordStore, SqlKeywordStore
from .validation import collect_update_errors, validate_keyword_data

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = ("text", "polarity_class", "weight", "category_id", "active")


def group_keywords(
    keywords: List[Keyword], language: str, loaded_at: float
) -> LexiconSnapshot:
    """
    Group store rows into a snapshot, preserving their order.

    Inactive rows are dropped.
    """
    groups: Dict[PolarityClass, List[Keyword]] = {p: [] for p in PolarityClass}
    for keyword in keywords:
        if keyword.active:
            groups[keyword.polarity_class].append(keyword)

    return LexiconSnapshot(
        positive=tuple(groups[PolarityClass.POSITIVE]),
        negative=tuple(groups[PolarityClass.NEGATIVE]),
        strong_negative=tuple(groups[PolarityClass.STRONG_NEGATIVE]),
        loaded_at=loaded_at,
        language=language,
        source="store",
    )


class KeywordAccessor:
    """
    Cached access to the keyword store with fallback behavior.

    Args:
        store: Keyword store (default: SqlKeywordStore on the global engine)
        cache: Snapshot cache (default: new KeywordCache with the configured TTL)
        clock: Monotonic time source used for cache staleness
    """

    def __init__(
        self,
        store: Optional[KeywordStore] = None,
        cache: Optional[KeywordCache] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.store = store if store is not None else SqlKeywordStore()
        self.cache = cache if cache is not None else KeywordCache(settings.keyword_cache_ttl_seconds)
        self.clock = clock

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    async def get_keywords(
        self, language: str = "vi", force_refresh: bool = False
    ) -> LexiconSnapshot:
        """
        Get the lexicon snapshot for a language.

        Args:
            language: Language tag partitioning the lexicon
            force_refresh: Skip the cache and read the store

        Returns:
            LexiconSnapshot from cache, store, stale cache, or fallback
        """
        now = self.clock()

        if not force_refresh:
            cached = self.cache.get_fresh(language, now)
            if cached is not None:
                logger.debug("keyword_cache_hit", language=language, keywords=len(cached))
                return cached

        try:
            keywords = await self.store.fetch_active_keywords(language)
        except StoreUnavailableError as e:
            return self._degrade(language, e, now)
        except Exception as e:
            logger.error(
                "keyword_load_unexpected_error",
                language=language,
                error=str(e),
                error_type=type(e).__name__,
            )
            return self._degrade(language, e, now)

        if not keywords:
            logger.warning("keyword_store_empty_using_fallback", language=language)
            return get_fallback_keywords(now)

        snapshot = group_keywords(keywords, language, now)
        self.cache.put(language, snapshot)

        logger.info(
            "keyword_cache_refreshed",
            language=language,
            positive=len(snapshot.positive),
            negative=len(snapshot.negative),
            strong_negative=len(snapshot.strong_negative),
        )
        return snapshot

    def _degrade(self, language: str, error: Exception, now: float) -> LexiconSnapshot:
        stale = self.cache.get_any(language)
        if stale is not None:
            logger.warning(
                "keyword_store_unavailable_using_cache",
                language=language,
                cache_age_seconds=round(now - stale.loaded_at, 1),
                error=str(error),
            )
            return stale

        logger.warning("keyword_store_unavailable_using_fallback", language=language, error=str(error))
        return get_fallback_keywords(now)

    def invalidate(self, language: Optional[str] = None) -> None:
        """Drop one language's cached snapshot, or all of them."""
        self.cache.invalidate(language)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def add_keyword(
        self, data: Union[KeywordCreate, Mapping[str, Any]], actor_id: Optional[int] = None
    ) -> Keyword:
        """
        Validate, persist and return a new keyword.

        Invalidates the cache for the keyword's language.

        Args:
            data: Keyword payload (text, polarity_class, weight, language, ...)
            actor_id: Id of the user adding the keyword

        Returns:
            Stored Keyword with its assigned id

        Raises:
            ValidationError: Payload violates field rules (store untouched)
            DuplicateKeywordError: (text, type, language) already exists
            StoreUnavailableError: Write failed
        """
        payload = data.model_dump() if isinstance(data, BaseModel) else dict(data)
        validate_keyword_data(payload)

        text = payload["text"].strip()
        polarity = getattr(payload["polarity_class"], "value", payload["polarity_class"])
        language = payload["language"].strip()
        weight = payload.get("weight")

        if await self.store.keyword_exists(text, polarity, language):
            raise DuplicateKeywordError(text, polarity, language)

        keyword = await self.store.insert_keyword(
            text=text,
            polarity_class=polarity,
            weight=1.0 if weight is None else weight,
            language=language,
            category_id=payload.get("category_id"),
            active=payload.get("active", True),
            created_by=actor_id,
        )
        self.invalidate(language)

        logger.info(
            "keyword_added",
            keyword_id=keyword.id,
            type=polarity,
            language=language,
            actor_id=actor_id,
        )
        return keyword

    async def update_keyword(
        self,
        keyword_id: int,
        updates: Union[KeywordUpdate, Mapping[str, Any], None] = None,
        **partial: Any,
    ) -> Keyword:
        """
        Apply a partial update to a keyword.

        Fields come from `updates` and/or keyword arguments, e.g.
        `update_keyword(3, weight=1.5)`. The pre-update language is not
        known here, so the whole cache is invalidated.

        Raises:
            ValidationError: Unknown/empty fields or rule violations
            KeywordNotFoundError: No keyword with this id
            StoreUnavailableError: Write failed
        """
        if isinstance(updates, BaseModel):
            fields = updates.model_dump(exclude_unset=True)
        else:
            fields = dict(updates or {})
        fields.update(partial)
        # None clears category_id; elsewhere it means "leave unchanged"
        fields = {k: v for k, v in fields.items() if v is not None or k == "category_id"}

        errors = [f"Unknown field: {name}" for name in fields if name not in UPDATABLE_FIELDS]
        if not fields:
            errors.append("No fields to update")
        errors.extend(collect_update_errors(fields))
        if errors:
            raise ValidationError(errors)

        keyword = await self.store.update_keyword(keyword_id, fields)
        self.invalidate()

        logger.info("keyword_updated", keyword_id=keyword_id, fields=sorted(fields))
        return keyword

    async def delete_keyword(self, keyword_id: int) -> None:
        """
        Delete a keyword and invalidate the whole cache.

        Raises:
            KeywordNotFoundError: No keyword with this id
            StoreUnavailableError: Write failed
        """
        await self.store.delete_keyword(keyword_id)
        self.invalidate()
        logger.info("keyword_removed", keyword_id=keyword_id)
