"""
Unit tests for the keyword accessor.

Covers the cached read path (fresh hit, expiry, forced refresh, stale
cache and fallback on store failure) and the mutation path (validation,
duplicates, cache invalidation).
"""

import pytest

from court_sentiment.errors import (
    DuplicateKeywordError,
    KeywordNotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from court_sentiment.keywords.accessor import KeywordAccessor, group_keywords
from court_sentiment.keywords.cache import KeywordCache
from court_sentiment.keywords.fallback import get_fallback_keywords
from court_sentiment.keywords.schemas import Keyword, KeywordCreate, KeywordUpdate, PolarityClass
from court_sentiment.keywords.validation import ERROR_EMPTY_TEXT

from ...fixtures.keywords import FakeKeywordStore


class TestGroupKeywords:
    """Test grouping rows into a snapshot."""

    def test_groups_and_drops_inactive(self):
        rows = [
            Keyword(id=1, text="tuyệt", polarity_class=PolarityClass.POSITIVE, weight=1.4),
            Keyword(id=2, text="tệ", polarity_class=PolarityClass.NEGATIVE),
            Keyword(id=3, text="tốt", polarity_class=PolarityClass.POSITIVE),
            Keyword(id=4, text="ổn", polarity_class=PolarityClass.POSITIVE, active=False),
        ]
        snapshot = group_keywords(rows, "vi", 5.0)

        assert [k.text for k in snapshot.positive] == ["tuyệt", "tốt"]
        assert [k.text for k in snapshot.negative] == ["tệ"]
        assert snapshot.strong_negative == ()
        assert snapshot.loaded_at == 5.0
        assert not snapshot.is_fallback


@pytest.mark.asyncio
class TestGetKeywords:
    """Test the cached read path."""

    async def test_loads_from_store(self, accessor, fake_store):
        snapshot = await accessor.get_keywords("vi")

        assert snapshot.source == "store"
        assert [k.text for k in snapshot.positive] == ["sạch sẽ", "tốt"]
        assert [k.text for k in snapshot.negative] == ["tệ"]
        assert fake_store.read_count == 1

    async def test_cache_hit_within_ttl(self, accessor, fake_store, clock):
        """Two reads within the TTL hit the store once and return the same object."""
        first = await accessor.get_keywords("vi")
        clock.advance(299)
        second = await accessor.get_keywords("vi")

        assert fake_store.read_count == 1
        assert second is first

    async def test_reload_after_ttl(self, accessor, fake_store, clock):
        await accessor.get_keywords("vi")
        clock.advance(300)
        await accessor.get_keywords("vi")

        assert fake_store.read_count == 2

    async def test_force_refresh(self, accessor, fake_store):
        await accessor.get_keywords("vi")
        await accessor.get_keywords("vi", force_refresh=True)

        assert fake_store.read_count == 2

    async def test_languages_cached_separately(self, accessor, fake_store):
        fake_store.add("good", "positive", language="en")

        vi = await accessor.get_keywords("vi")
        en = await accessor.get_keywords("en")

        assert [k.text for k in en.positive] == ["good"]
        assert "good" not in [k.text for k in vi.positive]
        assert fake_store.read_count == 2

    async def test_empty_store_uses_fallback(self, clock):
        store = FakeKeywordStore()
        accessor = KeywordAccessor(store=store, cache=KeywordCache(), clock=clock)

        snapshot = await accessor.get_keywords("vi")

        assert snapshot.is_fallback
        assert len(snapshot) == 27
        assert "vi" not in accessor.cache

    async def test_store_failure_without_cache_uses_fallback(self, accessor, fake_store):
        fake_store.fail = True

        snapshot = await accessor.get_keywords("vi")

        assert snapshot.is_fallback
        assert snapshot.positive == get_fallback_keywords().positive

    async def test_store_failure_serves_stale_cache(self, accessor, fake_store, clock):
        cached = await accessor.get_keywords("vi")
        clock.advance(600)
        fake_store.fail = True

        snapshot = await accessor.get_keywords("vi")

        assert snapshot is cached
        assert fake_store.read_count == 2

    async def test_unexpected_error_degrades(self, clock):
        class BrokenStore(FakeKeywordStore):
            async def fetch_active_keywords(self, language):
                raise RuntimeError("boom")

        accessor = KeywordAccessor(store=BrokenStore(), cache=KeywordCache(), clock=clock)
        snapshot = await accessor.get_keywords("vi")

        assert snapshot.is_fallback

    async def test_fallback_is_deterministic(self, clock):
        store = FakeKeywordStore()
        store.fail = True
        accessor = KeywordAccessor(store=store, cache=KeywordCache(), clock=clock)

        first = await accessor.get_keywords("vi")
        second = await accessor.get_keywords("vi")

        assert first.groups() == second.groups()

    async def test_outage_for_uncached_language_ignores_other_languages(self, accessor, fake_store):
        """A cached lexicon for one language never leaks into another's fallback."""
        fake_store.add("good", "positive", language="en")
        en = await accessor.get_keywords("en")
        assert not en.is_fallback

        fake_store.fail = True
        vi = await accessor.get_keywords("vi")

        assert vi.is_fallback
        assert vi.groups() == get_fallback_keywords().groups()


@pytest.mark.asyncio
class TestAddKeyword:
    """Test validated inserts."""

    async def test_empty_text_rejected_without_side_effects(self, accessor, fake_store):
        """Invalid payload raises before touching the store or cache."""
        cached = await accessor.get_keywords("vi")
        reads, writes = fake_store.read_count, fake_store.write_count

        with pytest.raises(ValidationError) as exc_info:
            await accessor.add_keyword(
                {"text": "", "polarity_class": "positive", "weight": 1.0, "language": "vi"}
            )

        assert ERROR_EMPTY_TEXT in exc_info.value.errors
        assert fake_store.read_count == reads
        assert fake_store.write_count == writes
        assert accessor.cache.get_any("vi") is cached

    async def test_adds_and_invalidates_language(self, accessor, fake_store):
        await accessor.get_keywords("vi")
        accessor.cache.put("en", get_fallback_keywords())

        keyword = await accessor.add_keyword(
            KeywordCreate(text="  tuyệt vời ", polarity_class="positive", weight=1.4), actor_id=7
        )

        assert keyword.id > 0
        assert keyword.text == "tuyệt vời"
        assert "vi" not in accessor.cache
        assert "en" in accessor.cache

        snapshot = await accessor.get_keywords("vi")
        assert "tuyệt vời" in [k.text for k in snapshot.positive]

    async def test_default_weight(self, accessor):
        keyword = await accessor.add_keyword(
            {"text": "hay", "polarity_class": "positive", "language": "vi"}
        )
        assert keyword.weight == 1.0

    async def test_duplicate_rejected(self, accessor, fake_store):
        with pytest.raises(DuplicateKeywordError):
            await accessor.add_keyword({"text": "TỐT", "polarity_class": "positive", "language": "vi"})
        assert fake_store.write_count == 0

    async def test_same_text_other_type_allowed(self, accessor):
        keyword = await accessor.add_keyword(
            {"text": "tốt", "polarity_class": "negative", "language": "vi"}
        )
        assert keyword.polarity_class == PolarityClass.NEGATIVE

    async def test_store_failure_propagates(self, accessor, fake_store):
        await accessor.get_keywords("vi")
        fake_store.fail = True

        with pytest.raises(StoreUnavailableError):
            await accessor.add_keyword({"text": "đẹp", "polarity_class": "positive", "language": "vi"})

        assert "vi" in accessor.cache


@pytest.mark.asyncio
class TestUpdateKeyword:
    """Test partial updates."""

    async def test_update_invalidates_all_languages(self, accessor, fake_store):
        """After an update the next read reflects the new weight."""
        await accessor.get_keywords("vi")
        accessor.cache.put("en", get_fallback_keywords())
        tot = next(k for k in fake_store.rows.values() if k.text == "tốt")

        updated = await accessor.update_keyword(tot.id, weight=1.8)

        assert updated.weight == 1.8
        assert len(accessor.cache) == 0

        snapshot = await accessor.get_keywords("vi")
        assert {k.text: k.weight for k in snapshot.positive}["tốt"] == 1.8

    async def test_deactivate_removes_from_snapshot(self, accessor, fake_store):
        te = next(k for k in fake_store.rows.values() if k.text == "tệ")

        await accessor.update_keyword(te.id, KeywordUpdate(active=False))
        snapshot = await accessor.get_keywords("vi")

        assert snapshot.negative == ()

    async def test_change_polarity(self, accessor, fake_store):
        te = next(k for k in fake_store.rows.values() if k.text == "tệ")

        await accessor.update_keyword(te.id, {"polarity_class": "strong_negative"})
        snapshot = await accessor.get_keywords("vi")

        assert [k.text for k in snapshot.strong_negative] == ["tệ"]

    async def test_invalid_weight(self, accessor, fake_store):
        with pytest.raises(ValidationError):
            await accessor.update_keyword(1, {"weight": 9.0})
        assert fake_store.write_count == 0

    async def test_unknown_field(self, accessor):
        with pytest.raises(ValidationError) as exc_info:
            await accessor.update_keyword(1, {"language": "en"})
        assert "Unknown field: language" in exc_info.value.errors

    async def test_no_fields(self, accessor):
        with pytest.raises(ValidationError):
            await accessor.update_keyword(1, KeywordUpdate())

    async def test_missing_keyword(self, accessor):
        with pytest.raises(KeywordNotFoundError):
            await accessor.update_keyword(999, {"weight": 1.0})


@pytest.mark.asyncio
class TestDeleteKeyword:
    """Test deletes."""

    async def test_delete_invalidates(self, accessor, fake_store):
        await accessor.get_keywords("vi")
        te = next(k for k in fake_store.rows.values() if k.text == "tệ")

        await accessor.delete_keyword(te.id)

        assert len(accessor.cache) == 0
        snapshot = await accessor.get_keywords("vi")
        assert snapshot.negative == ()

    async def test_delete_missing(self, accessor):
        with pytest.raises(KeywordNotFoundError):
            await accessor.delete_keyword(999)
