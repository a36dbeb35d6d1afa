"""
Administrative keyword operations.

Thin persistence wrappers used by the keyword management screens:
listing with stats, bulk activate/deactivate/delete, bulk category and
weight edits, import, export, category management, and a full reseed from
the default dataset. Every mutation invalidates the lexicon cache.
"""

import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

import structlog

from court_sentiment.errors import DuplicateKeywordError, StoreUnavailableError, ValidationError
from court_sentiment.version import DEFAULT_DATASET_VERSION

from .accessor import KeywordAccessor
from .default_dataset import DEFAULT_CATEGORIES, DEFAULT_KEYWORDS, DEFAULT_LANGUAGE
from .schemas import (
    Category,
    ExportResult,
    ImportReport,
    KeywordFilter,
    KeywordPage,
    ReseedReport,
)
from .store import SqlKeywordStore
from .validation import ERROR_WEIGHT_RANGE, collect_keyword_errors, weight_in_range

logger = structlog.get_logger(__name__)

MAX_IMPORT_ERRORS = 10
MAX_RESEED_ERRORS = 5


def _require_ids(ids: Sequence[int]) -> List[int]:
    if not ids:
        raise ValidationError(["Keyword ids are required"])
    return list(ids)


def default_dataset_summary() -> Dict[str, Any]:
    """Counts of the default dataset, for dry runs."""
    counts = {type_: len(entries) for type_, entries in DEFAULT_KEYWORDS.items()}
    return {
        "version": DEFAULT_DATASET_VERSION,
        "language": DEFAULT_LANGUAGE,
        "counts": counts,
        "total": sum(counts.values()),
        "categories": list(DEFAULT_CATEGORIES),
    }


class KeywordAdmin:
    """
    Administrative operations over the SQL keyword store.

    Args:
        accessor: Accessor whose cache is invalidated on every mutation;
            its store must be a SqlKeywordStore
    """

    def __init__(self, accessor: KeywordAccessor):
        if not isinstance(accessor.store, SqlKeywordStore):
            raise TypeError("KeywordAdmin requires an accessor backed by SqlKeywordStore")
        self.accessor = accessor
        self.store: SqlKeywordStore = accessor.store

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def list_keywords(self, filters: Optional[KeywordFilter] = None) -> KeywordPage:
        """
        List keywords with filtering, pagination and per-type active stats.
        """
        filters = filters or KeywordFilter()
        items, total = await self.store.list_keywords(filters)
        stats = await self.store.keyword_stats(filters.language)

        return KeywordPage(
            items=items,
            page=filters.page,
            limit=filters.limit,
            total=total,
            pages=math.ceil(total / filters.limit),
            stats=stats,
        )

    # ------------------------------------------------------------------
    # Bulk edits
    # ------------------------------------------------------------------

    async def bulk_activate(self, ids: Sequence[int]) -> int:
        return await self._bulk_set_active(ids, True)

    async def bulk_deactivate(self, ids: Sequence[int]) -> int:
        return await self._bulk_set_active(ids, False)

    async def _bulk_set_active(self, ids: Sequence[int], active: bool) -> int:
        count = await self.store.bulk_set_active(_require_ids(ids), active)
        self.accessor.invalidate()
        logger.info("keywords_bulk_set_active", active=active, requested=len(ids), updated=count)
        return count

    async def bulk_delete(self, ids: Sequence[int]) -> int:
        count = await self.store.bulk_delete(_require_ids(ids))
        self.accessor.invalidate()
        logger.info("keywords_bulk_deleted", requested=len(ids), deleted=count)
        return count

    async def bulk_update_category(self, ids: Sequence[int], category_id: Optional[int]) -> int:
        count = await self.store.bulk_update_category(_require_ids(ids), category_id)
        self.accessor.invalidate()
        logger.info("keywords_bulk_category_updated", category_id=category_id, updated=count)
        return count

    async def bulk_update_weight(self, ids: Sequence[int], weight: float) -> int:
        ids = _require_ids(ids)
        if not weight_in_range(weight):
            raise ValidationError([ERROR_WEIGHT_RANGE])
        count = await self.store.bulk_update_weight(ids, weight)
        self.accessor.invalidate()
        logger.info("keywords_bulk_weight_updated", weight=weight, updated=count)
        return count

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    async def import_keywords(
        self, items: Sequence[Mapping[str, Any]], actor_id: Optional[int] = None
    ) -> ImportReport:
        """
        Import keywords one by one; invalid or duplicate items are reported,
        not fatal. A missing or zero weight is stored as 1.0.

        Args:
            items: Mappings with text, polarity_class, weight, language, category_id
            actor_id: Id of the importing user

        Returns:
            ImportReport (first 10 error messages only)
        """
        if not items:
            raise ValidationError(["Keyword list is required"])

        report = ImportReport()
        errors: List[str] = []

        for item in items:
            payload = {
                "text": item.get("text"),
                "polarity_class": item.get("polarity_class"),
                "weight": item.get("weight") or None,
                "language": item.get("language") or DEFAULT_LANGUAGE,
            }
            label = payload["text"]

            problems = collect_keyword_errors(payload)
            if problems:
                errors.append(f"Keyword '{label}': {'; '.join(problems)}")
                report.error_count += 1
                continue

            text = payload["text"].strip()
            try:
                if await self.store.keyword_exists(text, payload["polarity_class"], payload["language"]):
                    raise DuplicateKeywordError(text, payload["polarity_class"], payload["language"])
                await self.store.insert_keyword(
                    text=text,
                    polarity_class=payload["polarity_class"],
                    weight=payload["weight"] or 1.0,
                    language=payload["language"],
                    category_id=item.get("category_id"),
                    active=True,
                    created_by=actor_id,
                )
            except DuplicateKeywordError:
                errors.append(f"Keyword '{label}': already exists")
                report.error_count += 1
                continue
            except StoreUnavailableError as e:
                errors.append(f"Keyword '{label}': {e}")
                report.error_count += 1
                continue

            report.success_count += 1

        report.errors = errors[:MAX_IMPORT_ERRORS]
        self.accessor.invalidate()

        logger.info(
            "keywords_imported",
            success_count=report.success_count,
            error_count=report.error_count,
            actor_id=actor_id,
        )
        return report

    async def export_keywords(
        self, language: str = DEFAULT_LANGUAGE, type_: str = "all", active: str = "all"
    ) -> ExportResult:
        """Export keyword rows ordered by type then keyword."""
        rows = await self.store.export_keywords(language=language, type_=type_, active=active)
        today = datetime.now(timezone.utc).date().isoformat()
        return ExportResult(rows=rows, filename=f"sentiment_keywords_{language}_{today}.json")

    # ------------------------------------------------------------------
    # Reseed
    # ------------------------------------------------------------------

    async def reseed_all_keywords(self, actor_id: Optional[int] = None) -> ReseedReport:
        """
        Replace every keyword with the default dataset.

        Missing default categories are created first so seeded keywords
        keep their category.

        Raises:
            StoreUnavailableError: Clearing the table failed
        """
        cleared = await self.store.delete_all_keywords()
        category_ids = await self._ensure_default_categories()

        report = ReseedReport(cleared_count=cleared)
        errors: List[str] = []

        for type_, entries in DEFAULT_KEYWORDS.items():
            for text, weight, category in entries:
                try:
                    await self.store.insert_keyword(
                        text=text,
                        polarity_class=type_,
                        weight=weight,
                        language=DEFAULT_LANGUAGE,
                        category_id=category_ids.get(category),
                        active=True,
                        created_by=actor_id,
                    )
                    report.total_seeded += 1
                except (DuplicateKeywordError, StoreUnavailableError) as e:
                    errors.append(f"Failed to seed '{text}': {e}")

        report.error_count = len(errors)
        report.errors = errors[:MAX_RESEED_ERRORS]
        self.accessor.invalidate()

        logger.info(
            "keywords_reseeded",
            cleared_count=cleared,
            total_seeded=report.total_seeded,
            error_count=report.error_count,
            actor_id=actor_id,
        )
        return report

    async def seed_default_keywords(self, actor_id: Optional[int] = None) -> ReseedReport:
        """
        Insert the default dataset entries that are not stored yet.

        Existing keywords are left untouched.
        """
        category_ids = await self._ensure_default_categories()

        report = ReseedReport()
        errors: List[str] = []

        for type_, entries in DEFAULT_KEYWORDS.items():
            for text, weight, category in entries:
                try:
                    if await self.store.keyword_exists(text, type_, DEFAULT_LANGUAGE):
                        continue
                    await self.store.insert_keyword(
                        text=text,
                        polarity_class=type_,
                        weight=weight,
                        language=DEFAULT_LANGUAGE,
                        category_id=category_ids.get(category),
                        active=True,
                        created_by=actor_id,
                    )
                    report.total_seeded += 1
                except (DuplicateKeywordError, StoreUnavailableError) as e:
                    errors.append(f"Failed to seed '{text}': {e}")

        report.error_count = len(errors)
        report.errors = errors[:MAX_RESEED_ERRORS]
        self.accessor.invalidate()

        logger.info(
            "default_keywords_seeded",
            total_seeded=report.total_seeded,
            error_count=report.error_count,
            actor_id=actor_id,
        )
        return report

    async def _ensure_default_categories(self) -> Dict[str, int]:
        category_ids = await self.store.category_ids_by_name()
        for name, (description, color) in DEFAULT_CATEGORIES.items():
            if name not in category_ids:
                category = await self.store.insert_category(name, description, color)
                category_ids[name] = category.id
        return category_ids

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def list_categories(self) -> List[Category]:
        return await self.store.list_categories()

    async def create_category(
        self, name: str, description: Optional[str] = None, color: Optional[str] = None
    ) -> Category:
        """
        Create a category; names are unique case-insensitively.

        Raises:
            ValidationError: Empty or duplicate name
        """
        if not name or not name.strip():
            raise ValidationError(["Category name is required"])
        if await self.store.category_exists(name):
            raise ValidationError([f"Category '{name.strip()}' already exists"])

        category = await self.store.insert_category(name, description, color)
        logger.info("category_created", category_id=category.id, name=category.name)
        return category
