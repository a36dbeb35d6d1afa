"""
Persistent keyword store.

`KeywordStore` is the seam the accessor depends on; `SqlKeywordStore`
implements it over the sentiment_keywords / sentiment_categories tables
and additionally serves the administrative queries.

All database failures (connectivity, missing tables, constraint races)
surface as `StoreUnavailableError`, `DuplicateKeywordError` or
`KeywordNotFoundError`; raw SQLAlchemy exceptions never leave this module.
"""

import functools
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

import structlog
from sqlalchemy import case, delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from court_sentiment.errors import (
    DuplicateKeywordError,
    KeywordNotFoundError,
    StoreUnavailableError,
)

from .database import get_db_session
from .models import SentimentCategoryRow, SentimentKeywordRow
from .schemas import Category, Keyword, KeywordFilter, KeywordStats, PolarityClass

logger = structlog.get_logger(__name__)

# Domain field name -> column name
_UPDATE_COLUMNS = {
    "text": "keyword",
    "polarity_class": "type",
    "weight": "weight",
    "category_id": "category_id",
    "active": "is_active",
}


class KeywordStore(ABC):
    """
    Storage operations the keyword accessor relies on.

    Implementations raise `StoreUnavailableError` for any storage failure.
    """

    @abstractmethod
    async def fetch_active_keywords(self, language: str) -> List[Keyword]:
        """Active keywords for a language, ordered by weight desc then text."""

    @abstractmethod
    async def keyword_exists(self, text: str, polarity_class: str, language: str) -> bool:
        """Case-insensitive duplicate check on (text, type, language)."""

    @abstractmethod
    async def insert_keyword(
        self,
        text: str,
        polarity_class: str,
        weight: float,
        language: str,
        category_id: Optional[int],
        active: bool,
        created_by: Optional[int],
    ) -> Keyword:
        """Insert a keyword and return it with its assigned id."""

    @abstractmethod
    async def update_keyword(self, keyword_id: int, fields: Dict[str, Any]) -> Keyword:
        """Apply a partial update; raises KeywordNotFoundError for unknown ids."""

    @abstractmethod
    async def delete_keyword(self, keyword_id: int) -> None:
        """Delete a keyword; raises KeywordNotFoundError for unknown ids."""


def _store_errors(operation: str):
    """Translate storage failures into StoreUnavailableError."""

    def decorator(func_):
        @functools.wraps(func_)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func_(self, *args, **kwargs)
            except (SQLAlchemyError, OSError) as e:
                logger.error(
                    "keyword_store_operation_failed",
                    operation=operation,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise StoreUnavailableError(f"{operation} failed: {e}") from e

        return wrapper

    return decorator


def _to_keyword(row: SentimentKeywordRow, category_name: Optional[str] = None) -> Keyword:
    return Keyword(
        id=row.id,
        text=row.keyword,
        polarity_class=PolarityClass(row.type),
        weight=float(row.weight),
        language=row.language,
        active=bool(row.is_active),
        category_id=row.category_id,
        category_name=category_name,
    )


def _keyword_with_category():
    return select(SentimentKeywordRow, SentimentCategoryRow.name).outerjoin(
        SentimentCategoryRow, SentimentKeywordRow.category_id == SentimentCategoryRow.id
    )


class SqlKeywordStore(KeywordStore):
    """
    SQLAlchemy (asyncio) implementation of the keyword store.

    Args:
        session_factory: Optional async_sessionmaker; defaults to the
            process-wide factory from `database.get_session_factory`
    """

    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        self.session_factory = session_factory

    def _session(self):
        return get_db_session(self.session_factory)

    # ------------------------------------------------------------------
    # Accessor operations
    # ------------------------------------------------------------------

    @_store_errors("fetch_active_keywords")
    async def fetch_active_keywords(self, language: str) -> List[Keyword]:
        stmt = (
            _keyword_with_category()
            .where(SentimentKeywordRow.language == language)
            .where(SentimentKeywordRow.is_active.is_(True))
            .order_by(SentimentKeywordRow.weight.desc(), SentimentKeywordRow.keyword)
        )
        async with self._session() as session:
            result = await session.execute(stmt)
            return [_to_keyword(row, name) for row, name in result.all()]

    @_store_errors("keyword_exists")
    async def keyword_exists(self, text: str, polarity_class: str, language: str) -> bool:
        stmt = (
            select(SentimentKeywordRow.id)
            .where(func.lower(SentimentKeywordRow.keyword) == func.lower(text.strip()))
            .where(SentimentKeywordRow.type == polarity_class)
            .where(SentimentKeywordRow.language == language)
            .limit(1)
        )
        async with self._session() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none() is not None

    @_store_errors("insert_keyword")
    async def insert_keyword(
        self,
        text: str,
        polarity_class: str,
        weight: float,
        language: str,
        category_id: Optional[int],
        active: bool,
        created_by: Optional[int],
    ) -> Keyword:
        row = SentimentKeywordRow(
            keyword=text.strip(),
            type=polarity_class,
            weight=weight,
            language=language,
            category_id=category_id or None,
            is_active=active,
            created_by=created_by,
        )
        try:
            async with self._session() as session:
                session.add(row)
                await session.flush()
                await session.refresh(row)
                keyword = _to_keyword(row)
        except IntegrityError as e:
            raise DuplicateKeywordError(text.strip(), polarity_class, language) from e

        logger.info("keyword_inserted", keyword_id=keyword.id, type=polarity_class, language=language)
        return keyword

    @_store_errors("update_keyword")
    async def update_keyword(self, keyword_id: int, fields: Dict[str, Any]) -> Keyword:
        try:
            async with self._session() as session:
                row = await session.get(SentimentKeywordRow, keyword_id)
                if row is None:
                    raise KeywordNotFoundError(keyword_id)
                for name, value in fields.items():
                    if name == "text":
                        value = value.strip()
                    elif name == "polarity_class":
                        value = getattr(value, "value", value)
                    setattr(row, _UPDATE_COLUMNS[name], value)
                await session.flush()
                await session.refresh(row)
                keyword = _to_keyword(row)
        except IntegrityError as e:
            raise DuplicateKeywordError(
                fields.get("text", ""), str(fields.get("polarity_class", "")), ""
            ) from e

        logger.info("keyword_updated", keyword_id=keyword_id, fields=sorted(fields))
        return keyword

    @_store_errors("delete_keyword")
    async def delete_keyword(self, keyword_id: int) -> None:
        async with self._session() as session:
            result = await session.execute(
                delete(SentimentKeywordRow).where(SentimentKeywordRow.id == keyword_id)
            )
            if result.rowcount == 0:
                raise KeywordNotFoundError(keyword_id)

        logger.info("keyword_deleted", keyword_id=keyword_id)

    # ------------------------------------------------------------------
    # Administrative queries
    # ------------------------------------------------------------------

    @staticmethod
    def _filter_conditions(filters: KeywordFilter) -> list:
        conditions = [SentimentKeywordRow.language == filters.language]
        if filters.type != "all":
            conditions.append(SentimentKeywordRow.type == filters.type)
        if filters.category != "all":
            conditions.append(SentimentKeywordRow.category_id == int(filters.category))
        if filters.active != "all":
            conditions.append(SentimentKeywordRow.is_active.is_(filters.active == "true"))
        if filters.search:
            conditions.append(SentimentKeywordRow.keyword.ilike(f"%{filters.search}%"))
        return conditions

    @_store_errors("list_keywords")
    async def list_keywords(self, filters: KeywordFilter) -> Tuple[List[Keyword], int]:
        conditions = self._filter_conditions(filters)
        stmt = (
            _keyword_with_category()
            .where(*conditions)
            .order_by(
                SentimentKeywordRow.type,
                SentimentKeywordRow.weight.desc(),
                SentimentKeywordRow.keyword,
            )
            .limit(filters.limit)
            .offset((filters.page - 1) * filters.limit)
        )
        count_stmt = select(func.count(SentimentKeywordRow.id)).where(*conditions)

        async with self._session() as session:
            rows = (await session.execute(stmt)).all()
            total = (await session.execute(count_stmt)).scalar_one()

        return [_to_keyword(row, name) for row, name in rows], int(total)

    @_store_errors("keyword_stats")
    async def keyword_stats(self, language: str) -> KeywordStats:
        stmt = (
            select(SentimentKeywordRow.type, func.count(SentimentKeywordRow.id))
            .where(SentimentKeywordRow.language == language)
            .where(SentimentKeywordRow.is_active.is_(True))
            .group_by(SentimentKeywordRow.type)
        )
        async with self._session() as session:
            rows = (await session.execute(stmt)).all()

        counts = {type_: int(count) for type_, count in rows}
        return KeywordStats(
            positive=counts.get("positive", 0),
            negative=counts.get("negative", 0),
            strong_negative=counts.get("strong_negative", 0),
            total_active=sum(counts.values()),
        )

    async def _bulk_update(self, ids: Sequence[int], values: Dict[str, Any]) -> int:
        values["updated_at"] = func.now()
        async with self._session() as session:
            result = await session.execute(
                update(SentimentKeywordRow)
                .where(SentimentKeywordRow.id.in_(list(ids)))
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

    @_store_errors("bulk_set_active")
    async def bulk_set_active(self, ids: Sequence[int], active: bool) -> int:
        return await self._bulk_update(ids, {"is_active": active})

    @_store_errors("bulk_update_category")
    async def bulk_update_category(self, ids: Sequence[int], category_id: Optional[int]) -> int:
        return await self._bulk_update(ids, {"category_id": category_id})

    @_store_errors("bulk_update_weight")
    async def bulk_update_weight(self, ids: Sequence[int], weight: float) -> int:
        return await self._bulk_update(ids, {"weight": weight})

    @_store_errors("bulk_delete")
    async def bulk_delete(self, ids: Sequence[int]) -> int:
        async with self._session() as session:
            result = await session.execute(
                delete(SentimentKeywordRow)
                .where(SentimentKeywordRow.id.in_(list(ids)))
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

    @_store_errors("delete_all_keywords")
    async def delete_all_keywords(self) -> int:
        async with self._session() as session:
            result = await session.execute(delete(SentimentKeywordRow))
            return result.rowcount

    @_store_errors("export_keywords")
    async def export_keywords(
        self, language: str, type_: str = "all", active: str = "all"
    ) -> List[Dict[str, Any]]:
        filters = KeywordFilter(language=language, type=type_, active=active)
        stmt = (
            _keyword_with_category()
            .where(*self._filter_conditions(filters))
            .order_by(SentimentKeywordRow.type, SentimentKeywordRow.keyword)
        )
        async with self._session() as session:
            rows = (await session.execute(stmt)).all()

        return [
            {
                "keyword": row.keyword,
                "type": row.type,
                "weight": float(row.weight),
                "language": row.language,
                "category": name or "",
                "is_active": bool(row.is_active),
            }
            for row, name in rows
        ]

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    @_store_errors("list_categories")
    async def list_categories(self) -> List[Category]:
        active_count = func.count(case((SentimentKeywordRow.is_active.is_(True), 1)))
        stmt = (
            select(SentimentCategoryRow, func.count(SentimentKeywordRow.id), active_count)
            .outerjoin(
                SentimentKeywordRow,
                SentimentKeywordRow.category_id == SentimentCategoryRow.id,
            )
            .where(SentimentCategoryRow.is_active.is_(True))
            .group_by(SentimentCategoryRow.id)
            .order_by(SentimentCategoryRow.name)
        )
        async with self._session() as session:
            rows = (await session.execute(stmt)).all()

        return [
            Category(
                id=cat.id,
                name=cat.name,
                description=cat.description,
                color=cat.color,
                active=bool(cat.is_active),
                keyword_count=int(total),
                active_keyword_count=int(active or 0),
            )
            for cat, total, active in rows
        ]

    @_store_errors("category_exists")
    async def category_exists(self, name: str) -> bool:
        stmt = (
            select(SentimentCategoryRow.id)
            .where(func.lower(SentimentCategoryRow.name) == func.lower(name.strip()))
            .limit(1)
        )
        async with self._session() as session:
            return (await session.execute(stmt)).scalar_one_or_none() is not None

    @_store_errors("insert_category")
    async def insert_category(
        self, name: str, description: Optional[str] = None, color: Optional[str] = None
    ) -> Category:
        row = SentimentCategoryRow(
            name=name.strip(), description=description or None, color=color or "#gray"
        )
        async with self._session() as session:
            session.add(row)
            await session.flush()
            await session.refresh(row)
            return Category(
                id=row.id,
                name=row.name,
                description=row.description,
                color=row.color,
                active=bool(row.is_active),
            )

    @_store_errors("category_ids_by_name")
    async def category_ids_by_name(self) -> Dict[str, int]:
        async with self._session() as session:
            rows = (
                await session.execute(select(SentimentCategoryRow.id, SentimentCategoryRow.name))
            ).all()
        return {name: id_ for id_, name in rows}
