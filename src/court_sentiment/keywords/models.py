"""
SQLAlchemy models for the keyword store.

Tables: sentiment_categories, sentiment_keywords.
"""

from sqlalchemy import (
    TIMESTAMP,
    Boolean,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class SentimentCategoryRow(Base):
    """
    Reporting category for keywords (e.g. "Vệ sinh", "Giá cả").

    Not used by scoring.
    """

    __tablename__ = "sentiment_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    color = Column(String(20), nullable=False, default="#gray")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self):
        return f"<SentimentCategoryRow(id={self.id}, name={self.name})>"


class SentimentKeywordRow(Base):
    """
    Weighted sentiment keyword.

    `type` holds the polarity class: positive | negative | strong_negative.
    """

    __tablename__ = "sentiment_keywords"

    id = Column(Integer, primary_key=True, autoincrement=True)
    keyword = Column(String(200), nullable=False)
    type = Column(String(20), nullable=False)
    weight = Column(Float, nullable=False, default=1.0)
    language = Column(String(10), nullable=False, default="vi")
    is_active = Column(Boolean, nullable=False, default=True)
    category_id = Column(
        Integer, ForeignKey("sentiment_categories.id", ondelete="SET NULL"), nullable=True
    )
    created_by = Column(Integer, nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("keyword", "type", "language", name="uq_keyword_type_language"),
        Index("idx_keyword_language_active", "language", "is_active"),
        Index("idx_keyword_type", "type"),
    )

    def __repr__(self):
        return f"<SentimentKeywordRow(id={self.id}, keyword={self.keyword}, type={self.type})>"
