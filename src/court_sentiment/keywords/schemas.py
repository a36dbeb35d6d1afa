"""
Keyword domain models.

Defines Pydantic models for:
- Polarity classes
- Keywords (stored or fallback)
- Keyword create/update payloads
- Lexicon snapshots consumed by the scorer
- Admin listing, import, export and reseed reports
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# ENUMS
# ============================================================================

class PolarityClass(str, Enum):
    """Keyword polarity classes (stored in the `type` column)."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    STRONG_NEGATIVE = "strong_negative"


POLARITY_CLASSES = tuple(p.value for p in PolarityClass)


# ============================================================================
# KEYWORDS
# ============================================================================

class Keyword(BaseModel):
    """
    A single lexicon entry.

    Fallback entries are never persisted and carry id 0.
    """
    model_config = ConfigDict(frozen=True)

    id: int = 0
    text: str = Field(..., description="Literal substring to match (case-insensitive)")
    polarity_class: PolarityClass
    weight: float = Field(1.0, description="Match multiplier, 0.1-2.0")
    language: str = "vi"
    active: bool = True
    category_id: Optional[int] = None
    category_name: Optional[str] = None


class KeywordCreate(BaseModel):
    """
    Payload for adding a keyword.

    Fields are loosely typed on purpose: rule checks happen in
    `validate_keyword_data` so every violation is reported at once.
    """
    text: str = ""
    polarity_class: str = ""
    weight: Optional[float] = None
    language: str = "vi"
    category_id: Optional[int] = None
    active: bool = True


class KeywordUpdate(BaseModel):
    """Partial update; only fields that are set are written."""
    text: Optional[str] = None
    polarity_class: Optional[str] = None
    weight: Optional[float] = None
    category_id: Optional[int] = None
    active: Optional[bool] = None


# ============================================================================
# LEXICON SNAPSHOT
# ============================================================================

@dataclass(frozen=True)
class LexiconSnapshot:
    """
    Grouped, immutable view of one language's active keywords.

    A snapshot is either built entirely from the store or is entirely the
    hardcoded fallback lexicon; `source` records which.
    """
    positive: Tuple[Keyword, ...]
    negative: Tuple[Keyword, ...]
    strong_negative: Tuple[Keyword, ...]
    loaded_at: float
    language: str = "vi"
    source: str = "store"  # "store" | "fallback"

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"

    def groups(self) -> List[Tuple[PolarityClass, Tuple[Keyword, ...]]]:
        """Return (polarity, keywords) pairs in scoring order."""
        return [
            (PolarityClass.POSITIVE, self.positive),
            (PolarityClass.NEGATIVE, self.negative),
            (PolarityClass.STRONG_NEGATIVE, self.strong_negative),
        ]

    def __len__(self) -> int:
        return len(self.positive) + len(self.negative) + len(self.strong_negative)


# ============================================================================
# ADMIN MODELS
# ============================================================================

class KeywordFilter(BaseModel):
    """Listing filter; "all" disables a filter."""
    type: str = "all"
    category: str = "all"
    language: str = "vi"
    active: str = "all"  # "all" | "true" | "false"
    search: str = ""
    page: int = Field(1, ge=1)
    limit: int = Field(50, ge=1)

    @field_validator("category")
    @classmethod
    def category_is_all_or_id(cls, v: str) -> str:
        """Category filter is "all" or a numeric category id."""
        if v != "all" and not v.isdigit():
            raise ValueError(f"category must be 'all' or a numeric id, got {v!r}")
        return v


class KeywordStats(BaseModel):
    """Active keyword counts per polarity class."""
    positive: int = 0
    negative: int = 0
    strong_negative: int = 0
    total_active: int = 0


class KeywordPage(BaseModel):
    """Paginated keyword listing."""
    items: List[Keyword]
    page: int
    limit: int
    total: int
    pages: int
    stats: KeywordStats


class ImportReport(BaseModel):
    """Outcome of a keyword import."""
    success_count: int = 0
    error_count: int = 0
    errors: List[str] = Field(default_factory=list)


class ExportResult(BaseModel):
    """Exported keyword rows plus a suggested filename."""
    rows: List[Dict[str, Any]]
    filename: str


class ReseedReport(BaseModel):
    """Outcome of a full reseed."""
    cleared_count: int = 0
    total_seeded: int = 0
    error_count: int = 0
    errors: List[str] = Field(default_factory=list)


class Category(BaseModel):
    """Keyword category (grouping only, unused by scoring)."""
    id: int
    name: str
    description: Optional[str] = None
    color: str = "#gray"
    active: bool = True
    keyword_count: int = 0
    active_keyword_count: int = 0
