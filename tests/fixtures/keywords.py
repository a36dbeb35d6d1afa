"""
In-memory keyword store and sample reviews for tests.
"""

from typing import Any, Dict, List, Optional

from court_sentiment.errors import KeywordNotFoundError, StoreUnavailableError
from court_sentiment.keywords.schemas import Keyword, PolarityClass
from court_sentiment.keywords.store import KeywordStore


SAMPLE_REVIEWS = {
    "positive": "Sân rất tốt, sạch sẽ, nhân viên thân thiện",
    "strong_negative": "Dịch vụ rất tệ, lừa đảo khách hàng",
    "neutral": "Sân bình thường, không có gì đặc biệt",
}


class FakeKeywordStore(KeywordStore):
    """
    Dict-backed KeywordStore.

    Counts reads and can be switched into a failing state to simulate an
    unreachable database.
    """

    def __init__(self, keywords: Optional[List[Keyword]] = None):
        self.rows: Dict[int, Keyword] = {}
        self.read_count = 0
        self.write_count = 0
        self.fail = False
        self._next_id = 1
        for keyword in keywords or []:
            self._put(keyword)

    def _put(self, keyword: Keyword) -> Keyword:
        stored = keyword.model_copy(update={"id": self._next_id})
        self.rows[stored.id] = stored
        self._next_id += 1
        return stored

    def _check(self) -> None:
        if self.fail:
            raise StoreUnavailableError("connection refused")

    def add(self, text: str, polarity: str, weight: float = 1.0, language: str = "vi", active: bool = True) -> Keyword:
        """Seed a row directly, bypassing validation and counters."""
        return self._put(
            Keyword(
                text=text,
                polarity_class=PolarityClass(polarity),
                weight=weight,
                language=language,
                active=active,
            )
        )

    async def fetch_active_keywords(self, language: str) -> List[Keyword]:
        self.read_count += 1
        self._check()
        rows = [k for k in self.rows.values() if k.language == language and k.active]
        return sorted(rows, key=lambda k: (-k.weight, k.text))

    async def keyword_exists(self, text: str, polarity_class: str, language: str) -> bool:
        self._check()
        return any(
            k.text.lower() == text.strip().lower()
            and k.polarity_class.value == polarity_class
            and k.language == language
            for k in self.rows.values()
        )

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
        self._check()
        self.write_count += 1
        return self._put(
            Keyword(
                text=text,
                polarity_class=PolarityClass(polarity_class),
                weight=weight,
                language=language,
                active=active,
                category_id=category_id,
            )
        )

    async def update_keyword(self, keyword_id: int, fields: Dict[str, Any]) -> Keyword:
        self._check()
        if keyword_id not in self.rows:
            raise KeywordNotFoundError(keyword_id)
        self.write_count += 1
        fields = dict(fields)
        if "polarity_class" in fields:
            fields["polarity_class"] = PolarityClass(fields["polarity_class"])
        updated = self.rows[keyword_id].model_copy(update=fields)
        self.rows[keyword_id] = updated
        return updated

    async def delete_keyword(self, keyword_id: int) -> None:
        self._check()
        if keyword_id not in self.rows:
            raise KeywordNotFoundError(keyword_id)
        self.write_count += 1
        del self.rows[keyword_id]


class ManualClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
