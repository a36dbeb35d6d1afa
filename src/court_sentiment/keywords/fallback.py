"""
Hardcoded fallback lexicon.

Used when the keyword store is unreachable, empty, or the sentiment
tables have not been migrated yet. Vietnamese only.
"""

import time
from typing import List, Tuple

from .schemas import Keyword, LexiconSnapshot, PolarityClass

FALLBACK_LANGUAGE = "vi"

# (text, weight) in lexicon order
FALLBACK_POSITIVE: List[Tuple[str, float]] = [
    ("tốt", 1.0),
    ("hay", 1.0),
    ("đẹp", 1.1),
    ("tuyệt", 1.4),
    ("xuất sắc", 1.5),
    ("hoàn hảo", 1.5),
    ("hài lòng", 1.3),
    ("tuyệt vời", 1.4),
    ("chất lượng", 1.2),
    ("sạch sẽ", 1.2),
]

FALLBACK_NEGATIVE: List[Tuple[str, float]] = [
    ("tệ", 1.0),
    ("dở", 1.0),
    ("kém", 1.0),
    ("xấu", 1.0),
    ("tồi", 1.0),
    ("thất vọng", 1.3),
    ("không hài lòng", 1.2),
    ("bẩn", 1.2),
    ("hỏng", 1.1),
    ("chán", 0.8),
]

FALLBACK_STRONG_NEGATIVE: List[Tuple[str, float]] = [
    ("rất tệ", 2.0),
    ("quá tệ", 2.0),
    ("kinh khủng", 2.0),
    ("thảm họa", 2.0),
    ("lừa đảo", 2.0),
    ("không bao giờ quay lại", 1.8),
    ("tệ nhất", 1.8),
]


def _build(entries: List[Tuple[str, float]], polarity: PolarityClass) -> Tuple[Keyword, ...]:
    return tuple(
        Keyword(
            id=0,
            text=text,
            polarity_class=polarity,
            weight=weight,
            language=FALLBACK_LANGUAGE,
            active=True,
        )
        for text, weight in entries
    )


_POSITIVE = _build(FALLBACK_POSITIVE, PolarityClass.POSITIVE)
_NEGATIVE = _build(FALLBACK_NEGATIVE, PolarityClass.NEGATIVE)
_STRONG_NEGATIVE = _build(FALLBACK_STRONG_NEGATIVE, PolarityClass.STRONG_NEGATIVE)


def get_fallback_keywords(loaded_at: float | None = None) -> LexiconSnapshot:
    """
    Build a snapshot of the hardcoded fallback lexicon.

    The keyword groups are shared immutable tuples, so every snapshot holds
    exactly the same entries in the same order.

    Args:
        loaded_at: Timestamp to stamp on the snapshot (default: now)

    Returns:
        LexiconSnapshot with source="fallback"
    """
    return LexiconSnapshot(
        positive=_POSITIVE,
        negative=_NEGATIVE,
        strong_negative=_STRONG_NEGATIVE,
        loaded_at=time.monotonic() if loaded_at is None else loaded_at,
        language=FALLBACK_LANGUAGE,
        source="fallback",
    )
