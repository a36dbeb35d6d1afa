"""
Rule-based sentiment scoring.

Pure functions over (text, lexicon snapshot). Two variants coexist and
must stay distinct because callers rely on which one runs where:

- full variant (`score_text`): used with the live lexicon; density
  multiplier 2.5 and the four-clause flag rule `should_auto_flag`
- synchronous variant (`analyze_sentiment_sync`): always uses the
  hardcoded fallback lexicon; density multiplier 2.0 and the three-clause
  flag rule `should_auto_flag_sync`

Keywords are literal substrings: they are regex-escaped and matched
case-insensitively, non-overlapping, against the lower-cased text.
Punctuation is kept.
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Pattern

import structlog

from court_sentiment.keywords.fallback import get_fallback_keywords
from court_sentiment.keywords.schemas import LexiconSnapshot, PolarityClass

from .schemas import SentimentLabel, SentimentResult

logger = structlog.get_logger(__name__)

# Per-match contribution = occurrences * weight * multiplier
POLARITY_MULTIPLIERS = {
    PolarityClass.POSITIVE: 0.3,
    PolarityClass.NEGATIVE: 0.4,
    PolarityClass.STRONG_NEGATIVE: 0.6,
}
POLARITY_SIGNS = {
    PolarityClass.POSITIVE: 1,
    PolarityClass.NEGATIVE: -1,
    PolarityClass.STRONG_NEGATIVE: -1,
}
ANNOTATION_PREFIXES = {
    PolarityClass.POSITIVE: "+",
    PolarityClass.NEGATIVE: "-",
    PolarityClass.STRONG_NEGATIVE: "--",
}

LABEL_THRESHOLD = 0.2

CONFIDENCE_MIN = 0.1
CONFIDENCE_MAX = 0.95
FULL_DENSITY_MULTIPLIER = 2.5
SYNC_DENSITY_MULTIPLIER = 2.0


# ============================================================================
# MATCHING
# ============================================================================

@lru_cache(maxsize=4096)
def _keyword_pattern(keyword_text: str) -> Pattern[str]:
    return re.compile(re.escape(keyword_text), re.IGNORECASE)


def count_occurrences(keyword_text: str, lowered_text: str) -> int:
    """
    Count non-overlapping, case-insensitive literal occurrences.

    Examples:
        >>> count_occurrences("tốt", "sân tốt, rất tốt")
        2
        >>> count_occurrences("(vip)", "phòng (vip) đẹp")
        1
    """
    if not keyword_text:
        return 0
    return len(_keyword_pattern(keyword_text).findall(lowered_text))


def format_weight(weight: float) -> str:
    """Render a weight the way annotations show it: 1.0 -> "1", 1.25 -> "1.25"."""
    weight = float(weight)
    if weight.is_integer():
        return str(int(weight))
    return repr(weight)


@dataclass
class MatchTally:
    """Running totals while walking the lexicon."""
    score: float = 0.0
    positive_count: int = 0
    negative_count: int = 0
    strong_negative_count: int = 0
    matched_terms: List[str] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return self.positive_count + self.negative_count + self.strong_negative_count

    def add(self, polarity: PolarityClass, keyword_text: str, weight: float, occurrences: int) -> None:
        if polarity is PolarityClass.POSITIVE:
            self.positive_count += occurrences
        elif polarity is PolarityClass.NEGATIVE:
            self.negative_count += occurrences
        else:
            self.strong_negative_count += occurrences

        contribution = occurrences * (weight * POLARITY_MULTIPLIERS[polarity])
        if POLARITY_SIGNS[polarity] > 0:
            self.score += contribution
        else:
            self.score -= contribution

        self.matched_terms.append(
            f"{ANNOTATION_PREFIXES[polarity]}{keyword_text} ({occurrences}x, w:{format_weight(weight)})"
        )


def tally_matches(lowered_text: str, snapshot: LexiconSnapshot) -> MatchTally:
    """Walk positive, negative, strong negative keywords in lexicon order."""
    tally = MatchTally()
    for polarity, keywords in snapshot.groups():
        for keyword in keywords:
            occurrences = count_occurrences(keyword.text, lowered_text)
            if occurrences > 0:
                tally.add(polarity, keyword.text, keyword.weight, occurrences)
    return tally


# ============================================================================
# DERIVED VALUES
# ============================================================================

def clamp_score(score: float) -> float:
    return max(-1.0, min(1.0, score))


def derive_label(score: float) -> SentimentLabel:
    if score > LABEL_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score < -LABEL_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def count_words(lowered_text: str) -> int:
    """Whitespace-delimited token count, at least 1."""
    return max(len(lowered_text.split()), 1)


def compute_confidence(total_matches: int, total_words: int, density_multiplier: float) -> float:
    """clamp(matches / words * multiplier, 0.1, 0.95)"""
    density = total_matches / max(total_words, 1)
    return min(CONFIDENCE_MAX, max(CONFIDENCE_MIN, density * density_multiplier))


def should_auto_flag(
    score: float, confidence: float, negative_count: int, strong_negative_count: int
) -> bool:
    """
    Flag rule for the full (live lexicon) variant.

    Any strong negative; very negative with decent confidence; three or
    more plain negatives; or moderately negative with two or more negatives.
    """
    return (
        strong_negative_count > 0
        or (score < -0.6 and confidence > 0.3)
        or (negative_count >= 3 and strong_negative_count == 0)
        or (score < -0.4 and negative_count >= 2)
    )


def should_auto_flag_sync(
    score: float, confidence: float, negative_count: int, strong_negative_count: int
) -> bool:
    """Flag rule for the synchronous fallback variant."""
    return (
        strong_negative_count > 0
        or (score < -0.5 and confidence > 0.3)
        or negative_count >= 3
    )


# ============================================================================
# VARIANTS
# ============================================================================

def score_text(text: str, snapshot: LexiconSnapshot) -> SentimentResult:
    """
    Score text against a lexicon snapshot (full variant).

    Args:
        text: Raw review text
        snapshot: Lexicon to match

    Returns:
        SentimentResult
    """
    lowered = text.lower()
    tally = tally_matches(lowered, snapshot)

    score = clamp_score(tally.score)
    confidence = compute_confidence(tally.total_matches, count_words(lowered), FULL_DENSITY_MULTIPLIER)

    return SentimentResult(
        score=score,
        label=derive_label(score),
        confidence=confidence,
        flagged=should_auto_flag(
            score, confidence, tally.negative_count, tally.strong_negative_count
        ),
        matched_terms=tally.matched_terms,
    )


def analyze_sentiment_sync(text: str) -> SentimentResult:
    """
    Score text with the hardcoded fallback lexicon, without touching the store.

    For contexts that cannot await the keyword store. Occurrences are
    counted like the full variant, so repeated keywords accumulate.
    """
    lowered = text.lower()
    tally = tally_matches(lowered, get_fallback_keywords())

    score = clamp_score(tally.score)
    confidence = compute_confidence(tally.total_matches, count_words(lowered), SYNC_DENSITY_MULTIPLIER)

    return SentimentResult(
        score=score,
        label=derive_label(score),
        confidence=confidence,
        flagged=should_auto_flag_sync(
            score, confidence, tally.negative_count, tally.strong_negative_count
        ),
        matched_terms=tally.matched_terms,
    )
