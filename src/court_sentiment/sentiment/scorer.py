"""
Sentiment scoring strategies.

- SentimentScorer: strategy interface
- RuleBasedScorer: lexicon-driven scoring using the keyword accessor
- ExternalModelScorer: hosted LLM (OpenAI-compatible) with unconditional
  fallback to another scorer on any failure
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import structlog
from openai import AsyncOpenAI

from court_sentiment.config import settings
from court_sentiment.keywords.accessor import KeywordAccessor
from court_sentiment.keywords.fallback import get_fallback_keywords

from .schemas import SentimentResult
from .scoring import score_text

logger = structlog.get_logger(__name__)


PROVIDER_BASE_URLS = {
    "openai": "https://api.openai.com/v1",
    "deepseek": "https://api.deepseek.com",
    "openrouter": "https://openrouter.ai/api/v1",
}

SYSTEM_PROMPT = """You are a sentiment analysis expert for Vietnamese text. Analyze the sentiment of reviews about sports courts/facilities.
Respond with ONLY a JSON object containing:
- score: number from -1.0 (very negative) to 1.0 (very positive)
- label: "positive", "negative", or "neutral"
- confidence: number from 0 to 1
- flagged: boolean (true if review is inappropriate/very negative and should be hidden)
- keywordsFound: array of strings (key phrases that influenced the sentiment)

Consider Vietnamese cultural context and sports facility review patterns."""


# ============================================================================
# STRATEGY INTERFACE
# ============================================================================

class SentimentScorer(ABC):
    """Scores free text into a SentimentResult."""

    name = "abstract"

    @abstractmethod
    async def analyze(self, text: str, language: str = "vi") -> SentimentResult:
        """
        Score a review.

        Implementations never raise.
        """


# ============================================================================
# RULE-BASED
# ============================================================================

class RuleBasedScorer(SentimentScorer):
    """
    Lexicon-driven scorer backed by the keyword accessor.

    Args:
        accessor: Keyword accessor (default: new accessor on the SQL store)
    """

    name = "rule_based"

    def __init__(self, accessor: Optional[KeywordAccessor] = None):
        self.accessor = accessor if accessor is not None else KeywordAccessor()

    async def analyze(self, text: str, language: str = "vi") -> SentimentResult:
        try:
            snapshot = await self.accessor.get_keywords(language)
        except Exception as e:
            logger.warning("lexicon_load_failed_using_fallback", language=language, error=str(e))
            snapshot = get_fallback_keywords()

        result = score_text(text, snapshot)

        logger.debug(
            "sentiment_scored",
            strategy=self.name,
            language=language,
            lexicon_source=snapshot.source,
            score=result.score,
            label=result.label.value,
            flagged=result.flagged,
        )
        return result


# ============================================================================
# EXTERNAL MODEL
# ============================================================================

def parse_model_output(content: str) -> SentimentResult:
    """
    Parse the model's JSON answer into a SentimentResult.

    Raises:
        ValueError: Content is not a JSON object
        pydantic.ValidationError: Fields missing or out of range
    """
    data: Dict[str, Any] = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("Model output is not a JSON object")

    return SentimentResult.model_validate(
        {
            "score": data.get("score"),
            "label": data.get("label"),
            "confidence": data.get("confidence"),
            "flagged": data.get("flagged"),
            "matched_terms": data.get("keywordsFound") or [],
        }
    )


def create_external_client(
    provider: Optional[str] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Optional[AsyncOpenAI]:
    """
    Build an async OpenAI-compatible client from settings.

    Returns:
        AsyncOpenAI, or None when no API key is configured

    Raises:
        ValueError: Unknown provider (only checked when an API key is set)
    """
    provider = provider or settings.llm_provider
    api_key = api_key if api_key is not None else settings.llm_api_key

    if not api_key:
        logger.info("external_sentiment_client_disabled", provider=provider)
        return None

    if provider not in PROVIDER_BASE_URLS:
        raise ValueError(
            f"Unknown LLM provider: {provider}. Supported: {', '.join(PROVIDER_BASE_URLS)}"
        )

    return AsyncOpenAI(
        api_key=api_key,
        base_url=base_url or settings.llm_api_base_url or PROVIDER_BASE_URLS[provider],
        timeout=settings.llm_timeout_seconds,
        max_retries=settings.llm_max_retries,
    )


class ExternalModelScorer(SentimentScorer):
    """
    Delegates scoring to a hosted chat model.

    Any failure (no client configured, API error, non-JSON or invalid
    answer) falls back to `fallback`, whose contract is unchanged.

    Args:
        fallback: Scorer used when the external call fails
        client: AsyncOpenAI-compatible client, or None to always fall back
        model: Chat model name
    """

    name = "external_model"

    def __init__(
        self,
        fallback: SentimentScorer,
        client: Optional[AsyncOpenAI] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self.fallback = fallback
        self.client = client
        self.model = model or settings.llm_model
        self.temperature = settings.llm_temperature if temperature is None else temperature
        self.max_tokens = max_tokens or settings.llm_max_tokens

        self.logger = logger.bind(scorer=self.name, model=self.model)

    @property
    def enabled(self) -> bool:
        return self.client is not None

    async def analyze(self, text: str, language: str = "vi") -> SentimentResult:
        if self.client is None:
            self.logger.debug("external_sentiment_not_configured")
            return await self.fallback.analyze(text, language)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": f'Analyze this Vietnamese review: "{text}"'},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
            result = parse_model_output(response.choices[0].message.content or "")
        except Exception as e:
            self.logger.error(
                "external_sentiment_failed",
                error=str(e),
                error_type=type(e).__name__,
                fallback=self.fallback.name,
            )
            return await self.fallback.analyze(text, language)

        self.logger.info(
            "external_sentiment_scored",
            score=result.score,
            label=result.label.value,
            flagged=result.flagged,
        )
        return result
