"""
Sentiment entry point for the review moderation workflow.

`analyze_sentiment` is the single function other code calls; it picks the
external-model strategy when asked and configured, the rule-based one
otherwise.
"""

from typing import Optional

import structlog
from openai import AsyncOpenAI

from court_sentiment.keywords.accessor import KeywordAccessor

from .schemas import SentimentResult
from .scorer import ExternalModelScorer, RuleBasedScorer, create_external_client

logger = structlog.get_logger(__name__)


class SentimentService:
    """
    Wires the rule-based and external-model scorers around one accessor.

    Args:
        accessor: Keyword accessor shared by all scoring calls
        external_client: OpenAI-compatible client; None disables the external path
    """

    def __init__(
        self,
        accessor: Optional[KeywordAccessor] = None,
        external_client: Optional[AsyncOpenAI] = None,
    ):
        self.accessor = accessor if accessor is not None else KeywordAccessor()
        self.rule_based = RuleBasedScorer(self.accessor)
        self.external = ExternalModelScorer(fallback=self.rule_based, client=external_client)

    async def analyze(
        self, text: str, use_external_model: bool = False, language: str = "vi"
    ) -> SentimentResult:
        """
        Score a review with the requested strategy.

        Args:
            text: Review text
            use_external_model: Prefer the hosted model when configured
            language: Lexicon language tag

        Returns:
            SentimentResult (never raises)
        """
        scorer = self.external if use_external_model and self.external.enabled else self.rule_based
        return await scorer.analyze(text, language)


_service: Optional[SentimentService] = None


def get_sentiment_service() -> SentimentService:
    """Get or create the process-wide service (singleton)."""
    global _service

    if _service is None:
        try:
            client = create_external_client()
        except ValueError as e:
            logger.warning("external_sentiment_client_misconfigured", error=str(e))
            client = None

        _service = SentimentService(external_client=client)
        logger.info("sentiment_service_created", external_enabled=_service.external.enabled)

    return _service


def set_sentiment_service(service: Optional[SentimentService]) -> None:
    """Replace (or reset with None) the process-wide service."""
    global _service
    _service = service


async def analyze_sentiment(
    text: str, use_external_model: bool = False, language: str = "vi"
) -> SentimentResult:
    """
    Analyze review sentiment.

    Args:
        text: Review text
        use_external_model: Use the hosted model when an API key is configured
        language: Lexicon language tag

    Returns:
        SentimentResult
    """
    return await get_sentiment_service().analyze(text, use_external_model, language)
