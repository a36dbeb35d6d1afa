"""
Unit tests for scoring strategies and the sentiment service.

The hosted model is replaced by a mock AsyncOpenAI-compatible client;
no API calls are made.
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from court_sentiment.config import settings
from court_sentiment.errors import StoreUnavailableError
from court_sentiment.sentiment import service as service_module
from court_sentiment.sentiment.schemas import SentimentLabel, SentimentResult
from court_sentiment.sentiment.scorer import (
    ExternalModelScorer,
    RuleBasedScorer,
    create_external_client,
    parse_model_output,
)
from court_sentiment.sentiment.service import (
    SentimentService,
    analyze_sentiment,
    set_sentiment_service,
)


def chat_response(content: str) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def mock_client(content: str = None, error: Exception = None) -> MagicMock:
    client = MagicMock()
    if error is not None:
        client.chat.completions.create = AsyncMock(side_effect=error)
    else:
        client.chat.completions.create = AsyncMock(return_value=chat_response(content))
    return client


MODEL_ANSWER = json.dumps(
    {
        "score": -0.8,
        "label": "negative",
        "confidence": 0.9,
        "flagged": True,
        "keywordsFound": ["lừa đảo"],
    }
)


class TestParseModelOutput:
    """Test parsing of the model's JSON answer."""

    def test_valid_answer(self):
        result = parse_model_output(MODEL_ANSWER)

        assert result.score == -0.8
        assert result.label == SentimentLabel.NEGATIVE
        assert result.flagged is True
        assert result.matched_terms == ["lừa đảo"]

    def test_non_json(self):
        with pytest.raises(ValueError):
            parse_model_output("I think it is negative")

    def test_not_an_object(self):
        with pytest.raises(ValueError):
            parse_model_output("[1, 2]")

    def test_out_of_range_score(self):
        with pytest.raises(ValueError):
            parse_model_output(json.dumps({"score": 3, "label": "positive", "confidence": 1, "flagged": False}))


@pytest.mark.asyncio
class TestRuleBasedScorer:
    """Test the lexicon-backed strategy."""

    async def test_uses_accessor_lexicon(self, accessor, fake_store):
        result = await RuleBasedScorer(accessor).analyze("Sân tốt nhưng tệ", "vi")

        assert result.matched_terms == ["+tốt (1x, w:1)", "-tệ (1x, w:1)"]
        assert fake_store.read_count == 1

    async def test_accessor_exception_uses_fallback(self):
        accessor = MagicMock()
        accessor.get_keywords = AsyncMock(side_effect=StoreUnavailableError("down"))

        result = await RuleBasedScorer(accessor).analyze("Sân rất tốt, sạch sẽ")

        assert result.label == SentimentLabel.POSITIVE

    async def test_store_outage_still_scores(self, accessor, fake_store, sample_reviews):
        fake_store.fail = True

        result = await RuleBasedScorer(accessor).analyze(sample_reviews["strong_negative"])

        assert result.score == -1.0
        assert result.flagged is True


@pytest.mark.asyncio
class TestExternalModelScorer:
    """Test delegation to the hosted model and its fallback."""

    async def test_uses_model_answer(self, accessor):
        client = mock_client(MODEL_ANSWER)
        scorer = ExternalModelScorer(RuleBasedScorer(accessor), client=client, model="test-model")

        result = await scorer.analyze("Dịch vụ lừa đảo")

        assert result.score == -0.8
        assert result.matched_terms == ["lừa đảo"]
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert "Dịch vụ lừa đảo" in kwargs["messages"][1]["content"]

    async def test_no_client_falls_back(self, accessor, fake_store):
        scorer = ExternalModelScorer(RuleBasedScorer(accessor), client=None)

        result = await scorer.analyze("Sân tốt")

        assert not scorer.enabled
        assert result.matched_terms == ["+tốt (1x, w:1)"]

    @pytest.mark.parametrize(
        "client",
        [
            mock_client(error=RuntimeError("API timeout")),
            mock_client("not json at all"),
            mock_client(json.dumps({"score": "very bad"})),
            mock_client(""),
        ],
        ids=["api_error", "non_json", "invalid_schema", "empty"],
    )
    async def test_failures_fall_back(self, accessor, client):
        rule_based = RuleBasedScorer(accessor)
        scorer = ExternalModelScorer(rule_based, client=client)

        result = await scorer.analyze("Sân tốt")

        assert result == await rule_based.analyze("Sân tốt")


class TestCreateExternalClient:
    """Test client construction from settings."""

    def test_no_api_key_disables(self):
        assert create_external_client(provider="openai", api_key="") is None

    def test_provider_base_url(self):
        client = create_external_client(provider="deepseek", api_key="sk-test")
        assert str(client.base_url).startswith("https://api.deepseek.com")

    def test_explicit_base_url(self):
        client = create_external_client(
            provider="openai", api_key="sk-test", base_url="http://localhost:8080/v1"
        )
        assert str(client.base_url).startswith("http://localhost:8080/v1")

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            create_external_client(provider="acme", api_key="sk-test")

    def test_unknown_provider_without_key_disables(self):
        """Provider is not checked while the external path is disabled."""
        assert create_external_client(provider="opnai", api_key="") is None


@pytest.mark.asyncio
class TestSentimentService:
    """Test strategy selection and the module entry point."""

    async def test_rule_based_by_default(self, accessor):
        client = mock_client(MODEL_ANSWER)
        service = SentimentService(accessor=accessor, external_client=client)

        result = await service.analyze("Sân tốt")

        assert result.label == SentimentLabel.POSITIVE
        client.chat.completions.create.assert_not_called()

    async def test_external_when_requested(self, accessor):
        service = SentimentService(accessor=accessor, external_client=mock_client(MODEL_ANSWER))

        result = await service.analyze("Sân tốt", use_external_model=True)

        assert result.score == -0.8

    async def test_external_requested_but_not_configured(self, accessor):
        service = SentimentService(accessor=accessor, external_client=None)

        result = await service.analyze("Sân tốt", use_external_model=True)

        assert result.matched_terms == ["+tốt (1x, w:1)"]

    async def test_analyze_sentiment_entry_point(self, accessor, sample_reviews):
        set_sentiment_service(SentimentService(accessor=accessor))
        try:
            result = await analyze_sentiment(sample_reviews["neutral"], language="vi")
        finally:
            set_sentiment_service(None)

        assert isinstance(result, SentimentResult)
        assert result.label == SentimentLabel.NEUTRAL
        assert service_module._service is None

    async def test_misconfigured_provider_still_scores(self, accessor, monkeypatch):
        """A bad LLM_PROVIDER disables the external path instead of failing every call."""
        monkeypatch.setattr(settings, "llm_provider", "opnai")
        monkeypatch.setattr(settings, "llm_api_key", "sk-test")
        monkeypatch.setattr(service_module, "KeywordAccessor", lambda: accessor)
        set_sentiment_service(None)
        try:
            result = await analyze_sentiment("Sân rất tốt", use_external_model=False)
            external_enabled = service_module.get_sentiment_service().external.enabled
        finally:
            set_sentiment_service(None)

        assert result.label == SentimentLabel.POSITIVE
        assert external_enabled is False
