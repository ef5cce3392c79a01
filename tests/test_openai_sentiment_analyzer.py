# tests/test_openai_sentiment_analyzer.py

"""
Tests for the OpenAI analyzer: structured output conversion, retries and
failure mapping.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.exceptions import OutputParserException
from pydantic import ValidationError

from feedback_sentiment.adapters.openai_sentiment_analyzer import (
    OpenAISentimentAnalyzer,
    SentimentOutput,
)
from feedback_sentiment.interfaces.sentiment_analyzer import SentimentAnalysisError
from feedback_sentiment.models.sentiment import SentimentLabel, SentimentSource


class UpstreamError(Exception):
    """Error carrying an HTTP status like the OpenAI client errors."""

    def __init__(self, status_code):
        super().__init__(f"upstream returned {status_code}")
        self.status_code = status_code


@pytest.fixture
def analyzer():
    analyzer = OpenAISentimentAnalyzer(
        api_key="test-key", model="gpt-4o-mini", max_retries=3, backoff_seconds=0
    )
    analyzer.chain = MagicMock()
    analyzer.chain.ainvoke = AsyncMock()
    return analyzer


class TestSentimentOutputConversion:
    """Test cases for SentimentOutput and _convert_to_sentiment_result()."""

    def test_converts_full_output(self, analyzer):
        result = analyzer._convert_to_sentiment_result(
            SentimentOutput(sentiment="positive", score=0.85, confidence=0.9)
        )

        assert result.sentiment == SentimentLabel.POSITIVE
        assert result.score == pytest.approx(0.85)
        assert result.confidence == pytest.approx(0.9)
        assert result.source == SentimentSource.REMOTE
        assert result.model == "gpt-4o-mini"

    @pytest.mark.parametrize("score, confidence", [(None, None), (0.0, 0.0)])
    def test_missing_or_zero_values_use_defaults(self, analyzer, score, confidence):
        result = analyzer._convert_to_sentiment_result(
            SentimentOutput(sentiment="neutral", score=score, confidence=confidence)
        )

        assert result.score == pytest.approx(0.5)
        assert result.confidence == pytest.approx(0.8)

    def test_out_of_range_values_are_clamped(self, analyzer):
        result = analyzer._convert_to_sentiment_result(
            SentimentOutput(sentiment="positive", score=1.4, confidence=-3)
        )

        assert result.score == 1.0
        assert result.confidence == 0.0

    def test_schema_rejects_unknown_labels(self):
        with pytest.raises(ValidationError):
            SentimentOutput(sentiment="ecstatic", score=0.9)

    def test_chain_uses_structured_output(self):
        analyzer = OpenAISentimentAnalyzer(api_key="test-key")

        assert analyzer.chain.first is analyzer.prompt
        assert analyzer.structured_llm is not analyzer.llm


class TestOpenAISentimentAnalyzer:
    """Test cases for OpenAISentimentAnalyzer with a mocked chain."""

    @pytest.mark.asyncio
    async def test_analyze_success(self, analyzer):
        analyzer.chain.ainvoke.return_value = SentimentOutput(
            sentiment="positive", score=0.9, confidence=0.95
        )

        result = await analyzer.analyze("Great service")

        assert result.sentiment == SentimentLabel.POSITIVE
        assert result.model == "gpt-4o-mini"
        analyzer.chain.ainvoke.assert_awaited_once_with({"text": "Great service"})

    @pytest.mark.asyncio
    async def test_retries_transient_failures(self, analyzer):
        analyzer.chain.ainvoke.side_effect = [
            ConnectionError("reset"),
            SentimentOutput(sentiment="negative", score=0.1),
        ]

        result = await analyzer.analyze("Terrible checkout")

        assert result.sentiment == SentimentLabel.NEGATIVE
        assert analyzer.chain.ainvoke.await_count == 2

    @pytest.mark.asyncio
    async def test_raises_after_last_attempt(self, analyzer):
        analyzer.chain.ainvoke.side_effect = UpstreamError(429)

        with pytest.raises(SentimentAnalysisError) as exc_info:
            await analyzer.analyze("Anything at all")

        assert exc_info.value.details["status_code"] == 429
        assert exc_info.value.details["attempts"] == 3
        assert "Rate limit" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_quota_errors_are_not_retried(self, analyzer):
        analyzer.chain.ainvoke.side_effect = UpstreamError(402)

        with pytest.raises(SentimentAnalysisError) as exc_info:
            await analyzer.analyze("Anything at all")

        assert analyzer.chain.ainvoke.await_count == 1
        assert "quota" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout_is_reported(self, analyzer):
        async def slow_reply(_input):
            await asyncio.sleep(1)
            return SentimentOutput(sentiment="positive")

        analyzer.timeout = 0.01
        analyzer.max_retries = 1
        analyzer.chain.ainvoke.side_effect = slow_reply

        with pytest.raises(SentimentAnalysisError) as exc_info:
            await analyzer.analyze("Anything at all")

        assert exc_info.value.message == "Sentiment analysis timed out"

    @pytest.mark.asyncio
    async def test_unparseable_reply_raises_after_retries(self, analyzer):
        analyzer.chain.ainvoke.side_effect = OutputParserException(
            "I would say it is mostly fine"
        )

        with pytest.raises(SentimentAnalysisError) as exc_info:
            await analyzer.analyze("Anything at all")

        assert exc_info.value.details["attempts"] == 3

    @pytest.mark.asyncio
    async def test_empty_reply_raises(self, analyzer):
        analyzer.chain.ainvoke.return_value = None

        with pytest.raises(SentimentAnalysisError) as exc_info:
            await analyzer.analyze("Anything at all")

        assert exc_info.value.message == "Empty response from sentiment model"

    @pytest.mark.asyncio
    async def test_blank_text_is_rejected(self, analyzer):
        with pytest.raises(SentimentAnalysisError):
            await analyzer.analyze("   ")

        analyzer.chain.ainvoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_health_check(self, analyzer):
        analyzer.chain.ainvoke.return_value = SentimentOutput(sentiment="positive")
        assert await analyzer.health_check() is True

        analyzer.chain.ainvoke.side_effect = UpstreamError(500)
        assert await analyzer.health_check() is False
