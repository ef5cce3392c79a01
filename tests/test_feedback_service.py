# tests/test_feedback_service.py

"""
Tests for feedback submission, listing, deletion and statistics.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from feedback_sentiment.interfaces.feedback_repository import FeedbackRepositoryError
from feedback_sentiment.models.feedback import Feedback, FeedbackQueryFilter
from feedback_sentiment.models.sentiment import (
    RemoteSentimentResult,
    SentimentLabel,
    SentimentSource,
)
from feedback_sentiment.services.classification_service import (
    SentimentClassificationService,
)
from feedback_sentiment.services.feedback_service import (
    FeedbackService,
    FeedbackValidationError,
)

from conftest import StubAnalyzer


class TestSubmitFeedback:
    """Test cases for FeedbackService.submit_feedback()."""

    @pytest.mark.asyncio
    async def test_stores_trimmed_classified_feedback(self, feedback_service, repository):
        feedback = await feedback_service.submit_feedback(
            "   This product is absolutely amazing and wonderful!  ", user_id="user-1"
        )

        assert feedback.content == "This product is absolutely amazing and wonderful!"
        assert feedback.user_id == "user-1"
        assert feedback.sentiment == SentimentLabel.POSITIVE
        assert feedback.sentiment_score == pytest.approx(0.9)
        assert feedback.sentiment_source == SentimentSource.FALLBACK
        assert await repository.get_feedback(feedback.id) == feedback

    @pytest.mark.asyncio
    async def test_guest_feedback_has_no_user(self, feedback_service):
        feedback = await feedback_service.submit_feedback("It works fine for me.")

        assert feedback.user_id is None
        assert feedback.sentiment == SentimentLabel.NEUTRAL

    @pytest.mark.asyncio
    async def test_uses_remote_result_when_available(self, repository):
        remote = RemoteSentimentResult(
            sentiment=SentimentLabel.POSITIVE, score=0.77, confidence=0.9
        )
        service = FeedbackService(
            classifier=SentimentClassificationService(primary=StubAnalyzer(result=remote)),
            repository=repository,
        )

        feedback = await service.submit_feedback("Checkout was quick and easy")

        assert feedback.sentiment_source == SentimentSource.REMOTE
        assert feedback.sentiment_score == pytest.approx(0.77)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "too short", "          short     "])
    async def test_rejects_short_content(self, feedback_service, repository, content):
        with pytest.raises(FeedbackValidationError) as exc_info:
            await feedback_service.submit_feedback(content)

        assert "at least 10 characters" in exc_info.value.message
        assert await repository.count_feedback(FeedbackQueryFilter()) == 0

    @pytest.mark.asyncio
    async def test_rejects_long_content(self, feedback_service):
        with pytest.raises(FeedbackValidationError) as exc_info:
            await feedback_service.submit_feedback("x" * 1001)

        assert exc_info.value.details["length"] == 1001

    @pytest.mark.asyncio
    async def test_accepts_length_bounds(self, feedback_service):
        await feedback_service.submit_feedback("x" * 10)
        await feedback_service.submit_feedback("x" * 1000)

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self, classifier):
        repository = AsyncMock()
        repository.save_feedback.side_effect = FeedbackRepositoryError("down")
        service = FeedbackService(classifier=classifier, repository=repository)

        with pytest.raises(FeedbackRepositoryError):
            await service.submit_feedback("A perfectly valid piece of feedback")


class TestFeedbackQueries:
    """Test cases for listing, deleting and aggregating feedback."""

    @pytest.fixture
    def now(self):
        return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    @pytest_asyncio.fixture
    async def seeded(self, repository, now):
        items = [
            Feedback(
                content="great work",
                sentiment=SentimentLabel.POSITIVE,
                sentiment_score=0.9,
                user_id="alice",
                created_at=now - timedelta(days=2),
            ),
            Feedback(
                content="awful support",
                sentiment=SentimentLabel.NEGATIVE,
                sentiment_score=0.1,
                user_id="bob",
                created_at=now - timedelta(days=1),
            ),
            Feedback(
                content="it works",
                sentiment=SentimentLabel.NEUTRAL,
                sentiment_score=0.5,
                created_at=now,
            ),
            Feedback(
                content="love it",
                sentiment=SentimentLabel.POSITIVE,
                sentiment_score=0.8,
                user_id="alice",
                created_at=now - timedelta(days=3),
            ),
        ]
        for item in items:
            await repository.save_feedback(item)
        return items

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, feedback_service, seeded):
        items, total = await feedback_service.list_feedback(FeedbackQueryFilter())

        assert total == 4
        assert [item.content for item in items] == [
            "it works",
            "awful support",
            "great work",
            "love it",
        ]

    @pytest.mark.asyncio
    async def test_list_filters_and_paginates(self, feedback_service, seeded):
        items, total = await feedback_service.list_feedback(
            FeedbackQueryFilter(sentiment=SentimentLabel.POSITIVE, limit=1, offset=1)
        )

        assert total == 2
        assert [item.content for item in items] == ["love it"]

        items, total = await feedback_service.list_feedback(
            FeedbackQueryFilter(user_id="bob")
        )
        assert total == 1
        assert items[0].content == "awful support"

    @pytest.mark.asyncio
    async def test_naive_dates_are_treated_as_utc(self, feedback_service, seeded, now):
        items, total = await feedback_service.list_feedback(
            FeedbackQueryFilter(date_from=(now - timedelta(days=1)).replace(tzinfo=None))
        )

        assert total == 2
        assert {item.content for item in items} == {"it works", "awful support"}

    @pytest.mark.asyncio
    async def test_delete(self, feedback_service, seeded):
        target = seeded[0]

        assert await feedback_service.delete_feedback(target.id) is True
        assert await feedback_service.get_feedback(target.id) is None
        assert await feedback_service.delete_feedback(target.id) is False

    @pytest.mark.asyncio
    async def test_aggregation(self, feedback_service, seeded):
        aggregation = await feedback_service.get_aggregation()

        assert aggregation.total_count == 4
        assert aggregation.positive_count == 2
        assert aggregation.negative_count == 1
        assert aggregation.neutral_count == 1
        assert aggregation.average_score == pytest.approx((0.9 + 0.1 + 0.5 + 0.8) / 4)
        assert aggregation.sentiment_distribution == {
            "positive": 0.5,
            "negative": 0.25,
            "neutral": 0.25,
        }

    @pytest.mark.asyncio
    async def test_aggregation_for_period(self, feedback_service, seeded, now):
        aggregation = await feedback_service.get_aggregation(
            date_from=now - timedelta(days=2), date_to=now - timedelta(days=1)
        )

        assert aggregation.total_count == 2
        assert aggregation.time_period == "2025-05-30 to 2025-05-31"

    @pytest.mark.asyncio
    async def test_empty_aggregation(self, feedback_service):
        aggregation = await feedback_service.get_aggregation()

        assert aggregation.total_count == 0
        assert aggregation.average_score == 0.0
        assert aggregation.sentiment_distribution == {}

    @pytest.mark.asyncio
    async def test_health_check(self, feedback_service):
        assert await feedback_service.health_check() == {
            "sentiment_analyzer": "healthy",
            "feedback_repository": "healthy",
        }
