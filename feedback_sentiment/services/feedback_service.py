# services/feedback_service.py

"""
Feedback service layer: validation, classification and storage.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from ..interfaces.feedback_repository import FeedbackRepository
from ..models.feedback import Feedback, FeedbackQueryFilter, FeedbackAggregation
from .classification_service import SentimentClassificationService
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="feedback-service", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
)


class FeedbackValidationError(Exception):
    """Raised when submitted feedback does not meet the content rules."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FeedbackService:
    """
    Service layer for feedback submission and dashboard queries.
    """

    def __init__(
        self,
        classifier: SentimentClassificationService,
        repository: FeedbackRepository,
        min_length: int = 10,
        max_length: int = 1000,
    ):
        """
        Initialize feedback service.

        Args:
            classifier: Sentiment classification service
            repository: Feedback repository for storage
            min_length: Minimum trimmed content length
            max_length: Maximum trimmed content length
        """
        self.classifier = classifier
        self.repository = repository
        self.min_length = min_length
        self.max_length = max_length

        logger.info("Feedback service initialized successfully")

    def validate_content(self, content: str) -> str:
        """
        Trim content and check its length.

        Returns:
            str: Trimmed content

        Raises:
            FeedbackValidationError: When the content is too short or too long
        """
        trimmed = (content or "").strip()
        if len(trimmed) < self.min_length:
            raise FeedbackValidationError(
                f"Feedback must be at least {self.min_length} characters",
                details={"length": len(trimmed), "min_length": self.min_length},
            )
        if len(trimmed) > self.max_length:
            raise FeedbackValidationError(
                f"Feedback must be less than {self.max_length} characters",
                details={"length": len(trimmed), "max_length": self.max_length},
            )
        return trimmed

    async def submit_feedback(
        self, content: str, user_id: Optional[str] = None
    ) -> Feedback:
        """
        Validate, classify and store feedback.

        Args:
            content: Feedback text
            user_id: Submitting user, None for guests

        Returns:
            Feedback: Stored record

        Raises:
            FeedbackValidationError: When the content is invalid
            FeedbackRepositoryError: When the record cannot be stored
        """
        trimmed = self.validate_content(content)
        result = await self.classifier.classify(trimmed)

        feedback = Feedback(
            content=trimmed,
            user_id=user_id,
            sentiment=result.sentiment,
            sentiment_score=result.score,
            sentiment_source=result.source,
        )
        await self.repository.save_feedback(feedback)

        logger.info(
            f"Feedback {feedback.id} stored: {feedback.sentiment.value} "
            f"({feedback.sentiment_score:.2f}, {feedback.sentiment_source.value})"
        )
        return feedback

    async def get_feedback(self, feedback_id: str) -> Optional[Feedback]:
        feedback = await self.repository.get_feedback(feedback_id)
        if not feedback:
            logger.debug(f"No feedback found: {feedback_id}")
        return feedback

    async def list_feedback(
        self, filter_params: FeedbackQueryFilter
    ) -> Tuple[List[Feedback], int]:
        """
        List feedback, newest first.

        Returns:
            Tuple[List[Feedback], int]: Page of feedback and the total match count
        """
        items = await self.repository.list_feedback(filter_params)
        total = await self.repository.count_feedback(filter_params)
        logger.debug(f"Listed {len(items)} of {total} feedback records")
        return items, total

    async def delete_feedback(self, feedback_id: str) -> bool:
        deleted = await self.repository.delete_feedback(feedback_id)
        if deleted:
            logger.info(f"Deleted feedback: {feedback_id}")
        return deleted

    async def get_aggregation(
        self,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> FeedbackAggregation:
        filter_params = FeedbackQueryFilter(date_from=date_from, date_to=date_to)
        aggregation = await self.repository.get_aggregation(
            date_from=filter_params.date_from, date_to=filter_params.date_to
        )
        logger.info(f"Retrieved feedback aggregation: {aggregation.total_count} total items")
        return aggregation

    async def health_check(self) -> dict:
        """
        Check classifier and repository health.

        Returns:
            dict: Component name to "healthy" / "unhealthy"
        """
        classifier_healthy = await self.classifier.health_check()
        try:
            repository_healthy = await self.repository.ping()
        except Exception as e:
            logger.error(f"Repository health check failed: {e}")
            repository_healthy = False

        return {
            "sentiment_analyzer": "healthy" if classifier_healthy else "unhealthy",
            "feedback_repository": "healthy" if repository_healthy else "unhealthy",
        }
