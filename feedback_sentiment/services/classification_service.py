# services/classification_service.py

"""
Sentiment classification with a remote primary and a heuristic fallback.
"""

from typing import Optional

from ..adapters.heuristic_sentiment_analyzer import HeuristicSentimentAnalyzer
from ..interfaces.sentiment_analyzer import SentimentAnalyzer, SentimentAnalysisError
from ..models.sentiment import (
    ClassificationResult,
    FallbackSentimentResult,
    SentimentResult,
)
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="classification-service", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
)


class SentimentClassificationService:
    """
    Classifies feedback text.

    The primary analyzer is tried first. Any failure, including a malformed
    response, switches to the heuristic scorer, so classify() always returns
    a result.
    """

    def __init__(
        self,
        primary: Optional[SentimentAnalyzer] = None,
        fallback: Optional[HeuristicSentimentAnalyzer] = None,
    ):
        """
        Initialize classification service.

        Args:
            primary: Remote analyzer, or None to always use the fallback
            fallback: Heuristic analyzer used when the primary fails
        """
        self.primary = primary
        self.fallback = fallback or HeuristicSentimentAnalyzer()

        logger.info(
            "Classification service initialized with primary analyzer: "
            f"{type(primary).__name__ if primary else 'none'}"
        )

    async def classify(self, text: str) -> ClassificationResult:
        """
        Classify text, falling back to the heuristic scorer on failure.

        Args:
            text: Feedback text

        Returns:
            ClassificationResult: Remote or fallback result
        """
        if self.primary is None:
            return self.fallback.score(text, reason="remote classifier not configured")

        try:
            result = await self.primary.analyze(text)
        except SentimentAnalysisError as e:
            logger.warning(f"Sentiment analysis error, using fallback: {e.message}")
            return self.fallback.score(text, reason=e.message)
        except Exception as e:
            logger.warning(f"Failed to call sentiment analyzer, using fallback: {e!r}")
            return self.fallback.score(text, reason=f"unexpected error: {e}")

        if not isinstance(result, SentimentResult):
            logger.warning(
                f"Sentiment analyzer returned {type(result).__name__}, using fallback"
            )
            return self.fallback.score(text, reason="malformed analyzer response")

        return result

    def score_locally(self, text: str) -> FallbackSentimentResult:
        """Run only the heuristic scorer."""
        return self.fallback.score(text, reason="heuristic requested")

    async def health_check(self) -> bool:
        """
        Check the primary analyzer.

        Returns:
            bool: True when the primary analyzer is healthy or not configured
        """
        if self.primary is None:
            return True
        try:
            return await self.primary.health_check()
        except Exception as e:
            logger.error(f"Primary analyzer health check failed: {e}")
            return False
