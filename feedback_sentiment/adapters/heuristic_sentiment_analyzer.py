# adapters/heuristic_sentiment_analyzer.py

"""
Sentiment analyzer backed by the local keyword scorer.
"""

from typing import Optional

from ..interfaces.sentiment_analyzer import SentimentAnalyzer
from ..core.heuristic_scorer import score_sentiment
from ..models.sentiment import FallbackSentimentResult
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="heuristic-sentiment-analyzer",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


class HeuristicSentimentAnalyzer(SentimentAnalyzer):
    """Keyword counting analyzer. Never fails and needs no network access."""

    async def analyze(
        self, text: str, reason: Optional[str] = None
    ) -> FallbackSentimentResult:
        result = self.score(text, reason)
        logger.debug(f"Heuristic sentiment: {result.sentiment.value} ({result.score:.2f})")
        return result

    def score(self, text: str, reason: Optional[str] = None) -> FallbackSentimentResult:
        """Synchronous variant of analyze()."""
        result = score_sentiment(text)
        return FallbackSentimentResult(
            sentiment=result.sentiment, score=result.score, reason=reason
        )

    async def health_check(self) -> bool:
        return True
