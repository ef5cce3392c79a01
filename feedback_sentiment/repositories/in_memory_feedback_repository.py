"""
In-memory feedback repository for development and tests.
"""

import asyncio
from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional

from ..interfaces.feedback_repository import FeedbackRepository
from ..models.feedback import Feedback, FeedbackQueryFilter, FeedbackAggregation
from ..models.sentiment import SentimentLabel
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="in-memory-feedback-repository",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


class InMemoryFeedbackRepository(FeedbackRepository):
    """Process-local feedback store. Contents are lost on restart."""

    def __init__(self):
        self._items: Dict[str, Feedback] = {}
        self._lock = asyncio.Lock()
        logger.info("In-memory feedback repository initialized")

    async def save_feedback(self, feedback: Feedback) -> str:
        async with self._lock:
            self._items[feedback.id] = feedback
        logger.debug(f"Saved feedback: {feedback.id}")
        return feedback.id

    async def get_feedback(self, feedback_id: str) -> Optional[Feedback]:
        return self._items.get(feedback_id)

    async def list_feedback(self, filter_params: FeedbackQueryFilter) -> List[Feedback]:
        matches = self._filter(filter_params)
        return matches[filter_params.offset : filter_params.offset + filter_params.limit]

    async def count_feedback(self, filter_params: FeedbackQueryFilter) -> int:
        return len(self._filter(filter_params))

    async def get_aggregation(
        self,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> FeedbackAggregation:
        items = self._filter(FeedbackQueryFilter(date_from=date_from, date_to=date_to))
        counts = Counter(item.sentiment for item in items)
        return FeedbackAggregation.from_counts(
            counts={label: counts.get(label, 0) for label in SentimentLabel},
            score_sum=sum(item.sentiment_score for item in items),
            time_period=FeedbackAggregation.describe_period(date_from, date_to),
        )

    async def delete_feedback(self, feedback_id: str) -> bool:
        async with self._lock:
            return self._items.pop(feedback_id, None) is not None

    async def ping(self) -> bool:
        return True

    def _filter(self, filter_params: FeedbackQueryFilter) -> List[Feedback]:
        items = [
            item
            for item in self._items.values()
            if (filter_params.sentiment is None or item.sentiment == filter_params.sentiment)
            and (filter_params.user_id is None or item.user_id == filter_params.user_id)
            and (filter_params.date_from is None or item.created_at >= filter_params.date_from)
            and (filter_params.date_to is None or item.created_at <= filter_params.date_to)
        ]
        return sorted(items, key=lambda item: item.created_at, reverse=True)
