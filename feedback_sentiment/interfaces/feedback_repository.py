"""
Repository interface for feedback storage.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import datetime

from ..models.feedback import Feedback, FeedbackQueryFilter, FeedbackAggregation


class FeedbackRepository(ABC):
    """Abstract base class for feedback repositories."""

    async def initialize(self) -> None:
        """Prepare the underlying store (indexes, connections)."""

    async def close(self) -> None:
        """Release resources held by the repository."""

    @abstractmethod
    async def save_feedback(self, feedback: Feedback) -> str:
        """
        Save feedback to storage.

        Args:
            feedback: Feedback to save

        Returns:
            str: Saved feedback ID

        Raises:
            FeedbackRepositoryError: When the write fails
        """
        pass

    @abstractmethod
    async def get_feedback(self, feedback_id: str) -> Optional[Feedback]:
        """
        Retrieve feedback by ID.

        Args:
            feedback_id: Feedback ID

        Returns:
            Optional[Feedback]: Feedback or None if not found
        """
        pass

    @abstractmethod
    async def list_feedback(self, filter_params: FeedbackQueryFilter) -> List[Feedback]:
        """
        List feedback matching the filter, newest first.

        Args:
            filter_params: Filter parameters

        Returns:
            List[Feedback]: Matching feedback
        """
        pass

    @abstractmethod
    async def count_feedback(self, filter_params: FeedbackQueryFilter) -> int:
        """Count feedback matching the filter, ignoring limit and offset."""
        pass

    @abstractmethod
    async def get_aggregation(
        self,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> FeedbackAggregation:
        """
        Get aggregated sentiment statistics.

        Args:
            date_from: Start date filter
            date_to: End date filter

        Returns:
            FeedbackAggregation: Aggregated statistics
        """
        pass

    @abstractmethod
    async def delete_feedback(self, feedback_id: str) -> bool:
        """
        Delete feedback by ID.

        Args:
            feedback_id: Feedback ID

        Returns:
            bool: True if deleted, False if not found
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the store is reachable."""
        pass


class FeedbackRepositoryError(Exception):
    """Base exception for feedback repository operations."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
