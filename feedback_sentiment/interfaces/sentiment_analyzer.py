"""
Sentiment analyzer interface for feedback text.
"""

from abc import ABC, abstractmethod

from ..models.sentiment import ClassificationResult


class SentimentAnalyzer(ABC):
    """Abstract base class for sentiment analyzers."""

    @abstractmethod
    async def analyze(self, text: str) -> ClassificationResult:
        """
        Analyze sentiment of a single text.

        Args:
            text: Text content to analyze

        Returns:
            ClassificationResult: Analysis result tagged with its source

        Raises:
            SentimentAnalysisError: When analysis fails
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the sentiment analyzer is healthy and accessible.

        Returns:
            bool: True if healthy, False otherwise
        """
        pass


class SentimentAnalysisError(Exception):
    """Base exception for sentiment analysis operations."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
