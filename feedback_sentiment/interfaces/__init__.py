"""
Interface definitions for the feedback sentiment service.
"""

from .sentiment_analyzer import SentimentAnalyzer, SentimentAnalysisError
from .feedback_repository import FeedbackRepository, FeedbackRepositoryError

__all__ = [
    "SentimentAnalyzer",
    "SentimentAnalysisError",
    "FeedbackRepository",
    "FeedbackRepositoryError",
]
