# models/__init__.py

"""
Data models for the feedback sentiment service.
"""

from .sentiment import (
    SentimentLabel,
    SentimentSource,
    SentimentResult,
    RemoteSentimentResult,
    FallbackSentimentResult,
    ClassificationResult,
)
from .feedback import Feedback, FeedbackQueryFilter, FeedbackAggregation

__all__ = [
    "SentimentLabel",
    "SentimentSource",
    "SentimentResult",
    "RemoteSentimentResult",
    "FallbackSentimentResult",
    "ClassificationResult",
    "Feedback",
    "FeedbackQueryFilter",
    "FeedbackAggregation",
]
