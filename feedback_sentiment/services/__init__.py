# services/__init__.py

"""
Business logic services.
"""

from .classification_service import SentimentClassificationService
from .feedback_service import FeedbackService, FeedbackValidationError

__all__ = [
    "SentimentClassificationService",
    "FeedbackService",
    "FeedbackValidationError",
]
