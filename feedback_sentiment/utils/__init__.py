"""
Utility functions and dependency injection.
"""

from .dependencies import (
    get_sentiment_analyzer,
    get_feedback_repository,
    get_classification_service,
    get_feedback_service,
)
from .security import require_admin_api_key

__all__ = [
    "get_sentiment_analyzer",
    "get_feedback_repository",
    "get_classification_service",
    "get_feedback_service",
    "require_admin_api_key",
]
