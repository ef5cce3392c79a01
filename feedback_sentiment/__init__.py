# feedback_sentiment/__init__.py
"""
Feedback Sentiment Service - feedback collection with sentiment tagging.
"""

__version__ = "1.0.0"
__title__ = "Feedback Sentiment Service"
__description__ = (
    "Feedback collection service with AI sentiment tagging and a heuristic fallback"
)
