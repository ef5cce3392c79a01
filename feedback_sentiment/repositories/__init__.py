"""
Feedback storage implementations.
"""

from .in_memory_feedback_repository import InMemoryFeedbackRepository
from .mongodb_feedback_repository import MongoDBFeedbackRepository

__all__ = [
    "InMemoryFeedbackRepository",
    "MongoDBFeedbackRepository",
]
