# tests/conftest.py

"""
Shared fixtures for the feedback sentiment tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from feedback_sentiment.adapters.heuristic_sentiment_analyzer import (
    HeuristicSentimentAnalyzer,
)
from feedback_sentiment.interfaces.sentiment_analyzer import SentimentAnalyzer
from feedback_sentiment.repositories.in_memory_feedback_repository import (
    InMemoryFeedbackRepository,
)
from feedback_sentiment.services.classification_service import (
    SentimentClassificationService,
)
from feedback_sentiment.services.feedback_service import FeedbackService


class StubAnalyzer(SentimentAnalyzer):
    """Analyzer returning a fixed result or raising a fixed error."""

    def __init__(self, result=None, error=None, healthy=True):
        self.result = result
        self.error = error
        self.healthy = healthy
        self.calls = []

    async def analyze(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.result

    async def health_check(self):
        return self.healthy


@pytest.fixture
def repository():
    """Empty in-memory feedback repository."""
    return InMemoryFeedbackRepository()


@pytest.fixture
def classifier():
    """Classifier with no remote analyzer, so every call uses the heuristic."""
    return SentimentClassificationService(
        primary=None, fallback=HeuristicSentimentAnalyzer()
    )


@pytest.fixture
def feedback_service(classifier, repository):
    """Feedback service wired to the heuristic classifier and memory storage."""
    return FeedbackService(
        classifier=classifier, repository=repository, min_length=10, max_length=1000
    )
