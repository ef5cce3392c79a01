# utils/dependencies.py

"""
Dependency injection utilities for the feedback sentiment service.

Each provider is cached, so the analyzer, the repository and the services
are built once per process and shared by every request.
"""

from functools import lru_cache
from typing import Optional

from ..adapters.heuristic_sentiment_analyzer import HeuristicSentimentAnalyzer
from ..adapters.openai_sentiment_analyzer import OpenAISentimentAnalyzer
from ..interfaces.feedback_repository import FeedbackRepository
from ..interfaces.sentiment_analyzer import SentimentAnalyzer
from ..repositories.in_memory_feedback_repository import InMemoryFeedbackRepository
from ..repositories.mongodb_feedback_repository import MongoDBFeedbackRepository
from ..services.classification_service import SentimentClassificationService
from ..services.feedback_service import FeedbackService
from ..core.config import settings
from common.logger import LoggerFactory, LoggerType, LogLevel

# Create logger for dependencies
logger = LoggerFactory.get_logger(
    name="dependencies", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
)


@lru_cache()
def get_sentiment_analyzer() -> Optional[SentimentAnalyzer]:
    """Get the primary sentiment analyzer, or None when it is not configured."""
    if not settings.remote_analyzer_enabled:
        logger.warning(
            "Remote sentiment analyzer disabled "
            f"(backend={settings.sentiment_backend}, api key set={bool(settings.openai_api_key)}); "
            "using heuristic scorer only"
        )
        return None

    logger.info("Creating OpenAI sentiment analyzer instance")
    return OpenAISentimentAnalyzer(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        max_tokens=settings.openai_max_tokens,
        max_retries=settings.analysis_retry_attempts,
        timeout=settings.analysis_timeout,
        base_url=settings.openai_base_url,
    )


@lru_cache()
def get_feedback_repository() -> FeedbackRepository:
    """Get feedback repository instance."""
    if settings.repository_backend == "memory":
        logger.info("Creating in-memory feedback repository instance")
        return InMemoryFeedbackRepository()

    logger.info("Creating MongoDB feedback repository instance")
    return MongoDBFeedbackRepository(
        mongo_url=settings.mongodb_url,
        database_name=settings.mongodb_database,
        collection_name=settings.mongodb_collection_feedback,
    )


@lru_cache()
def get_classification_service() -> SentimentClassificationService:
    """Get classification service instance."""
    logger.info("Creating classification service instance")
    return SentimentClassificationService(
        primary=get_sentiment_analyzer(),
        fallback=HeuristicSentimentAnalyzer(),
    )


@lru_cache()
def get_feedback_service() -> FeedbackService:
    """
    Get singleton feedback service instance.

    Returns:
        FeedbackService: Configured feedback service
    """
    logger.info("Creating feedback service instance")
    return FeedbackService(
        classifier=get_classification_service(),
        repository=get_feedback_repository(),
        min_length=settings.feedback_min_length,
        max_length=settings.feedback_max_length,
    )
