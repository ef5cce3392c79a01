"""
REST API routes for sentiment classification.
"""

from fastapi import APIRouter, Depends

from ..schemas.feedback_schemas import (
    SentimentAnalysisRequestSchema,
    SentimentAnalysisResponseSchema,
)
from ..services.classification_service import SentimentClassificationService
from ..utils.dependencies import get_classification_service
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="sentiment-router", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
)

router = APIRouter(prefix="/api/v1/sentiment", tags=["sentiment"])


@router.post("/analyze", response_model=SentimentAnalysisResponseSchema)
async def analyze_sentiment(
    request: SentimentAnalysisRequestSchema,
    classifier: SentimentClassificationService = Depends(get_classification_service),
) -> SentimentAnalysisResponseSchema:
    """
    Classify text with the remote analyzer, falling back to the heuristic scorer.

    Args:
        request: Sentiment analysis request
        classifier: Injected classification service

    Returns:
        SentimentAnalysisResponseSchema: Sentiment analysis result
    """
    logger.info(f"Sentiment analysis request for text length: {len(request.text)}")
    result = await classifier.classify(request.text)
    return SentimentAnalysisResponseSchema.from_result(result)


@router.post("/score", response_model=SentimentAnalysisResponseSchema)
async def score_sentiment(
    request: SentimentAnalysisRequestSchema,
    classifier: SentimentClassificationService = Depends(get_classification_service),
) -> SentimentAnalysisResponseSchema:
    """Classify text with the heuristic scorer only."""
    result = classifier.score_locally(request.text)
    return SentimentAnalysisResponseSchema.from_result(result)
