# schemas/feedback_schemas.py

"""
Feedback and sentiment API schemas for request/response DTOs.
"""

from datetime import datetime
from typing import List, Optional, Dict
from pydantic import BaseModel, Field

from ..models.feedback import Feedback, FeedbackAggregation
from ..models.sentiment import ClassificationResult, SentimentLabel, SentimentSource


class SentimentAnalysisRequestSchema(BaseModel):
    """Sentiment analysis request DTO."""

    text: str = Field(..., min_length=1, max_length=10000, description="Text to analyze")


class SentimentAnalysisResponseSchema(BaseModel):
    """Sentiment analysis response DTO."""

    sentiment: SentimentLabel
    score: float = Field(..., ge=0.0, le=1.0)
    percentage: int = Field(..., ge=0, le=100, description="Score for display")
    source: SentimentSource
    confidence: Optional[float] = Field(None, ge=0.0, le=1.0)
    fallback_reason: Optional[str] = None

    @classmethod
    def from_result(
        cls, result: ClassificationResult
    ) -> "SentimentAnalysisResponseSchema":
        return cls(
            sentiment=result.sentiment,
            score=result.score,
            percentage=result.percentage,
            source=result.source,
            confidence=getattr(result, "confidence", None),
            fallback_reason=getattr(result, "reason", None),
        )


class FeedbackCreateSchema(BaseModel):
    """Feedback submission DTO. Length rules are enforced by the service."""

    content: str = Field(..., max_length=10000, description="Feedback text")
    user_id: Optional[str] = Field(None, max_length=200, description="Submitting user")


class FeedbackSchema(BaseModel):
    """Feedback DTO for API responses."""

    id: str
    content: str
    user_id: Optional[str] = None
    sentiment: SentimentLabel
    sentiment_score: float
    sentiment_source: SentimentSource
    created_at: datetime

    @classmethod
    def from_model(cls, feedback: Feedback) -> "FeedbackSchema":
        return cls(**feedback.model_dump())


class FeedbackListResponseSchema(BaseModel):
    """Feedback list response DTO."""

    items: List[FeedbackSchema]
    total_count: int
    limit: int
    offset: int


class FeedbackAggregationSchema(BaseModel):
    """Dashboard statistics DTO."""

    total_count: int
    positive_count: int
    negative_count: int
    neutral_count: int
    average_score: float
    sentiment_distribution: Dict[str, float]
    time_period: Optional[str] = None

    @classmethod
    def from_model(cls, aggregation: FeedbackAggregation) -> "FeedbackAggregationSchema":
        return cls(**aggregation.model_dump())
