# schemas/__init__.py

"""
API schemas for request/response DTOs.
"""

from .feedback_schemas import (
    SentimentAnalysisRequestSchema,
    SentimentAnalysisResponseSchema,
    FeedbackCreateSchema,
    FeedbackSchema,
    FeedbackListResponseSchema,
    FeedbackAggregationSchema,
)
from .common_schemas import HealthCheckSchema, ErrorResponseSchema

__all__ = [
    # Feedback schemas
    "SentimentAnalysisRequestSchema",
    "SentimentAnalysisResponseSchema",
    "FeedbackCreateSchema",
    "FeedbackSchema",
    "FeedbackListResponseSchema",
    "FeedbackAggregationSchema",
    # Common schemas
    "HealthCheckSchema",
    "ErrorResponseSchema",
]
