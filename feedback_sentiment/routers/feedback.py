"""
REST API routes for feedback submission, dashboards and administration.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ..interfaces.feedback_repository import FeedbackRepositoryError
from ..models.feedback import FeedbackQueryFilter
from ..models.sentiment import SentimentLabel
from ..schemas.feedback_schemas import (
    FeedbackAggregationSchema,
    FeedbackCreateSchema,
    FeedbackListResponseSchema,
    FeedbackSchema,
)
from ..services.feedback_service import FeedbackService, FeedbackValidationError
from ..utils.dependencies import get_feedback_service
from ..utils.security import require_admin_api_key
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="feedback-router", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
)

router = APIRouter(prefix="/api/v1/feedback", tags=["feedback"])


def _storage_unavailable(e: FeedbackRepositoryError) -> HTTPException:
    logger.error(f"Feedback repository error: {e.message}")
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Feedback storage is unavailable",
    )


@router.post("", response_model=FeedbackSchema, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    request: FeedbackCreateSchema,
    feedback_service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackSchema:
    """
    Submit feedback. The text is classified and stored.

    Args:
        request: Feedback submission
        feedback_service: Injected feedback service

    Returns:
        FeedbackSchema: Stored feedback with its sentiment
    """
    try:
        feedback = await feedback_service.submit_feedback(
            content=request.content, user_id=request.user_id
        )
    except FeedbackValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except FeedbackRepositoryError as e:
        raise _storage_unavailable(e)

    return FeedbackSchema.from_model(feedback)


@router.get("", response_model=FeedbackListResponseSchema)
async def list_feedback(
    sentiment: Optional[SentimentLabel] = Query(None, description="Sentiment filter"),
    user_id: Optional[str] = Query(None, description="Submitting user filter"),
    date_from: Optional[datetime] = Query(None, description="Start date filter"),
    date_to: Optional[datetime] = Query(None, description="End date filter"),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    feedback_service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackListResponseSchema:
    """List feedback, newest first."""
    filter_params = FeedbackQueryFilter(
        sentiment=sentiment,
        user_id=user_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
        offset=offset,
    )
    try:
        items, total = await feedback_service.list_feedback(filter_params)
    except FeedbackRepositoryError as e:
        raise _storage_unavailable(e)

    return FeedbackListResponseSchema(
        items=[FeedbackSchema.from_model(item) for item in items],
        total_count=total,
        limit=limit,
        offset=offset,
    )


@router.get("/stats", response_model=FeedbackAggregationSchema)
async def get_feedback_stats(
    date_from: Optional[datetime] = Query(None, description="Start date filter"),
    date_to: Optional[datetime] = Query(None, description="End date filter"),
    feedback_service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackAggregationSchema:
    """
    Get sentiment counts and distribution for the dashboard.

    Args:
        date_from: Start date filter
        date_to: End date filter
        feedback_service: Injected feedback service

    Returns:
        FeedbackAggregationSchema: Aggregated statistics
    """
    try:
        aggregation = await feedback_service.get_aggregation(
            date_from=date_from, date_to=date_to
        )
    except FeedbackRepositoryError as e:
        raise _storage_unavailable(e)

    return FeedbackAggregationSchema.from_model(aggregation)


@router.get("/{feedback_id}", response_model=FeedbackSchema)
async def get_feedback(
    feedback_id: str,
    feedback_service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackSchema:
    try:
        feedback = await feedback_service.get_feedback(feedback_id)
    except FeedbackRepositoryError as e:
        raise _storage_unavailable(e)

    if not feedback:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Feedback not found"
        )
    return FeedbackSchema.from_model(feedback)


@router.delete(
    "/{feedback_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin_api_key)],
)
async def delete_feedback(
    feedback_id: str,
    feedback_service: FeedbackService = Depends(get_feedback_service),
) -> Response:
    """Delete feedback. Requires the admin API key when one is configured."""
    try:
        deleted = await feedback_service.delete_feedback(feedback_id)
    except FeedbackRepositoryError as e:
        raise _storage_unavailable(e)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Feedback not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
