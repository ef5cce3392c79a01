# models/feedback.py

"""
Data models for feedback persistence and dashboard statistics.
"""

from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from .sentiment import SentimentLabel, SentimentSource


class Feedback(BaseModel):
    """Feedback record stored with its sentiment classification."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    content: str = Field(..., min_length=1, description="Feedback text")
    user_id: Optional[str] = Field(None, description="Submitting user, None for guests")

    sentiment: SentimentLabel
    sentiment_score: float = Field(..., ge=0.0, le=1.0)
    sentiment_source: SentimentSource = SentimentSource.FALLBACK

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> dict:
        """Serialize for a document store, using the id as the primary key."""
        doc = self.model_dump(exclude={"id"})
        doc["_id"] = self.id
        doc["sentiment"] = self.sentiment.value
        doc["sentiment_source"] = self.sentiment_source.value
        return doc

    @classmethod
    def from_document(cls, doc: dict) -> "Feedback":
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return cls(**data)


class FeedbackQueryFilter(BaseModel):
    """Filter parameters for feedback queries."""

    sentiment: Optional[SentimentLabel] = None
    user_id: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    limit: int = Field(50, ge=1, le=100)
    offset: int = Field(0, ge=0)

    @field_validator("date_from", "date_to")
    @classmethod
    def assume_utc(cls, v):
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class FeedbackAggregation(BaseModel):
    """Aggregated sentiment statistics for the dashboard."""

    total_count: int = 0
    positive_count: int = 0
    negative_count: int = 0
    neutral_count: int = 0
    average_score: float = 0.0
    sentiment_distribution: Dict[str, float] = Field(default_factory=dict)
    time_period: Optional[str] = None

    @classmethod
    def from_counts(
        cls,
        counts: Dict[SentimentLabel, int],
        score_sum: float,
        time_period: Optional[str] = None,
    ) -> "FeedbackAggregation":
        """Build the aggregation from per-label counts and the sum of scores."""
        total = sum(counts.values())
        distribution = (
            {label.value: count / total for label, count in counts.items()}
            if total
            else {}
        )
        return cls(
            total_count=total,
            positive_count=counts.get(SentimentLabel.POSITIVE, 0),
            negative_count=counts.get(SentimentLabel.NEGATIVE, 0),
            neutral_count=counts.get(SentimentLabel.NEUTRAL, 0),
            average_score=score_sum / total if total else 0.0,
            sentiment_distribution=distribution,
            time_period=time_period,
        )

    @staticmethod
    def describe_period(
        date_from: Optional[datetime], date_to: Optional[datetime]
    ) -> Optional[str]:
        if date_from and date_to:
            return f"{date_from.strftime('%Y-%m-%d')} to {date_to.strftime('%Y-%m-%d')}"
        return None
