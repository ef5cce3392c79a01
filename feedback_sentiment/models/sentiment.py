# models/sentiment.py

"""
Sentiment value types shared by the remote and the heuristic classifiers.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SentimentLabel(str, Enum):
    """Sentiment label enumeration."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class SentimentSource(str, Enum):
    """Which classifier produced a result."""

    REMOTE = "remote"
    FALLBACK = "fallback"


class SentimentResult(BaseModel):
    """Sentiment label with a score in [0, 1]."""

    sentiment: SentimentLabel
    score: float = Field(..., ge=0.0, le=1.0, description="Sentiment intensity")

    model_config = ConfigDict(frozen=True)

    @property
    def percentage(self) -> int:
        """Score rounded for percentage display."""
        return round(self.score * 100)


class RemoteSentimentResult(SentimentResult):
    """Result returned by the remote LLM classifier."""

    source: Literal[SentimentSource.REMOTE] = SentimentSource.REMOTE
    confidence: float = Field(0.8, ge=0.0, le=1.0)
    model: Optional[str] = Field(None, description="Model that produced the result")


class FallbackSentimentResult(SentimentResult):
    """Result produced locally by the heuristic scorer."""

    source: Literal[SentimentSource.FALLBACK] = SentimentSource.FALLBACK
    reason: Optional[str] = Field(
        None, description="Why the remote classifier was not used"
    )


ClassificationResult = Annotated[
    Union[RemoteSentimentResult, FallbackSentimentResult],
    Field(discriminator="source"),
]
