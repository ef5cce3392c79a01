"""
Service-level response schemas: health and errors.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


class HealthCheckSchema(BaseModel):
    """
    Health check response.

    "degraded" means storage works but the remote classifier does not, so
    new feedback is scored by the heuristic only.
    """

    status: Literal["healthy", "degraded", "unhealthy"]
    service: str
    version: str
    classification_mode: Literal["remote", "heuristic"] = Field(
        ..., description="Remote classifier with heuristic fallback, or heuristic only"
    )
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    dependencies: Dict[str, str] = Field(
        default_factory=dict, description="Component name to healthy / unhealthy"
    )


class ErrorResponseSchema(BaseModel):
    """Error body returned when the service cannot answer."""

    error: str
    message: str
    details: Optional[Dict[str, Any]] = None
