"""
Configuration management for the feedback sentiment service.
"""

from typing import Optional
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # Service configuration
    app_name: str = "feedback-sentiment-service"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 8000

    # Sentiment classification
    sentiment_backend: str = "openai"
    openai_api_key: Optional[str] = Field(default=None)
    openai_base_url: Optional[str] = Field(default=None)
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.0
    openai_max_tokens: int = 200
    analysis_timeout: int = 15
    analysis_retry_attempts: int = 2

    # Storage
    repository_backend: str = "mongodb"
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "feedback_sentiment"
    mongodb_collection_feedback: str = "feedback"

    # Feedback validation
    feedback_min_length: int = 10
    feedback_max_length: int = 1000

    # Admin endpoints
    admin_api_key: Optional[str] = Field(default=None)

    # Logging configuration
    log_level: str = "INFO"
    log_file_path: str = "logs/"

    # Validators
    @field_validator("sentiment_backend")
    @classmethod
    def validate_sentiment_backend(cls, v):
        backends = {"openai", "heuristic"}
        if v.lower() not in backends:
            raise ValueError(f"sentiment_backend must be one of {sorted(backends)}")
        return v.lower()

    @field_validator("repository_backend")
    @classmethod
    def validate_repository_backend(cls, v):
        backends = {"mongodb", "memory"}
        if v.lower() not in backends:
            raise ValueError(f"repository_backend must be one of {sorted(backends)}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in levels:
            raise ValueError(f"log_level must be one of {sorted(levels)}")
        return v.upper()

    @field_validator("analysis_retry_attempts")
    @classmethod
    def validate_analysis_retry_attempts(cls, v):
        if v < 1 or v > 10:
            raise ValueError("analysis_retry_attempts must be between 1 and 10")
        return v

    @model_validator(mode="after")
    def validate_feedback_length_bounds(self):
        if self.feedback_min_length < 0:
            raise ValueError("feedback_min_length must not be negative")
        if self.feedback_max_length < self.feedback_min_length:
            raise ValueError(
                "feedback_max_length must be greater than or equal to feedback_min_length"
            )
        return self

    @property
    def remote_analyzer_enabled(self) -> bool:
        """Whether the OpenAI classifier can be constructed."""
        return self.sentiment_backend == "openai" and bool(self.openai_api_key)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global settings instance
settings = Settings()
