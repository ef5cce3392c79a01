# tests/test_config.py

"""
Tests for Settings validation.
"""

import pytest
from pydantic import ValidationError

from feedback_sentiment.core.config import Settings


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.feedback_min_length == 10
        assert settings.feedback_max_length == 1000
        assert settings.sentiment_backend == "openai"

    def test_backends_are_normalized(self):
        settings = Settings(
            _env_file=None, sentiment_backend="HEURISTIC", repository_backend="Memory"
        )

        assert settings.sentiment_backend == "heuristic"
        assert settings.repository_backend == "memory"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"sentiment_backend": "vader"},
            {"repository_backend": "postgres"},
            {"log_level": "verbose"},
            {"analysis_retry_attempts": 0},
            {"feedback_min_length": 50, "feedback_max_length": 20},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)

    def test_remote_analyzer_needs_key_and_backend(self):
        assert Settings(_env_file=None, openai_api_key=None).remote_analyzer_enabled is False
        assert Settings(_env_file=None, openai_api_key="sk-test").remote_analyzer_enabled
        assert (
            Settings(
                _env_file=None, openai_api_key="sk-test", sentiment_backend="heuristic"
            ).remote_analyzer_enabled
            is False
        )

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FEEDBACK_MAX_LENGTH", "500")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.feedback_max_length == 500
        assert settings.log_level == "DEBUG"
