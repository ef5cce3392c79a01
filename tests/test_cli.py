# tests/test_cli.py

"""
Tests for the command-line interface.
"""

import json

from typer.testing import CliRunner

from feedback_sentiment.cli import app

runner = CliRunner()


class TestScoreCommand:
    """Test cases for the score command."""

    def test_json_output(self):
        result = runner.invoke(app, ["score", "good", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"sentiment": "positive", "score": 0.9}

    def test_table_output(self):
        result = runner.invoke(app, ["score", "great support but broken checkout"])

        assert result.exit_code == 0
        assert "neutral" in result.stdout
        assert "Positive hits" in result.stdout
