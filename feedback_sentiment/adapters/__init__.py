"""
External service adapters and implementations.
"""

from .heuristic_sentiment_analyzer import HeuristicSentimentAnalyzer
from .openai_sentiment_analyzer import OpenAISentimentAnalyzer

__all__ = [
    "HeuristicSentimentAnalyzer",
    "OpenAISentimentAnalyzer",
]
