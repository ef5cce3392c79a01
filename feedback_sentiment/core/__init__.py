"""
Core configuration and the heuristic sentiment scorer.
"""

from .heuristic_scorer import score_sentiment

__all__ = ["score_sentiment"]
