# core/heuristic_scorer.py

"""
Keyword based sentiment scorer.

Used when the remote classifier is unavailable. The scorer is a pure
function: no I/O, no shared mutable state, and it returns a result for every
string input.
"""

import re
from typing import FrozenSet, List, Tuple

from ..models.sentiment import SentimentLabel, SentimentResult

POSITIVE_WORDS: FrozenSet[str] = frozenset(
    {
        "good", "great", "excellent", "amazing", "wonderful", "fantastic",
        "love", "like", "happy", "pleased", "satisfied", "awesome",
        "brilliant", "outstanding", "superb", "perfect", "incredible",
        "marvelous", "terrific", "fabulous", "splendid", "magnificent",
        "delighted", "thrilled", "ecstatic", "joyful", "cheerful", "content",
        "grateful", "appreciate", "recommend", "best",
    }
)  # fmt: skip

NEGATIVE_WORDS: FrozenSet[str] = frozenset(
    {
        "bad", "terrible", "awful", "horrible", "hate", "dislike", "angry",
        "frustrated", "disappointed", "sad", "annoyed", "upset", "worst",
        "useless", "worthless", "pathetic", "disgusting", "ridiculous",
        "stupid", "idiotic", "furious", "enraged", "livid", "displeased",
        "dissatisfied", "unhappy", "miserable", "depressed", "gloomy", "grim",
        "bleak", "hopeless", "desperate", "failed", "failure", "broken",
        "defective", "faulty", "problem", "issue", "complaint", "loathe",
    }
)  # fmt: skip

STRONG_NEGATIVE_PHRASES: Tuple[str, ...] = (
    "not good",
    "not great",
    "not happy",
    "not satisfied",
    "not pleased",
    "very bad",
    "really terrible",
    "extremely awful",
    "absolutely horrible",
    "completely disappointed",
    "totally frustrated",
    "extremely upset",
)

STRONG_PHRASE_WEIGHT = 2

POSITIVE_THRESHOLD = 0.6
NEGATIVE_THRESHOLD = 0.4
SCORE_ADJUSTMENT = 0.1
MAX_POSITIVE_SCORE = 0.9
MIN_NEGATIVE_SCORE = 0.1
NEUTRAL_SCORE = 0.5

# Runs of letters only: digits, underscores and punctuation split words.
_WORD_PATTERN = re.compile(r"[^\W\d_]+")


def tokenize(text: str) -> List[str]:
    """Lower-case the text and split it on non-letter boundaries."""
    return _WORD_PATTERN.findall(text.lower())


def count_keywords(text: str) -> Tuple[int, int]:
    """
    Count sentiment keywords in a text.

    Args:
        text: Raw text

    Returns:
        Tuple[int, int]: (positive_score, negative_score), where the negative
        score includes the strong phrase bonus
    """
    lowered = text.lower()
    positive_score = 0
    negative_score = 0

    for token in tokenize(lowered):
        if token in POSITIVE_WORDS:
            positive_score += 1
        elif token in NEGATIVE_WORDS:
            negative_score += 1

    for phrase in STRONG_NEGATIVE_PHRASES:
        if phrase in lowered:
            negative_score += STRONG_PHRASE_WEIGHT

    return positive_score, negative_score


def score_sentiment(text: str) -> SentimentResult:
    """
    Classify text as positive, negative or neutral from keyword counts.

    The ratio of positive hits to all hits decides the label. Ratios inside
    [0.4, 0.6] are neutral; outside it the score is pushed 0.1 away from the
    boundary and clamped to [0.1, 0.9].

    Args:
        text: Text to score, any length including empty

    Returns:
        SentimentResult: Label and score in [0, 1]
    """
    positive_score, negative_score = count_keywords(text or "")
    total_score = positive_score + negative_score

    if total_score == 0:
        return SentimentResult(sentiment=SentimentLabel.NEUTRAL, score=NEUTRAL_SCORE)

    ratio = positive_score / total_score

    if ratio > POSITIVE_THRESHOLD:
        return SentimentResult(
            sentiment=SentimentLabel.POSITIVE,
            score=min(MAX_POSITIVE_SCORE, ratio + SCORE_ADJUSTMENT),
        )
    if ratio < NEGATIVE_THRESHOLD:
        return SentimentResult(
            sentiment=SentimentLabel.NEGATIVE,
            score=max(MIN_NEGATIVE_SCORE, ratio - SCORE_ADJUSTMENT),
        )
    return SentimentResult(sentiment=SentimentLabel.NEUTRAL, score=ratio)
