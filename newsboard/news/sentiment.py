"""Very small headline sentiment classifier.

Keyword presence only (no ML). Each keyword counts once no matter how often
it appears, and matching is a case-insensitive substring test, so "up" also
matches "update" and "cut" matches "execute".
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


POSITIVE_WORDS: Tuple[str, ...] = (
    "growth",
    "profit",
    "record",
    "beat",
    "success",
    "win",
    "positive",
    "up",
    "increase",
    "surge",
)

NEGATIVE_WORDS: Tuple[str, ...] = (
    "loss",
    "decline",
    "fall",
    "drop",
    "negative",
    "down",
    "lawsuit",
    "scandal",
    "cut",
    "layoff",
)


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def score_text(text: Optional[str]) -> int:
    """Positive keywords present minus negative keywords present."""
    lower = (text or "").lower()
    pos = sum(1 for word in POSITIVE_WORDS if word in lower)
    neg = sum(1 for word in NEGATIVE_WORDS if word in lower)
    return pos - neg


def classify_sentiment(text: Optional[str]) -> SentimentLabel:
    score = score_text(text)
    if score > 0:
        return SentimentLabel.POSITIVE
    if score < 0:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL
