"""US/local news detection.

Matching is case-sensitive on purpose: "US" counts, the pronoun "us" does not.
"""

from __future__ import annotations

from typing import Tuple

from .client import Article


LOCAL_KEYWORDS: Tuple[str, ...] = (
    "US",
    "United States",
    "America",
    "U.S.",
    "USA",
)


def article_text(article: Article) -> str:
    """Title and description joined by a single space."""
    return f"{article.title or ''} {article.description or ''}"


def is_local(article: Article) -> bool:
    text = article_text(article)
    return any(keyword in text for keyword in LOCAL_KEYWORDS)
