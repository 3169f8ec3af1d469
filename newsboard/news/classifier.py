"""Per-article classification (sentiment + locality)."""

from __future__ import annotations

from dataclasses import dataclass

from .client import Article
from .locality import article_text, is_local
from .sentiment import SentimentLabel, classify_sentiment


@dataclass(frozen=True)
class ClassifiedArticle:
    article: Article
    sentiment: SentimentLabel
    is_local: bool


def classify_article(article: Article) -> ClassifiedArticle:
    return ClassifiedArticle(
        article=article,
        sentiment=classify_sentiment(article_text(article)),
        is_local=is_local(article),
    )
