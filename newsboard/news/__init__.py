"""News fetching + headline classification."""

from .client import Article, FetchUnavailable, NewsClient, fetch_company_news
from .sentiment import SentimentLabel, classify_sentiment
from .locality import is_local
from .classifier import ClassifiedArticle, classify_article

__all__ = [
    "Article",
    "FetchUnavailable",
    "NewsClient",
    "fetch_company_news",
    "SentimentLabel",
    "classify_sentiment",
    "is_local",
    "ClassifiedArticle",
    "classify_article",
]
