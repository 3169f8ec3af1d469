"""Google News client.

Searches Google News RSS through the rss2json bridge (no API key required)
and returns plain headline/description/link articles.

A failed lookup never raises to the caller: network errors, bad status codes,
malformed payloads and empty feeds all come back as an empty list.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

logger = logging.getLogger(__name__)


class FetchUnavailable(Exception):
    """News could not be fetched for a query."""


@dataclass(frozen=True)
class Article:
    title: str
    link: str
    description: str = ""


class NewsClient:
    """Google News RSS client via rss2json."""

    RSS_BASE_URL = "https://news.google.com/rss/search"
    RSS2JSON_URL = "https://api.rss2json.com/v1/api.json"
    DEFAULT_TIMEOUT = 15

    def __init__(
        self,
        rss_base_url: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the news client.

        Args:
            rss_base_url: Google News search endpoint. Reads NEWS_RSS_BASE_URL if not given.
            api_url: rss2json endpoint. Reads RSS2JSON_API_URL if not given.
            timeout: Request timeout in seconds. Reads NEWS_TIMEOUT_SECONDS if not given.
        """
        self.rss_base_url = rss_base_url or os.getenv("NEWS_RSS_BASE_URL") or self.RSS_BASE_URL
        self.api_url = api_url or os.getenv("RSS2JSON_API_URL") or self.RSS2JSON_URL
        if timeout is None:
            timeout = float(os.getenv("NEWS_TIMEOUT_SECONDS", str(self.DEFAULT_TIMEOUT)))
        self.timeout = timeout

    def build_rss_url(self, query: str) -> str:
        params = {"q": query, "hl": "en-US", "gl": "US", "ceid": "US:en"}
        return f"{self.rss_base_url}?{urlencode(params)}"

    def fetch_news(self, query: str) -> List[Article]:
        """
        Fetch recent headlines for a free-text query.

        Args:
            query: Search text, usually a company display name

        Returns:
            List of Article objects, empty list on any failure
        """
        try:
            return self._fetch(query)
        except FetchUnavailable as e:
            logger.warning(f"No news for {query!r}: {e}")
            return []

    def _fetch(self, query: str) -> List[Article]:
        rss_url = self.build_rss_url(query)
        logger.debug(f"Fetching news for {query!r}")

        try:
            response = requests.get(
                self.api_url,
                params={"rss_url": rss_url},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise FetchUnavailable(f"request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise FetchUnavailable(f"request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise FetchUnavailable("response is not valid JSON") from e

        articles = self._parse_response(data)
        if not articles:
            raise FetchUnavailable("feed returned no items")
        return articles

    def _parse_response(self, data: Any) -> List[Article]:
        """
        Parse an rss2json payload into Article objects.

        Args:
            data: Decoded JSON body

        Returns:
            List of Article objects, one per feed item (missing fields become "")
        """
        if not isinstance(data, dict):
            raise FetchUnavailable(f"unexpected payload type {type(data).__name__}")

        status = data.get("status")
        if status and status != "ok":
            raise FetchUnavailable(f"feed status {status!r}: {data.get('message', '')}")

        items = data.get("items") or []
        if not isinstance(items, list):
            raise FetchUnavailable("'items' is not a list")

        articles: List[Article] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            articles.append(article_from_dict(item))
        return articles


# Module-level shared client
_client: Optional[NewsClient] = None
_client_lock = Lock()


def get_news_client() -> NewsClient:
    """Get the shared news client instance."""
    global _client

    with _client_lock:
        if _client is None:
            _client = NewsClient()
        return _client


def fetch_company_news(query: str) -> List[Article]:
    """Fetch news for a query with the shared client."""
    return get_news_client().fetch_news(query)


def article_from_dict(raw: Dict[str, Any]) -> Article:
    return Article(
        title=raw.get("title") or "",
        description=raw.get("description") or "",
        link=raw.get("link") or "",
    )
