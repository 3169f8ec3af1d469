"""Unit tests for the Google News client.

Tests:
- Parsing rss2json response JSON into Articles
- Every failure mode (network, status, JSON, empty feed) yields an empty list
- Request construction (RSS URL, timeout, env overrides)
"""

import os
import unittest
from unittest.mock import patch, MagicMock

import requests

from newsboard.news.client import (
    Article,
    FetchUnavailable,
    NewsClient,
    article_from_dict,
)


# Sample rss2json response fixture
SAMPLE_RSS2JSON_RESPONSE = {
    "status": "ok",
    "feed": {
        "url": "https://news.google.com/rss/search?q=Microsoft&hl=en-US&gl=US&ceid=US:en",
        "title": "\"Microsoft\" - Google News",
    },
    "items": [
        {
            "title": "Microsoft posts record cloud profit - Reuters",
            "pubDate": "2024-01-15 14:30:00",
            "link": "https://news.google.com/articles/abc123",
            "guid": "abc123",
            "description": "Azure revenue growth beat expectations.",
        },
        {
            "title": "Microsoft faces EU antitrust complaint - Bloomberg",
            "pubDate": "2024-01-15 12:00:00",
            "link": "https://news.google.com/articles/def456",
            "guid": "def456",
        },
        {
            "title": "",
            "link": "https://news.google.com/articles/empty",
            "description": "Untitled entry",
        },
    ],
}


def _mock_response(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestNewsClientParsing(unittest.TestCase):
    """Test parsing of rss2json payloads."""

    def test_parse_response_basic(self):
        client = NewsClient()
        articles = client._parse_response(SAMPLE_RSS2JSON_RESPONSE)

        self.assertEqual(len(articles), 3)

        first = articles[0]
        self.assertEqual(first.title, "Microsoft posts record cloud profit - Reuters")
        self.assertEqual(first.link, "https://news.google.com/articles/abc123")
        self.assertEqual(first.description, "Azure revenue growth beat expectations.")

    def test_untitled_item_is_kept(self):
        client = NewsClient()
        articles = client._parse_response(SAMPLE_RSS2JSON_RESPONSE)

        self.assertEqual(articles[2].title, "")
        self.assertEqual(articles[2].description, "Untitled entry")
        self.assertEqual(articles[2].link, "https://news.google.com/articles/empty")

    def test_missing_description_becomes_empty(self):
        client = NewsClient()
        articles = client._parse_response(SAMPLE_RSS2JSON_RESPONSE)

        self.assertEqual(articles[1].description, "")

    def test_null_fields(self):
        article = article_from_dict({"title": "Headline", "description": None, "link": None})

        self.assertEqual(article, Article(title="Headline", link="", description=""))

    def test_error_status_raises(self):
        client = NewsClient()
        with self.assertRaises(FetchUnavailable):
            client._parse_response({"status": "error", "message": "rss_url parameter is required"})

    def test_non_dict_payload_raises(self):
        client = NewsClient()
        with self.assertRaises(FetchUnavailable):
            client._parse_response(["not", "a", "dict"])

    def test_article_is_immutable(self):
        article = Article(title="t", link="l")
        with self.assertRaises(Exception):
            article.title = "changed"


class TestNewsClientFetch(unittest.TestCase):
    """Test fetch_news against a mocked requests.get."""

    @patch("newsboard.news.client.requests.get")
    def test_fetch_success(self, mock_get):
        mock_get.return_value = _mock_response(SAMPLE_RSS2JSON_RESPONSE)

        articles = NewsClient().fetch_news("Microsoft")

        self.assertEqual(len(articles), 3)
        mock_get.assert_called_once()

    @patch("newsboard.news.client.requests.get")
    def test_request_uses_rss_url_and_timeout(self, mock_get):
        mock_get.return_value = _mock_response(SAMPLE_RSS2JSON_RESPONSE)

        client = NewsClient(timeout=7)
        client.fetch_news("Microsoft Corp")

        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], NewsClient.RSS2JSON_URL)
        self.assertEqual(kwargs["timeout"], 7)
        rss_url = kwargs["params"]["rss_url"]
        self.assertTrue(rss_url.startswith("https://news.google.com/rss/search?"))
        self.assertIn("q=Microsoft+Corp", rss_url)
        self.assertIn("hl=en-US", rss_url)
        self.assertIn("gl=US", rss_url)

    @patch("newsboard.news.client.requests.get")
    def test_network_error_returns_empty(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("connection refused")

        self.assertEqual(NewsClient().fetch_news("Microsoft"), [])

    @patch("newsboard.news.client.requests.get")
    def test_timeout_returns_empty(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        self.assertEqual(NewsClient().fetch_news("Microsoft"), [])

    @patch("newsboard.news.client.requests.get")
    def test_http_error_returns_empty(self, mock_get):
        mock_get.return_value = _mock_response(
            status_error=requests.exceptions.HTTPError("500 Server Error")
        )

        self.assertEqual(NewsClient().fetch_news("Microsoft"), [])

    @patch("newsboard.news.client.requests.get")
    def test_malformed_json_returns_empty(self, mock_get):
        mock_get.return_value = _mock_response(json_error=ValueError("Expecting value"))

        self.assertEqual(NewsClient().fetch_news("Microsoft"), [])

    @patch("newsboard.news.client.requests.get")
    def test_empty_feed_returns_empty(self, mock_get):
        mock_get.return_value = _mock_response({"status": "ok", "items": []})

        self.assertEqual(NewsClient().fetch_news("Nonexistent Co"), [])

    @patch("newsboard.news.client.requests.get")
    def test_no_retry_after_failure(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("down")

        NewsClient().fetch_news("Microsoft")

        self.assertEqual(mock_get.call_count, 1)


class TestNewsClientConfig(unittest.TestCase):

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            client = NewsClient()

        self.assertEqual(client.rss_base_url, NewsClient.RSS_BASE_URL)
        self.assertEqual(client.api_url, NewsClient.RSS2JSON_URL)
        self.assertEqual(client.timeout, 15.0)

    def test_env_overrides(self):
        env = {
            "NEWS_RSS_BASE_URL": "http://localhost:9000/rss",
            "RSS2JSON_API_URL": "http://localhost:9001/api.json",
            "NEWS_TIMEOUT_SECONDS": "3",
        }
        with patch.dict(os.environ, env, clear=True):
            client = NewsClient()

        self.assertEqual(client.build_rss_url("IBM"), "http://localhost:9000/rss?q=IBM&hl=en-US&gl=US&ceid=US%3Aen")
        self.assertEqual(client.api_url, "http://localhost:9001/api.json")
        self.assertEqual(client.timeout, 3.0)


if __name__ == "__main__":
    unittest.main()
