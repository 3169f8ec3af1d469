"""Stock quotes (mocked)."""

from .mock import StockQuote, MockQuoteSource, fetch_stock_quote

__all__ = ["StockQuote", "MockQuoteSource", "fetch_stock_quote"]
