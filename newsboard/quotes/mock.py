"""Placeholder stock quotes.

There is no real market data behind this: every quote is random. It exists so
the board has something to show in the stock regions.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StockQuote:
    symbol: str
    price: float
    change: float
    change_percent: float

    @property
    def is_up(self) -> bool:
        return self.change >= 0


def fetch_stock_quote(symbol: str, rng: Optional[random.Random] = None) -> StockQuote:
    """
    Generate a mock quote for a symbol.

    Args:
        symbol: Stock ticker symbol
        rng: Random source (module-level random if None)

    Returns:
        StockQuote with price in [100, 400), change in [-5, 5) and
        change percent in [-2.5, 2.5), all rounded to 2 decimals
    """
    rng = rng or random
    return StockQuote(
        symbol=symbol.upper(),
        price=round(rng.random() * 300 + 100, 2),
        change=round(rng.random() * 10 - 5, 2),
        change_percent=round(rng.random() * 5 - 2.5, 2),
    )


class MockQuoteSource:
    """Callable quote source backed by a seeded generator."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def __call__(self, symbol: str) -> StockQuote:
        return fetch_stock_quote(symbol, rng=self._rng)
