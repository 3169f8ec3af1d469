"""Terminal renderer for the news board.

Every region renders to a block of text; empty regions get a placeholder
message instead of being left blank.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from colorama import Fore, Style

from ..news import Article
from ..pipeline.aggregator import AggregationResult
from ..quotes import StockQuote


REGION_TITLES = {
    "primary-stock": "STOCK",
    "positive-news": "POSITIVE NEWS",
    "negative-news": "NEGATIVE NEWS",
    "global-news": "GLOBAL NEWS",
    "local-news": "LOCAL (US) NEWS",
    "competitor-news": "COMPETITOR NEWS",
    "competitor-stocks": "COMPETITOR STOCKS",
}

NO_NEWS = "No news found."
NO_STOCK = "Failed to load stock data."
NO_COMPETITOR_STOCKS = "Failed to load competitor stock data."


def _header(region: str, suffix: str = "") -> str:
    title = REGION_TITLES.get(region, region.upper())
    if suffix:
        title = f"{title} - {suffix}"
    return f"{Fore.CYAN}{'=' * 70}\n{Fore.CYAN}  {title}\n{Fore.CYAN}{'=' * 70}{Style.RESET_ALL}"


def _signed(value: float) -> str:
    return f"+{value:.2f}" if value >= 0 else f"{value:.2f}"


def _change_color(quote: StockQuote) -> str:
    return Fore.GREEN if quote.is_up else Fore.RED


def render_news(region: str, articles: Sequence[Article]) -> str:
    lines = [_header(region)]
    if not articles:
        lines.append(f"{Fore.YELLOW}{NO_NEWS}{Style.RESET_ALL}")
        return "\n".join(lines)

    for article in articles:
        lines.append(f"{Style.BRIGHT}• {article.title}{Style.RESET_ALL}")
        if article.link:
            lines.append(f"  {article.link}")
        if article.description:
            lines.append(f"  {article.description}")
    return "\n".join(lines)


def render_stock_quote(quote: Optional[StockQuote], company: str = "") -> str:
    lines = [_header("primary-stock", company)]
    if quote is None:
        lines.append(f"{Fore.RED}{NO_STOCK}{Style.RESET_ALL}")
        return "\n".join(lines)

    color = _change_color(quote)
    lines.append(f"{quote.symbol}  ${quote.price:.2f}")
    lines.append(f"{color}{_signed(quote.change)} ({_signed(quote.change_percent)}%){Style.RESET_ALL}")
    return "\n".join(lines)


def render_competitor_stocks(quotes: Sequence[Optional[StockQuote]]) -> str:
    lines = [_header("competitor-stocks")]
    available = [q for q in quotes if q is not None]
    if not available:
        lines.append(f"{Fore.RED}{NO_COMPETITOR_STOCKS}{Style.RESET_ALL}")
        return "\n".join(lines)

    for quote in available:
        color = _change_color(quote)
        lines.append(f"{quote.symbol:<6} ${quote.price:>8.2f}  {color}{_signed(quote.change)}%{Style.RESET_ALL}")
    return "\n".join(lines)


def render_board(result: AggregationResult, company: str = "", show_quotes: bool = True) -> str:
    """
    Render every region of the board.

    Args:
        result: Aggregation output
        company: Primary company name for the stock header
        show_quotes: Include the stock regions

    Returns:
        Rendered board text
    """
    sections: List[str] = []
    if show_quotes:
        sections.append(render_stock_quote(result.primary_quote, company))

    for region, articles in result.regions().items():
        sections.append(render_news(region, articles))

    if show_quotes:
        sections.append(render_competitor_stocks(result.competitor_quotes))

    return "\n\n".join(sections)
