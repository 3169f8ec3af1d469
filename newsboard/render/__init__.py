"""Board renderers."""

from .terminal import render_board, render_competitor_stocks, render_news, render_stock_quote

__all__ = ["render_board", "render_competitor_stocks", "render_news", "render_stock_quote"]
