"""News aggregation for one company and its competitors.

Flow:
Primary quote -> Primary news -> Classify -> Buckets -> Competitor quotes -> Competitor news fan-out -> Merge

Nothing raises out of run_aggregation(). A fetch that fails for any company
contributes an empty list and the run carries on.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from ..config import BoardConfig, CompanyTarget, DisplayLimits
from ..news import Article, NewsClient, SentimentLabel, classify_article, fetch_company_news
from ..quotes import StockQuote

logger = logging.getLogger(__name__)


FetchNews = Callable[[str], Sequence[Article]]
QuoteSource = Callable[[str], StockQuote]


# Output region ids, one per bucket
REGION_POSITIVE = "positive-news"
REGION_NEGATIVE = "negative-news"
REGION_GLOBAL = "global-news"
REGION_LOCAL = "local-news"
REGION_COMPETITOR = "competitor-news"


@dataclass
class AggregationResult:
    """Bounded article lists ready for rendering."""
    positive: List[Article] = field(default_factory=list)
    negative: List[Article] = field(default_factory=list)
    local: List[Article] = field(default_factory=list)
    global_: List[Article] = field(default_factory=list)
    competitor: List[Article] = field(default_factory=list)
    primary_quote: Optional[StockQuote] = None
    competitor_quotes: List[Optional[StockQuote]] = field(default_factory=list)

    def regions(self) -> Dict[str, List[Article]]:
        """Buckets keyed by output region, in display order."""
        return {
            REGION_POSITIVE: self.positive,
            REGION_NEGATIVE: self.negative,
            REGION_GLOBAL: self.global_,
            REGION_LOCAL: self.local,
            REGION_COMPETITOR: self.competitor,
        }


def _safe_fetch(fetch_news: FetchNews, query: str) -> List[Article]:
    try:
        return list(fetch_news(query) or [])
    except Exception as e:
        logger.error(f"News fetch failed for {query!r}: {e}")
        return []


def _safe_quote(quote_source: QuoteSource, target: CompanyTarget) -> Optional[StockQuote]:
    symbol = target.ticker or target.display_name
    try:
        return quote_source(symbol)
    except Exception as e:
        logger.error(f"Quote fetch failed for {symbol}: {e}")
        return None


def partition_articles(articles: Sequence[Article], limits: DisplayLimits) -> AggregationResult:
    """
    Classify articles and split them into sentiment and locality buckets.

    Sentiment and locality are routed independently, so one article can land
    in a sentiment bucket and a locality bucket. Neutral articles only go to
    a locality bucket. Each bucket keeps the first N in arrival order.

    Args:
        articles: Primary company articles in arrival order
        limits: Display limits per bucket

    Returns:
        AggregationResult with the four primary buckets filled
    """
    positive: List[Article] = []
    negative: List[Article] = []
    local: List[Article] = []
    global_: List[Article] = []

    for article in articles:
        classified = classify_article(article)

        if classified.sentiment is SentimentLabel.POSITIVE:
            positive.append(article)
        elif classified.sentiment is SentimentLabel.NEGATIVE:
            negative.append(article)

        if classified.is_local:
            local.append(article)
        else:
            global_.append(article)

    return AggregationResult(
        positive=positive[: limits.sentiment],
        negative=negative[: limits.sentiment],
        local=local[: limits.locality],
        global_=global_[: limits.locality],
    )


def merge_competitor_news(results: Sequence[Sequence[Article]], per_competitor: int) -> List[Article]:
    merged: List[Article] = []
    for articles in results:
        merged.extend(articles[:per_competitor])
    return merged


def fetch_competitor_news(
    competitors: Sequence[CompanyTarget],
    fetch_news: FetchNews,
    max_workers: Optional[int] = None,
) -> List[List[Article]]:
    """
    Fetch news for every competitor concurrently and wait for all of them.

    Args:
        competitors: Competitor targets, in display order
        fetch_news: News fetch callable
        max_workers: Thread pool size (default: one per competitor)

    Returns:
        One article list per competitor, same order as `competitors`
    """
    if not competitors:
        return []

    workers = max_workers or len(competitors)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_safe_fetch, fetch_news, target.display_name)
            for target in competitors
        ]
        # Futures are read in submission order so competitor order is kept
        return [future.result() for future in futures]


def run_aggregation(
    primary: CompanyTarget,
    competitors: Sequence[CompanyTarget],
    fetch_news: FetchNews = fetch_company_news,
    limits: Optional[DisplayLimits] = None,
    max_workers: Optional[int] = None,
    quote_source: Optional[QuoteSource] = None,
) -> AggregationResult:
    """
    Build the news board buckets for a company and its competitors.

    Args:
        primary: Company the board is about
        competitors: Competitors whose headlines are merged into one list
        fetch_news: News fetch callable (query -> articles)
        limits: Display limits (default 3 sentiment / 5 locality / 2 per competitor)
        max_workers: Thread pool size for the competitor fan-out
        quote_source: Optional quote callable (symbol -> StockQuote)

    Returns:
        AggregationResult
    """
    limits = limits or DisplayLimits()

    primary_quote = None
    if quote_source is not None:
        primary_quote = _safe_quote(quote_source, primary)

    articles = _safe_fetch(fetch_news, primary.display_name)
    logger.info(f"{primary.display_name}: {len(articles)} articles")

    result = partition_articles(articles, limits)
    result.primary_quote = primary_quote

    if quote_source is not None:
        result.competitor_quotes = [_safe_quote(quote_source, target) for target in competitors]

    competitor_results = fetch_competitor_news(competitors, fetch_news, max_workers=max_workers)
    for target, found in zip(competitors, competitor_results):
        logger.debug(f"{target.display_name}: {len(found)} articles")

    result.competitor = merge_competitor_news(competitor_results, limits.per_competitor)
    return result


def run_board(
    config: BoardConfig,
    fetch_news: Optional[FetchNews] = None,
    quote_source: Optional[QuoteSource] = None,
) -> AggregationResult:
    """Run the aggregation for a BoardConfig."""
    if fetch_news is None:
        fetch_news = NewsClient(timeout=config.news_timeout).fetch_news
    return run_aggregation(
        primary=config.primary,
        competitors=config.competitors,
        fetch_news=fetch_news,
        limits=config.limits,
        max_workers=config.max_workers,
        quote_source=quote_source,
    )
