"""Aggregation pipeline."""

from .aggregator import (
    AggregationResult,
    fetch_competitor_news,
    merge_competitor_news,
    partition_articles,
    run_aggregation,
    run_board,
)

__all__ = [
    "AggregationResult",
    "fetch_competitor_news",
    "merge_competitor_news",
    "partition_articles",
    "run_aggregation",
    "run_board",
]
