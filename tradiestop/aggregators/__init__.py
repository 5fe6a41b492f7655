"""Aggregators building chart series from marketplace records."""

from tradiestop.aggregators.monthly_aggregator import DEFAULT_MONTHS, MonthlyAggregator

__all__ = [
    "DEFAULT_MONTHS",
    "MonthlyAggregator",
]
