"""Aggregators for combining calendar views into statistics."""

from .rate_aggregator import RateAggregator, aggregate, longest_streak, weighted_rate

__all__ = ["RateAggregator", "aggregate", "longest_streak", "weighted_rate"]
