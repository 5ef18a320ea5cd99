"""Filtering and stats over classified opportunities."""

from .engine import FilterEngine, FilterResult
from .stats import CategoryStats, compute_stats

__all__ = ["CategoryStats", "FilterEngine", "FilterResult", "compute_stats"]
