"""Trade statistics: pattern detection and dashboard summary."""

from .patterns import analyze_patterns, coerce_pnl, find_anomalies, group_trades, top_buckets
from .summary import summarize_trades

__all__ = [
    "analyze_patterns",
    "coerce_pnl",
    "find_anomalies",
    "group_trades",
    "top_buckets",
    "summarize_trades",
]
