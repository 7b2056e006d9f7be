"""Pydantic models for API schemas."""

from .trades import TradeCreate, TradeUpdate
from .patterns import InsightsRequest, InsightsResponse, PatternBucket, PatternReport
from .strategy import StrategyEdit, StrategyState

__all__ = [
    "TradeCreate",
    "TradeUpdate",
    "InsightsRequest",
    "InsightsResponse",
    "PatternBucket",
    "PatternReport",
    "StrategyEdit",
    "StrategyState",
]
