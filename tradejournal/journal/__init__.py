"""Trade and strategy-document repositories."""

from .autosave import DebouncedAutosave
from .repository import OperationResult, TradeRepository
from .strategy import StrategyDocument, StrategyRepository

__all__ = [
    "DebouncedAutosave",
    "OperationResult",
    "TradeRepository",
    "StrategyDocument",
    "StrategyRepository",
]
