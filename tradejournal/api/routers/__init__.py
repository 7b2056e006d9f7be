"""API routers."""

from . import dashboard, patterns, strategy, trades

__all__ = ["dashboard", "patterns", "strategy", "trades"]
