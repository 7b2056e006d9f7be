"""Dashboard statistics over the cached trade list."""

from typing import Any, Dict, List, Mapping

import pandas as pd

from tradejournal.core.constants import DashboardConstants, TradeResult
from tradejournal.core.logger import get_logger

logger = get_logger(__name__)


def summarize_trades(trades: List[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Compute headline dashboard statistics.

    Args:
        trades: Trade records in display order (newest first)

    Returns:
        Dictionary with total_trades, wins, losses, breakeven, pending,
        win_rate (wins over all trades, one decimal), net_pnl,
        profit_factor and recent_trades (first five records).

    Notes:
        - Win-rate divides by every trade, including Pending ones.
        - Non-numeric P&L values count as zero.
    """
    if not trades:
        return _empty_response()

    df = pd.DataFrame(list(trades))
    results = df["result"] if "result" in df.columns else pd.Series([None] * len(df))
    raw_pnl = df["pnl"] if "pnl" in df.columns else pd.Series([None] * len(df))
    pnl = pd.to_numeric(raw_pnl, errors="coerce").fillna(0.0)

    total_trades = len(df)
    wins = int((results == TradeResult.WIN).sum())
    losses = int((results == TradeResult.LOSE).sum())
    breakeven = int((results == TradeResult.BREAKEVEN).sum())
    pending = int((results == TradeResult.PENDING).sum())
    win_rate = round(wins / total_trades * 100, DashboardConstants.WIN_RATE_PRECISION)

    gross_profit = float(pnl[pnl > 0].sum())
    gross_loss = abs(float(pnl[pnl < 0].sum()))
    profit_factor = round(gross_profit / gross_loss, 2) if gross_loss > 0 else 0.0

    logger.debug(f"Summarized {total_trades} trades: {wins}W / {losses}L")

    return {
        "total_trades": total_trades,
        "wins": wins,
        "losses": losses,
        "breakeven": breakeven,
        "pending": pending,
        "win_rate": win_rate,
        "net_pnl": float(pnl.sum()),
        "profit_factor": profit_factor,
        "recent_trades": list(trades[:DashboardConstants.RECENT_TRADES]),
    }


def _empty_response() -> Dict[str, Any]:
    """Return empty dashboard statistics."""
    return {
        "total_trades": 0,
        "wins": 0,
        "losses": 0,
        "breakeven": 0,
        "pending": 0,
        "win_rate": 0.0,
        "net_pnl": 0.0,
        "profit_factor": 0.0,
        "recent_trades": [],
    }
