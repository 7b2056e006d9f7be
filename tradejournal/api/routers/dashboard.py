"""API endpoint for dashboard statistics."""

from fastapi import APIRouter, Depends

from tradejournal.analysis.summary import summarize_trades
from tradejournal.api.dependencies import get_trade_repository
from tradejournal.journal.repository import TradeRepository

router = APIRouter()


@router.get("/")
async def get_dashboard(repository: TradeRepository = Depends(get_trade_repository)):
    """Headline statistics and the five most recent trades."""
    return {
        "status": "success",
        "data": summarize_trades(repository.trades),
    }
