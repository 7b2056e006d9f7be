"""API endpoints for pattern analysis and the AI coach.

The insights handler is a plain function: the coach call blocks for up to
its timeout and must run in the threadpool.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from tradejournal.analysis.patterns import analyze_patterns
from tradejournal.api.dependencies import get_coach, get_trade_repository
from tradejournal.api.models.patterns import InsightsRequest, InsightsResponse, PatternReport
from tradejournal.coach.insights import CoachClient
from tradejournal.core.logger import get_logger
from tradejournal.journal.repository import TradeRepository

logger = get_logger(__name__)
router = APIRouter()


@router.get("/")
async def get_patterns(repository: TradeRepository = Depends(get_trade_repository)):
    """
    Statistical pattern analysis of the cached trades.

    Returns buckets per hour, pair, strategy and direction, the sweet spots
    and danger zones (at least 3 trades) and the top 5 groups per dimension.
    """
    report = PatternReport(**analyze_patterns(repository.trades))
    return {"status": "success", "data": report}


@router.post("/insights")
def generate_insights(
    request: Optional[InsightsRequest] = Body(None),
    repository: TradeRepository = Depends(get_trade_repository),
    coach: CoachClient = Depends(get_coach),
):
    """
    Ask the AI coach for three insights about the most recent trades.

    Returns 400 without an API key, 429 when the provider rate-limits and
    502 for any other provider failure.
    """
    if not repository.trades:
        raise HTTPException(status_code=400, detail="No trades to analyse")

    api_key = request.api_key if request else None
    result = coach.generate_insights(repository.trades, api_key=api_key)

    if result.missing_key:
        raise HTTPException(status_code=400, detail=result.error)
    if result.rate_limited:
        raise HTTPException(status_code=429, detail=result.error)
    if not result.success:
        raise HTTPException(status_code=502, detail=f"AI Coach Error: {result.error}")

    response = InsightsResponse(
        insights=result.text,
        trades_considered=min(len(repository.trades), coach.max_trades),
    )
    return {"status": "success", "data": response}
