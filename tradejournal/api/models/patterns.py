"""Pydantic models for pattern analysis and AI coach requests."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PatternBucket(BaseModel):
    """Statistics of one (dimension, value) group."""

    dimension: str = Field(..., description="hourly, pairs, strategies or directions")
    key: str = Field(..., description="Group value, e.g. 'BTC/USD' or '09:00'")
    wins: int = Field(..., description="Winning trades")
    losses: int = Field(..., description="Losing trades")
    total: int = Field(..., description="Wins + losses + break-even trades")
    pnl: float = Field(..., description="Cumulative P&L")
    win_rate: float = Field(..., description="Wins / total * 100")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "dimension": "pairs",
                "key": "ETH/USD",
                "wins": 4,
                "losses": 1,
                "total": 5,
                "pnl": 310.0,
                "win_rate": 80.0,
            }
        }
    )


class PatternReport(BaseModel):
    """Pattern analysis of the whole trade list."""

    total_trades: int = Field(..., description="Trades analysed")
    buckets: Dict[str, List[PatternBucket]] = Field(..., description="All buckets per dimension")
    sweet_spots: List[PatternBucket] = Field(..., description="High win-rate buckets, best first")
    danger_zones: List[PatternBucket] = Field(..., description="Low win-rate buckets, worst first")
    breakdown: Dict[str, List[PatternBucket]] = Field(..., description="Most traded buckets per dimension")


class InsightsRequest(BaseModel):
    """AI coach request; ``api_key`` overrides the configured default for this call."""

    api_key: Optional[str] = Field(None, description="Text-generation API key")


class InsightsResponse(BaseModel):
    """AI coach answer, returned verbatim."""

    insights: str = Field(..., description="Markdown bulleted insights")
    trades_considered: int = Field(..., description="Number of trades included in the prompt")
