"""Pydantic models for trade records."""

from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from tradejournal.core.constants import FileFormats

Numeric = Optional[Union[float, str]]
ResultValue = Literal["Win", "Lose", "BE", "Pending"]
DirectionValue = Literal["Long", "Short"]


def _today() -> str:
    return datetime.now().strftime(FileFormats.DATE_FORMAT)


def _now_time() -> str:
    return datetime.now().strftime(FileFormats.TIME_FORMAT)


class TradeCreate(BaseModel):
    """New trade as submitted from the journal form.

    Numeric fields are kept as entered (number or string) and are not
    checked for parseability.
    """

    date: str = Field(default_factory=_today, description="Trade date (YYYY-MM-DD)")
    time: str = Field(default_factory=_now_time, description="Local time of day (HH:MM)")
    pair: str = Field(..., description="Instrument pair or ticker")
    direction: DirectionValue = Field("Long", description="Long or Short")
    entry_price: Numeric = Field(None, description="Entry price")
    stop_loss: Numeric = Field(None, description="Stop-loss price")
    timeframe: str = Field("", description="Chart timeframe label")
    target_rr: Numeric = Field(None, description="Target risk-reward ratio")
    pnl: Numeric = Field(None, description="Realized profit/loss")
    setup: str = Field("", description="Setup / entry reason")
    strategy: str = Field("", description="Strategy label")
    result: ResultValue = Field("Win", description="Win, Lose, BE (break-even) or Pending")
    comment: str = Field("", description="Post-trade comment")
    chart_url: Optional[str] = Field(None, description="Chart image URL")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "date": "2025-03-14",
                "time": "09:35",
                "pair": "BTC/USD",
                "direction": "Long",
                "entry_price": 68250.5,
                "stop_loss": 67800,
                "timeframe": "15m",
                "target_rr": 2,
                "pnl": 120.5,
                "setup": "Break and retest of Asia high",
                "strategy": "ORB",
                "result": "Win",
                "comment": "Patient entry",
                "chart_url": None,
            }
        }
    )


class TradeUpdate(BaseModel):
    """Partial update; only fields present in the request are sent to the store."""

    date: Optional[str] = None
    time: Optional[str] = None
    pair: Optional[str] = None
    direction: Optional[DirectionValue] = None
    entry_price: Numeric = None
    stop_loss: Numeric = None
    timeframe: Optional[str] = None
    target_rr: Numeric = None
    pnl: Numeric = None
    setup: Optional[str] = None
    strategy: Optional[str] = None
    result: Optional[ResultValue] = None
    comment: Optional[str] = None
    chart_url: Optional[str] = None
