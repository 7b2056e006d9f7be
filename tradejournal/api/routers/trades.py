"""API endpoints for the trade journal (list, detail, create, edit, delete).

Handlers that call the store are plain functions so they run in the threadpool.
"""

from fastapi import APIRouter, Depends, HTTPException

from tradejournal.api.dependencies import get_trade_repository
from tradejournal.api.models.trades import TradeCreate, TradeUpdate
from tradejournal.core.logger import get_logger
from tradejournal.journal.repository import TradeRepository

logger = get_logger(__name__)
router = APIRouter()


@router.get("/")
async def list_trades(repository: TradeRepository = Depends(get_trade_repository)):
    """
    Get the cached trade list, newest date first.

    ``error`` carries the message of the last failed fetch, if any.
    """
    return {
        "status": "success",
        "count": len(repository.trades),
        "loading": repository.loading,
        "error": repository.error,
        "data": repository.trades,
    }


@router.post("/refresh")
def refresh_trades(repository: TradeRepository = Depends(get_trade_repository)):
    """Re-fetch all trades from the store."""
    repository.fetch()
    if repository.error:
        raise HTTPException(status_code=500, detail=repository.error)
    return {
        "status": "success",
        "count": len(repository.trades),
        "data": repository.trades,
    }


@router.get("/{trade_id}")
async def get_trade(trade_id: str, repository: TradeRepository = Depends(get_trade_repository)):
    """Get one trade from the cached list."""
    trade = repository.get(trade_id)
    if trade is None:
        raise HTTPException(status_code=404, detail="Trade not found")
    return {"status": "success", "data": trade}


@router.post("/", status_code=201)
def create_trade(payload: TradeCreate, repository: TradeRepository = Depends(get_trade_repository)):
    """Log a new trade; it is prepended to the cached list."""
    result = repository.add(payload.model_dump())
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error or "Failed to save trade")
    return {"status": "success", "data": result.record}


@router.patch("/{trade_id}")
def update_trade(
    trade_id: str,
    payload: TradeUpdate,
    repository: TradeRepository = Depends(get_trade_repository),
):
    """Edit a cached trade with the fields present in the request."""
    if repository.get(trade_id) is None:
        raise HTTPException(status_code=404, detail="Trade not found")

    result = repository.update(trade_id, payload.model_dump(exclude_unset=True))
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error or "Failed to save trade")
    return {"status": "success", "data": result.record}


@router.delete("/{trade_id}")
def delete_trade(trade_id: str, repository: TradeRepository = Depends(get_trade_repository)):
    """Delete a trade by id (also when it is not in the cached list)."""
    result = repository.delete(trade_id)
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error or "Failed to delete trade")
    return {"status": "deleted", "id": trade_id}
