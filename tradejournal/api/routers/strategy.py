"""API endpoints for the strategy/notes editor with debounced autosave."""

from fastapi import APIRouter, Depends, HTTPException

from tradejournal.api.dependencies import get_autosave
from tradejournal.api.models.strategy import StrategyEdit, StrategyState
from tradejournal.journal.autosave import DebouncedAutosave

router = APIRouter()


def _state(autosave: DebouncedAutosave) -> StrategyState:
    repository = autosave.repository
    return StrategyState(
        id=repository.document.id,
        strategy=autosave.strategy,
        notes=autosave.notes,
        last_saved=repository.last_saved.isoformat() if repository.last_saved else None,
        saving=repository.saving,
        autosave_pending=autosave.pending,
    )


@router.get("/")
async def get_strategy(autosave: DebouncedAutosave = Depends(get_autosave)):
    """Current strategy and notes, including unsaved edits."""
    return {"status": "success", "data": _state(autosave)}


@router.put("/")
async def edit_strategy(edit: StrategyEdit, autosave: DebouncedAutosave = Depends(get_autosave)):
    """
    Record an edit; the store write happens once edits pause for the
    autosave delay (2 seconds by default).
    """
    autosave.edit(strategy=edit.strategy, notes=edit.notes)
    return {"status": "pending", "data": _state(autosave)}


@router.post("/save")
async def save_strategy(autosave: DebouncedAutosave = Depends(get_autosave)):
    """Write the current text immediately, cancelling any pending autosave."""
    result = await autosave.flush()
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error or "Failed to save strategy")
    return {"status": "success", "data": _state(autosave)}
