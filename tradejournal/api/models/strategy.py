"""Pydantic models for the strategy/notes document."""

from typing import Optional

from pydantic import BaseModel, Field


class StrategyEdit(BaseModel):
    """Edit of either text; omitted fields keep their current value."""

    strategy: Optional[str] = Field(None, description="Trading strategy text")
    notes: Optional[str] = Field(None, description="Daily notes / ideas")


class StrategyState(BaseModel):
    """Current document as seen by the editor."""

    id: Optional[str] = Field(None, description="Row id, None until the first save")
    strategy: str = Field("", description="Trading strategy text")
    notes: str = Field("", description="Daily notes / ideas")
    last_saved: Optional[str] = Field(None, description="Time of the last successful save")
    saving: bool = Field(False, description="A save is running")
    autosave_pending: bool = Field(False, description="An edit is waiting for the debounce timer")
