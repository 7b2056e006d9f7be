"""Debounced autosave for the strategy document."""

import asyncio
from typing import Optional

from tradejournal.core.constants import StrategyConstants
from tradejournal.core.logger import get_logger
from tradejournal.journal.repository import OperationResult
from tradejournal.journal.strategy import StrategyRepository

logger = get_logger(__name__)


class DebouncedAutosave:
    """
    Cancellable delayed save bound to one strategy document.

    Every ``edit`` cancels the pending timer and schedules a new one, so only
    the last edit within an idle window of ``delay_ms`` reaches the store.
    Once a timer fires its save is in flight and is no longer cancelled by
    later edits; those schedule the next save, which waits for the running
    one so the first save's inserted row id is reused.

    Must be used from a running event loop (the API request handlers).
    """

    def __init__(self, repository: StrategyRepository, delay_ms: int = StrategyConstants.AUTOSAVE_DELAY_MS):
        self.repository = repository
        self.delay = delay_ms / 1000.0
        self.strategy = repository.document.strategy
        self.notes = repository.document.notes
        self.last_result: Optional[OperationResult] = None
        self._timer: Optional[asyncio.Task] = None
        self._lock: Optional[asyncio.Lock] = None

    @property
    def pending(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def edit(self, strategy: Optional[str] = None, notes: Optional[str] = None) -> None:
        """Record new text and restart the debounce timer."""
        if strategy is not None:
            self.strategy = strategy
        if notes is not None:
            self.notes = notes
        self.cancel()
        self._timer = asyncio.get_running_loop().create_task(self._save_later())

    def cancel(self) -> None:
        """Drop the pending save, if any."""
        if self.pending:
            self._timer.cancel()
        self._timer = None

    async def flush(self) -> OperationResult:
        """Save the current text now instead of waiting for the timer."""
        self.cancel()
        return await self._save()

    async def _save_later(self) -> None:
        await asyncio.sleep(self.delay)
        self._timer = None
        await self._save()

    async def _save(self) -> OperationResult:
        # created on first use so it binds to the loop that runs the saves
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            strategy, notes = self.strategy, self.notes
            result = await asyncio.to_thread(self.repository.save, strategy, notes)
        if not result.success:
            logger.warning(f"Autosave failed: {result.error}")
        self.last_result = result
        return result
