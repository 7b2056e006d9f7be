"""
Trade repository.

Owns the in-memory list of trades mirrored from the store. The list is a
cache of the last fetch/mutation response, never the source of truth:

- ``fetch`` replaces it with the store contents ordered by date descending.
- ``add`` prepends the stored record without re-sorting, so an older trade
  shows first until the next ``fetch``.
- ``update`` swaps the matching record in place.
- ``delete`` drops matching records (a no-op when the id is not cached).

Mutations report an ``OperationResult`` and never raise store errors to the
caller; ``fetch`` reports failure through ``error``.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from tradejournal.core.constants import Tables
from tradejournal.core.logger import get_logger
from tradejournal.storage.base import Row, StoreError, TableStore

logger = get_logger(__name__)


@dataclass
class OperationResult:
    """Outcome of a repository mutation."""

    success: bool
    error: Optional[str] = None
    record: Optional[Row] = None


class TradeRepository:
    """Cached view over the ``trades`` table."""

    def __init__(self, store: TableStore, table: str = Tables.TRADES):
        self.store = store
        self.table = table
        self.trades: List[Row] = []
        self.loading = False
        self.error: Optional[str] = None

    def fetch(self) -> None:
        """Reload all trades, newest date first."""
        self.loading = True
        try:
            rows = self.store.select(self.table, order_by=Tables.ORDER_COLUMN, descending=True)
            self.trades = list(rows or [])
            self.error = None
            logger.info(f"Fetched {len(self.trades)} trades")
        except StoreError as e:
            logger.error(f"Error fetching trades: {e}")
            self.error = str(e)
        finally:
            self.loading = False

    def add(self, trade: Dict[str, Any]) -> OperationResult:
        payload = {k: v for k, v in trade.items() if k != Tables.ID_COLUMN}
        try:
            rows = self.store.insert(self.table, [payload])
            if not rows:
                raise StoreError("Store returned no row for the inserted trade")
        except StoreError as e:
            logger.error(f"Error adding trade: {e}")
            return OperationResult(success=False, error=str(e))

        record = rows[0]
        self.trades = [record] + self.trades
        logger.info(f"Added trade {record.get(Tables.ID_COLUMN)}")
        return OperationResult(success=True, record=record)

    def update(self, trade_id: Any, fields: Dict[str, Any]) -> OperationResult:
        try:
            rows = self.store.update(self.table, fields, {Tables.ID_COLUMN: trade_id})
            if not rows:
                raise StoreError(f"Trade {trade_id} not found")
        except StoreError as e:
            logger.error(f"Error updating trade: {e}")
            return OperationResult(success=False, error=str(e))

        record = rows[0]
        self.trades = [record if _same_id(t, trade_id) else t for t in self.trades]
        logger.info(f"Updated trade {trade_id}")
        return OperationResult(success=True, record=record)

    def delete(self, trade_id: Any) -> OperationResult:
        try:
            self.store.delete(self.table, {Tables.ID_COLUMN: trade_id})
        except StoreError as e:
            logger.error(f"Error deleting trade: {e}")
            return OperationResult(success=False, error=str(e))

        self.trades = [t for t in self.trades if not _same_id(t, trade_id)]
        logger.info(f"Deleted trade {trade_id}")
        return OperationResult(success=True)

    def get(self, trade_id: Any) -> Optional[Row]:
        """Cached trade with ``trade_id``, or None when it is not in the list."""
        for trade in self.trades:
            if _same_id(trade, trade_id):
                return trade
        return None


def _same_id(trade: Row, trade_id: Any) -> bool:
    # ids arrive as path strings but the store may hand back integers
    return str(trade.get(Tables.ID_COLUMN)) == str(trade_id)
