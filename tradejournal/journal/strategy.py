"""Strategy/notes document stored as a single row of the ``strategies`` table."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from tradejournal.core.constants import Tables
from tradejournal.core.logger import get_logger
from tradejournal.journal.repository import OperationResult
from tradejournal.storage.base import StoreError, TableStore

logger = get_logger(__name__)


@dataclass
class StrategyDocument:
    """The singleton strategy document."""

    id: Optional[str] = None
    strategy: str = ""
    notes: str = ""
    updated_at: Optional[str] = None


class StrategyRepository:
    """
    Loads and saves the strategy document.

    The row is created lazily: the first save inserts it and remembers the
    assigned id, every later save updates that row by id.
    """

    def __init__(self, store: TableStore, table: str = Tables.STRATEGIES):
        self.store = store
        self.table = table
        self.document = StrategyDocument()
        self.last_saved: Optional[datetime] = None
        self.saving = False
        self.loaded = False

    def load(self) -> StrategyDocument:
        """Read the first row; an empty table leaves an empty document."""
        try:
            rows = self.store.select(self.table, limit=1)
        except StoreError as e:
            logger.error(f"Error fetching strategy: {e}")
            return self.document

        self.loaded = True
        if rows:
            row = rows[0]
            self.document = StrategyDocument(
                id=row.get(Tables.ID_COLUMN),
                strategy=row.get("strategy") or "",
                notes=row.get("notes") or "",
                updated_at=row.get("updated_at"),
            )
            if self.document.updated_at:
                self.last_saved = _parse_timestamp(self.document.updated_at)
        return self.document

    def save(self, strategy: str, notes: str) -> OperationResult:
        """Persist both texts with a fresh ``updated_at``."""
        self.saving = True
        timestamp = datetime.now(timezone.utc)
        payload = {
            "strategy": strategy,
            "notes": notes,
            "updated_at": timestamp.isoformat(),
        }
        try:
            if self.document.id:
                rows = self.store.update(self.table, payload, {Tables.ID_COLUMN: self.document.id})
            else:
                rows = self.store.insert(self.table, [payload])
        except StoreError as e:
            logger.error(f"Error saving strategy: {e}")
            return OperationResult(success=False, error=str(e))
        finally:
            self.saving = False

        if rows:
            row = rows[0]
            self.document = StrategyDocument(
                id=row.get(Tables.ID_COLUMN, self.document.id),
                strategy=strategy,
                notes=notes,
                updated_at=payload["updated_at"],
            )
            self.last_saved = timestamp
            logger.info(f"Saved strategy document {self.document.id}")
        return OperationResult(success=True, record=rows[0] if rows else None)


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable strategy timestamp: {value}")
        return None
