"""Table store interface used by the journal repositories."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


Row = Dict[str, Any]


class StoreError(Exception):
    """Raised when the backing store rejects or fails a request."""

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class TableStore(ABC):
    """
    Minimal table API of a hosted backend-as-a-service store.

    Supports selecting all columns with equality filters, ordering and a row
    limit, inserting rows and getting the stored copies back, partial updates
    and deletes matched by column equality. Implementations raise
    ``StoreError`` on any failure.
    """

    @abstractmethod
    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        """Return rows of ``table`` matching ``filters``."""

    @abstractmethod
    def insert(self, table: str, rows: List[Row]) -> List[Row]:
        """Insert ``rows`` and return the stored copies (with ids)."""

    @abstractmethod
    def update(self, table: str, fields: Row, filters: Dict[str, Any]) -> List[Row]:
        """Apply ``fields`` to matching rows and return the updated rows."""

    @abstractmethod
    def delete(self, table: str, filters: Dict[str, Any]) -> None:
        """Delete matching rows."""
