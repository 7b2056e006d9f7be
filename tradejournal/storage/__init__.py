"""Table store clients."""

from .base import Row, StoreError, TableStore
from .memory import InMemoryTableStore
from .rest import RestTableStore

__all__ = [
    "Row",
    "StoreError",
    "TableStore",
    "InMemoryTableStore",
    "RestTableStore",
]
