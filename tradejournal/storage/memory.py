"""In-process table store with the same semantics as the hosted one.

Used for local runs (``store.backend: memory``) and as the substitutable
fake behind the repositories in tests.
"""
import copy
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from tradejournal.core.constants import Tables
from tradejournal.storage.base import Row, TableStore


class InMemoryTableStore(TableStore):
    """Dict-of-lists store assigning ``id`` and ``created_at`` on insert."""

    def __init__(self, tables: Optional[Dict[str, List[Row]]] = None):
        self.tables: Dict[str, List[Row]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self.calls: List[tuple] = []

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        self.calls.append(("select", table, filters))
        rows = [row for row in self._table(table) if self._matches(row, filters)]
        if order_by:
            rows = sorted(rows, key=lambda row: str(row.get(order_by) or ""), reverse=descending)
        if limit is not None:
            rows = rows[:limit]
        return copy.deepcopy(rows)

    def insert(self, table: str, rows: List[Row]) -> List[Row]:
        self.calls.append(("insert", table, None))
        stored = []
        for row in rows:
            record = dict(row)
            record.setdefault(Tables.ID_COLUMN, str(uuid.uuid4()))
            record.setdefault("created_at", datetime.now(timezone.utc).isoformat())
            self._table(table).append(record)
            stored.append(record)
        return copy.deepcopy(stored)

    def update(self, table: str, fields: Row, filters: Dict[str, Any]) -> List[Row]:
        self.calls.append(("update", table, filters))
        updated = []
        for row in self._table(table):
            if self._matches(row, filters):
                row.update({k: v for k, v in fields.items() if k != Tables.ID_COLUMN})
                updated.append(row)
        return copy.deepcopy(updated)

    def delete(self, table: str, filters: Dict[str, Any]) -> None:
        self.calls.append(("delete", table, filters))
        self.tables[table] = [row for row in self._table(table) if not self._matches(row, filters)]

    def _table(self, table: str) -> List[Row]:
        return self.tables.setdefault(table, [])

    @staticmethod
    def _matches(row: Row, filters: Optional[Dict[str, Any]]) -> bool:
        # path parameters are strings while seeded rows may hold integer ids
        return all(str(row.get(column)) == str(value) for column, value in (filters or {}).items())
