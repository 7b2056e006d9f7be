"""
PostgREST (Supabase) table store client.

Talks to ``<base_url>/rest/v1/<table>`` with ``requests``. Filters are
encoded as ``column=eq.value``, ordering as ``order=column.desc`` and
writes ask for ``Prefer: return=representation`` so the stored rows come
back in the response.
"""

from typing import Any, Dict, List, Optional

import requests

from tradejournal.core.constants import StoreConstants
from tradejournal.core.error_decorator import log_errors_to_file
from tradejournal.core.logger import get_logger
from tradejournal.storage.base import Row, StoreError, TableStore

logger = get_logger(__name__)


class RestTableStore(TableStore):
    """HTTP client for a PostgREST-compatible table store."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = StoreConstants.REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ValueError("Store base URL is required")
        self.base_url = base_url.rstrip("/") + StoreConstants.REST_PATH
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            }
        )

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        params = {"select": "*", **self._filter_params(filters)}
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"
        if limit is not None:
            params["limit"] = str(limit)
        return self._request("GET", table, params=params)

    def insert(self, table: str, rows: List[Row]) -> List[Row]:
        return self._request(
            "POST", table, json=rows, headers={"Prefer": "return=representation"}
        )

    def update(self, table: str, fields: Row, filters: Dict[str, Any]) -> List[Row]:
        return self._request(
            "PATCH",
            table,
            params=self._filter_params(filters),
            json=fields,
            headers={"Prefer": "return=representation"},
        )

    def delete(self, table: str, filters: Dict[str, Any]) -> None:
        self._request("DELETE", table, params=self._filter_params(filters))

    @staticmethod
    def _filter_params(filters: Optional[Dict[str, Any]]) -> Dict[str, str]:
        return {column: f"eq.{value}" for column, value in (filters or {}).items()}

    @log_errors_to_file()
    def _request(self, method: str, table: str, params=None, json=None, headers=None) -> List[Row]:
        url = f"{self.base_url}/{table}"
        logger.debug(f"{method} {url} params={params}")
        try:
            response = self.session.request(
                method, url, params=params, json=json, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise StoreError(f"Store request failed: {e}") from e

        if not response.ok:
            raise self._error_from_response(response)

        if not response.content:
            return []
        try:
            data = response.json()
        except ValueError as e:
            raise StoreError("Store returned a non-JSON response", response.status_code) from e
        return data if isinstance(data, list) else [data]

    @staticmethod
    def _error_from_response(response: requests.Response) -> StoreError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("message") if isinstance(body, dict) else None
        code = body.get("code") if isinstance(body, dict) else None
        return StoreError(
            message or f"Store responded with HTTP {response.status_code}",
            status_code=response.status_code,
            code=code,
        )
