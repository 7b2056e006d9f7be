"""Tests for the PostgREST table store client."""
from unittest.mock import MagicMock

import pytest
import requests

from tradejournal.storage.base import StoreError
from tradejournal.storage.rest import RestTableStore


def make_response(status_code=200, json_data=None, content=b'[]'):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = content
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def store(session, tmp_path, monkeypatch):
    monkeypatch.setattr('tradejournal.core.error_decorator.Paths.API_ERROR_LOG', tmp_path / 'errors.log')
    return RestTableStore('https://project.supabase.co/', 'anon-key', timeout=5, session=session)


class TestRequests:
    """Tests for request encoding."""

    def test_auth_headers(self, store, session):
        assert session.headers['apikey'] == 'anon-key'
        assert session.headers['Authorization'] == 'Bearer anon-key'

    def test_select_ordered(self, store, session):
        rows = [{'id': '1', 'date': '2024-01-02'}]
        session.request.return_value = make_response(json_data=rows)

        assert store.select('trades', order_by='date', descending=True) == rows

        method, url = session.request.call_args.args
        kwargs = session.request.call_args.kwargs
        assert method == 'GET'
        assert url == 'https://project.supabase.co/rest/v1/trades'
        assert kwargs['params'] == {'select': '*', 'order': 'date.desc'}
        assert kwargs['timeout'] == 5

    def test_select_limit(self, store, session):
        session.request.return_value = make_response(json_data=[])
        store.select('strategies', limit=1)
        assert session.request.call_args.kwargs['params'] == {'select': '*', 'limit': '1'}

    def test_insert_returns_representation(self, store, session):
        stored = [{'id': 'abc', 'pair': 'BTC/USD'}]
        session.request.return_value = make_response(status_code=201, json_data=stored)

        assert store.insert('trades', [{'pair': 'BTC/USD'}]) == stored

        kwargs = session.request.call_args.kwargs
        assert session.request.call_args.args[0] == 'POST'
        assert kwargs['json'] == [{'pair': 'BTC/USD'}]
        assert kwargs['headers'] == {'Prefer': 'return=representation'}

    def test_update_filters_by_id(self, store, session):
        session.request.return_value = make_response(json_data=[{'id': 'abc', 'pnl': 5}])

        store.update('trades', {'pnl': 5}, {'id': 'abc'})

        kwargs = session.request.call_args.kwargs
        assert session.request.call_args.args[0] == 'PATCH'
        assert kwargs['params'] == {'id': 'eq.abc'}
        assert kwargs['json'] == {'pnl': 5}

    def test_delete_with_empty_body(self, store, session):
        session.request.return_value = make_response(status_code=204, content=b'')

        assert store.delete('trades', {'id': 'abc'}) is None
        assert session.request.call_args.kwargs['params'] == {'id': 'eq.abc'}


class TestErrors:
    """Tests for error conversion."""

    def test_http_error_uses_store_message(self, store, session):
        session.request.return_value = make_response(
            status_code=400,
            json_data={'message': 'invalid input syntax for type numeric', 'code': '22P02'},
        )

        with pytest.raises(StoreError) as exc_info:
            store.insert('trades', [{'pnl': 'abc'}])

        assert exc_info.value.message == 'invalid input syntax for type numeric'
        assert exc_info.value.status_code == 400
        assert exc_info.value.code == '22P02'

    def test_http_error_without_json(self, store, session):
        session.request.return_value = make_response(status_code=503, json_data=ValueError('no json'))

        with pytest.raises(StoreError, match='HTTP 503'):
            store.select('trades')

    def test_network_error(self, store, session):
        session.request.side_effect = requests.ConnectionError('refused')

        with pytest.raises(StoreError, match='refused'):
            store.select('trades')

    def test_failure_written_to_error_log(self, store, session, tmp_path):
        session.request.side_effect = requests.Timeout('slow')

        with pytest.raises(StoreError):
            store.select('trades')

        log_text = (tmp_path / 'errors.log').read_text()
        assert 'StoreError' in log_text
        assert '_request' in log_text

    def test_missing_base_url(self):
        with pytest.raises(ValueError):
            RestTableStore('', 'key')
