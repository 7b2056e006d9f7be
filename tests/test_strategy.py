"""Tests for the strategy document and its debounced autosave."""
import asyncio
import time
from unittest.mock import MagicMock

import pytest

from tradejournal.journal.autosave import DebouncedAutosave
from tradejournal.journal.repository import OperationResult
from tradejournal.journal.strategy import StrategyDocument, StrategyRepository
from tradejournal.storage.base import StoreError
from tradejournal.storage.memory import InMemoryTableStore


@pytest.fixture
def store():
    return InMemoryTableStore()


@pytest.fixture
def repository(store):
    return StrategyRepository(store)


def recording_repository(save_seconds=0.0):
    """Repository stand-in that records saves and optionally blocks while saving."""
    repo = MagicMock()
    repo.document = StrategyDocument()
    saved = []

    def save(strategy, notes):
        if save_seconds:
            time.sleep(save_seconds)
        saved.append((strategy, notes))
        return OperationResult(success=True)

    repo.save.side_effect = save
    return repo, saved


class TestLoad:
    """Tests for StrategyRepository.load()."""

    def test_empty_table_gives_empty_document(self, repository):
        document = repository.load()

        assert document == StrategyDocument()
        assert repository.loaded is True
        assert repository.last_saved is None

    def test_existing_row(self, store, repository):
        store.tables['strategies'] = [{
            'id': 's1', 'strategy': 'Only A+ setups', 'notes': None,
            'updated_at': '2024-03-01T10:00:00+00:00',
        }]

        document = repository.load()

        assert document.id == 's1'
        assert document.strategy == 'Only A+ setups'
        assert document.notes == ''
        assert repository.last_saved.year == 2024

    def test_load_reads_single_row(self, store, repository):
        repository.load()
        assert ('select', 'strategies', None) in store.calls

    def test_load_failure_keeps_document(self):
        failing = MagicMock()
        failing.select.side_effect = StoreError('timeout')
        repo = StrategyRepository(failing)

        document = repo.load()

        assert document == StrategyDocument()
        assert repo.loaded is False


class TestSave:
    """Tests for StrategyRepository.save()."""

    def test_first_save_inserts_then_updates(self, store, repository):
        repository.load()

        first = repository.save('Plan v1', 'note')
        assert first.success is True
        document_id = repository.document.id
        assert document_id

        second = repository.save('Plan v2', 'note 2')

        assert second.success is True
        assert repository.document.id == document_id
        assert len(store.tables['strategies']) == 1
        assert store.tables['strategies'][0]['strategy'] == 'Plan v2'
        assert store.calls[-1] == ('update', 'strategies', {'id': document_id})

    def test_save_sets_timestamp(self, repository):
        result = repository.save('Plan', '')

        assert repository.last_saved is not None
        assert result.record['updated_at'] == repository.document.updated_at
        assert repository.saving is False

    def test_save_failure(self):
        failing = MagicMock()
        failing.insert.side_effect = StoreError('disk full')
        repo = StrategyRepository(failing)

        result = repo.save('Plan', '')

        assert result.success is False
        assert result.error == 'disk full'
        assert repo.last_saved is None
        assert repo.saving is False


class TestDebouncedAutosave:
    """Tests for the debounce timer."""

    def test_only_last_edit_saved(self):
        repo, saved = recording_repository()

        async def scenario():
            autosave = DebouncedAutosave(repo, delay_ms=50)
            autosave.edit(strategy='a')
            await asyncio.sleep(0.01)
            autosave.edit(strategy='ab')
            await asyncio.sleep(0.01)
            autosave.edit(strategy='abc', notes='n')
            assert autosave.pending is True
            await asyncio.sleep(0.2)
            assert autosave.pending is False
            return autosave

        autosave = asyncio.run(scenario())

        assert saved == [('abc', 'n')]
        assert autosave.last_result.success is True

    def test_partial_edit_keeps_other_field(self):
        repo, saved = recording_repository()
        repo.document = StrategyDocument(id='s1', strategy='Plan', notes='Old notes')

        async def scenario():
            autosave = DebouncedAutosave(repo, delay_ms=10)
            autosave.edit(notes='New notes')
            await asyncio.sleep(0.1)

        asyncio.run(scenario())

        assert saved == [('Plan', 'New notes')]

    def test_flush_saves_immediately(self):
        repo, saved = recording_repository()

        async def scenario():
            autosave = DebouncedAutosave(repo, delay_ms=10_000)
            autosave.edit(strategy='draft')
            result = await autosave.flush()
            assert autosave.pending is False
            return result

        result = asyncio.run(scenario())

        assert result.success is True
        assert saved == [('draft', '')]

    def test_cancel_drops_pending_save(self):
        repo, saved = recording_repository()

        async def scenario():
            autosave = DebouncedAutosave(repo, delay_ms=20)
            autosave.edit(strategy='discard me')
            autosave.cancel()
            await asyncio.sleep(0.1)

        asyncio.run(scenario())

        assert saved == []

    def test_in_flight_save_not_cancelled(self):
        """An edit during a running save schedules another save that starts after it."""
        repo = MagicMock()
        repo.document = StrategyDocument()
        spans = []

        def save(strategy, notes):
            started = time.monotonic()
            time.sleep(0.1)
            spans.append((strategy, started, time.monotonic()))
            return OperationResult(success=True)

        repo.save.side_effect = save

        async def scenario():
            autosave = DebouncedAutosave(repo, delay_ms=10)
            autosave.edit(strategy='first')
            await asyncio.sleep(0.05)
            autosave.edit(strategy='second')
            await asyncio.sleep(0.5)

        asyncio.run(scenario())

        assert [s[0] for s in spans] == ['first', 'second']
        assert spans[1][1] >= spans[0][2], "Second save overlapped the first"

    def test_flush_waits_for_running_save(self):
        repo, saved = recording_repository(save_seconds=0.1)

        async def scenario():
            autosave = DebouncedAutosave(repo, delay_ms=10)
            autosave.edit(strategy='draft')
            await asyncio.sleep(0.05)
            autosave.edit(strategy='final')
            await autosave.flush()
            assert saved == [('draft', ''), ('final', '')]

        asyncio.run(scenario())

    def test_overlapping_saves_keep_single_row(self):
        """A slow first insert must not let a second save insert another row."""

        class SlowInsertStore(InMemoryTableStore):
            def insert(self, table, rows):
                time.sleep(0.1)
                return super().insert(table, rows)

        store = SlowInsertStore()
        repo = StrategyRepository(store)

        async def scenario():
            autosave = DebouncedAutosave(repo, delay_ms=10)
            autosave.edit(strategy='first')
            await asyncio.sleep(0.05)
            autosave.edit(strategy='second')
            await asyncio.sleep(0.4)

        asyncio.run(scenario())

        rows = store.tables['strategies']
        assert len(rows) == 1
        assert rows[0]['strategy'] == 'second'
        assert repo.document.id == rows[0]['id']

    def test_failed_save_recorded(self):
        repo = MagicMock()
        repo.document = StrategyDocument()
        repo.save.return_value = OperationResult(success=False, error='offline')

        async def scenario():
            autosave = DebouncedAutosave(repo, delay_ms=10)
            return await autosave.flush()

        result = asyncio.run(scenario())

        assert result.success is False
        assert result.error == 'offline'

    def test_edit_requires_running_loop(self):
        repo, _ = recording_repository()
        autosave = DebouncedAutosave(repo, delay_ms=10)

        with pytest.raises(RuntimeError):
            autosave.edit(strategy='x')
