"""Tests for logger setup."""
import pytest

from tradejournal.core.logger import get_logger, setup_logger


@pytest.fixture(autouse=True)
def reset_sinks():
    yield
    get_logger()


def test_setup_logger_writes_configured_file(tmp_path):
    log_file = tmp_path / 'logs' / 'journal.log'
    log = setup_logger({'logging': {'level': 'DEBUG', 'file': str(log_file)}})

    log.bind(name='tradejournal.journal.repository').info('Fetched 3 trades')

    text = log_file.read_text()
    assert 'Fetched 3 trades' in text
    assert 'tradejournal.journal.repository' in text


def test_level_filters_file_sink(tmp_path):
    log_file = tmp_path / 'journal.log'
    log = setup_logger({'logging': {'level': 'ERROR', 'file': str(log_file)}})

    log.info('AI coach returned 120 characters')
    log.error('AI coach error: quota')

    text = log_file.read_text()
    assert 'AI coach error: quota' in text
    assert 'returned 120 characters' not in text


def test_setup_logger_without_logging_section():
    log = setup_logger({})
    log.info('console only')
