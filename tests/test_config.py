"""Tests for configuration loading and validation."""
import pytest
import yaml

from tradejournal.core.config import get_param, get_secret, load_config, validate_config


@pytest.fixture
def config():
    return {
        'store': {'backend': 'memory', 'url_env': 'TJ_TEST_URL', 'key_env': 'TJ_TEST_KEY'},
        'coach': {'api_key_env': 'TJ_TEST_GEMINI', 'max_trades': 30},
        'strategy': {'autosave_delay_ms': 2000},
        'api': {'host': '127.0.0.1', 'port': 8084},
        'logging': {'level': 'INFO'},
    }


def write_config(tmp_path, config):
    path = tmp_path / 'config.yaml'
    path.write_text(yaml.safe_dump(config))
    return path


def test_load_from_file(tmp_path, config):
    loaded = load_config(str(write_config(tmp_path, config)))
    assert loaded == config


def test_load_from_environment_variable(tmp_path, config, monkeypatch):
    monkeypatch.setenv('TRADEJOURNAL_CONFIG', str(write_config(tmp_path, config)))
    assert load_config()['store']['backend'] == 'memory'


def test_default_config_is_valid(monkeypatch):
    monkeypatch.delenv('TRADEJOURNAL_CONFIG', raising=False)
    config = load_config()
    assert config['strategy']['autosave_delay_ms'] == 2000
    assert config['coach']['max_trades'] == 30


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / 'nope.yaml'))


@pytest.mark.parametrize('section', ['store', 'coach', 'strategy', 'api', 'logging'])
def test_missing_section(config, section):
    del config[section]
    with pytest.raises(ValueError, match=section):
        validate_config(config)


def test_unknown_backend(config):
    config['store']['backend'] = 'sqlite'
    with pytest.raises(ValueError, match='backend'):
        validate_config(config)


@pytest.mark.parametrize('delay', [0, -5, 'soon'])
def test_invalid_autosave_delay(config, delay):
    config['strategy']['autosave_delay_ms'] = delay
    with pytest.raises(ValueError, match='autosave_delay_ms'):
        validate_config(config)


def test_invalid_max_trades(config):
    config['coach']['max_trades'] = 0
    with pytest.raises(ValueError, match='max_trades'):
        validate_config(config)


def test_get_param(config):
    assert get_param(config, 'api', 'port') == 8084
    assert get_param(config, 'api', 'missing', default='x') == 'x'
    assert get_param(config, 'store', 'backend', 'deeper') is None


def test_get_secret_reads_named_variable(config, monkeypatch):
    monkeypatch.setenv('TJ_TEST_KEY', 'anon-key')
    assert get_secret(config, 'store', 'key_env') == 'anon-key'


def test_get_secret_unset(config, monkeypatch):
    monkeypatch.delenv('TJ_TEST_GEMINI', raising=False)
    assert get_secret(config, 'coach', 'api_key_env') == ''
    assert get_secret(config, 'coach', 'not_configured', default='fallback') == 'fallback'
