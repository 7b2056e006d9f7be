"""Configuration loader and validator."""
import os
from pathlib import Path
from typing import Any

import yaml

from tradejournal.core.constants import Paths

CONFIG_ENV_VAR = "TRADEJOURNAL_CONFIG"


def load_config(config_path: str = None) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML config file. Falls back to the
            ``TRADEJOURNAL_CONFIG`` environment variable, then to
            ``configs/default.yaml``.

    Returns:
        Dictionary containing configuration parameters
    """
    config_path = config_path or os.getenv(CONFIG_ENV_VAR) or str(Paths.DEFAULT_CONFIG)
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    validate_config(config)

    return config


def validate_config(config: dict[str, Any]) -> None:
    """
    Validate configuration parameters.

    Args:
        config: Configuration dictionary

    Raises:
        ValueError: If configuration is invalid
    """
    required_sections = ['store', 'coach', 'strategy', 'api', 'logging']
    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    valid_backends = ['rest', 'memory']
    if config['store'].get('backend') not in valid_backends:
        raise ValueError(f"Store backend must be one of {valid_backends}")

    delay = config['strategy'].get('autosave_delay_ms', 0)
    if not isinstance(delay, (int, float)) or delay <= 0:
        raise ValueError("strategy.autosave_delay_ms must be a positive number")

    max_trades = config['coach'].get('max_trades', 1)
    if not isinstance(max_trades, int) or max_trades < 1:
        raise ValueError("coach.max_trades must be >= 1")


def get_param(config: dict[str, Any], *keys, default=None) -> Any:
    """
    Safely get nested configuration parameter.

    Args:
        config: Configuration dictionary
        *keys: Nested keys to traverse
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    result = config
    for key in keys:
        if isinstance(result, dict) and key in result:
            result = result[key]
        else:
            return default
    return result


def get_secret(config: dict[str, Any], *keys, default: str = "") -> str:
    """
    Resolve a secret whose environment variable name is stored in config.

    ``get_secret(cfg, 'store', 'key_env')`` reads the variable named by
    ``store.key_env`` (e.g. ``SUPABASE_KEY``).
    """
    env_name = get_param(config, *keys)
    if not env_name:
        return default
    return os.getenv(env_name, default)
