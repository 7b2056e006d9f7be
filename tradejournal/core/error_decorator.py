"""Error logging decorator for calls to external systems (store, text generation)."""

import functools
import inspect
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from tradejournal.core.constants import SENSITIVE_KEYS, Paths
from tradejournal.core.logger import get_logger

logger = get_logger(__name__)


def log_errors_to_file(log_file: str = None):
    """
    Decorator that appends a detailed record to a file when the wrapped call fails.

    Records include the timestamp, function name and module, error type and
    message, the arguments (API keys and tokens redacted) and the full stack
    trace. The exception is re-raised unchanged so callers keep their own
    handling.

    Args:
        log_file: Path to the log file (default: logs/api_errors.log)

    Usage:
        @log_errors_to_file()
        def _post(self, url, payload):
            ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                _log_error_details(func, e, args, kwargs, log_file)
                raise

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _log_error_details(func, e, args, kwargs, log_file)
                raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def _log_error_details(func: Callable, error: Exception, args: tuple, kwargs: dict, log_file: str = None):
    """Format and append error details to the log file."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    log_path = Path(log_file) if log_file else Paths.API_ERROR_LOG

    log_entry = f"""
{'='*100}
TIMESTAMP: {timestamp}
FUNCTION:  {func.__module__}.{func.__qualname__}
ERROR TYPE: {type(error).__name__}
ERROR MSG:  {error}

ARGUMENTS:
{_format_args(args, kwargs)}

FULL STACK TRACE:
{traceback.format_exc()}
{'='*100}

"""

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, 'a', encoding='utf-8') as f:
            f.write(log_entry)
    except OSError as log_error:
        logger.error(f"Failed to write to error log {log_path}: {log_error}")


def _is_sensitive(name: str) -> bool:
    return any(sensitive in name.lower() for sensitive in SENSITIVE_KEYS)


def _format_args(args: tuple, kwargs: dict) -> str:
    """Format call arguments for logging, redacting secrets."""
    formatted = []

    start_idx = 0
    if args and hasattr(args[0], '__dict__'):
        start_idx = 1
        formatted.append("  self: <instance>")

    for i, arg in enumerate(args[start_idx:], start=start_idx):
        formatted.append(f"  arg[{i}]: {_sanitize_value(arg)}")

    for key, value in kwargs.items():
        value_str = "***REDACTED***" if _is_sensitive(key) else _sanitize_value(value)
        formatted.append(f"  {key}: {value_str}")

    return '\n'.join(formatted) if formatted else "  (no arguments)"


def _sanitize_value(value: Any) -> str:
    """Convert a value to a bounded, secret-free string representation."""
    max_length = 200

    if isinstance(value, str):
        if len(value) > max_length:
            return f"{value[:max_length]}... (truncated, total length: {len(value)})"
        return repr(value)

    if isinstance(value, (list, tuple, set)):
        if len(value) > 10:
            return f"{type(value).__name__} with {len(value)} items"
        return repr(value)

    if isinstance(value, dict):
        redacted = {k: ("***REDACTED***" if _is_sensitive(str(k)) else v) for k, v in value.items()}
        if len(redacted) > 10:
            return f"dict with {len(redacted)} keys (first 3: {list(redacted)[:3]}...)"
        return repr(redacted)

    if hasattr(value, '__dict__'):
        return f"<{type(value).__name__} object>"

    value_str = str(value)
    if len(value_str) > max_length:
        return f"{value_str[:max_length]}... (truncated)"
    return value_str
