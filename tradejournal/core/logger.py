"""loguru setup for the journal: console sink plus the optional rotating file
named in the `logging` config section."""
import sys
from pathlib import Path

from loguru import logger


def get_logger(name: str = "tradejournal", log_file: str = None, level: str = "INFO"):
    """
    Logger bound to a module name, with sinks reset to console (and file).

    Args:
        name: Logger name (bound as context and shown in every line)
        log_file: Optional path to a rotating log file
        level: Log level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured loguru logger

    Usage:
        logger = get_logger(__name__)
        logger.info(f"Fetched {len(self.trades)} trades")
        logger.error(f"Error adding trade: {e}")
    """
    logger.remove()

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} | {message}",
            level=level,
            rotation="10 MB",
            retention="7 days",
            compression="zip"
        )

    return logger.bind(name=name)


def setup_logger(config: dict):
    """
    Reconfigure sinks from the ``logging`` section of a loaded config.

    Module loggers created at import time share the reconfigured sinks;
    the returned logger is bound to ``tradejournal``.
    """
    section = config.get("logging", {}) if config else {}
    return get_logger(
        "tradejournal",
        log_file=section.get("file"),
        level=section.get("level", "INFO"),
    )


default_logger = get_logger()
