"""Process-wide service instances, built once from the loaded config.

Routers receive them through ``Depends`` so tests can swap any of them via
``app.dependency_overrides``.
"""

from functools import lru_cache

from tradejournal.coach.insights import CoachClient
from tradejournal.core.config import get_param, get_secret, load_config
from tradejournal.core.constants import CoachConstants, StoreConstants, StrategyConstants
from tradejournal.core.logger import get_logger
from tradejournal.journal.autosave import DebouncedAutosave
from tradejournal.journal.repository import TradeRepository
from tradejournal.journal.strategy import StrategyRepository
from tradejournal.storage.base import TableStore
from tradejournal.storage.memory import InMemoryTableStore
from tradejournal.storage.rest import RestTableStore

logger = get_logger(__name__)


@lru_cache
def get_config() -> dict:
    return load_config()


def build_store(config: dict) -> TableStore:
    """Store client for ``store.backend`` (``rest`` or ``memory``)."""
    backend = get_param(config, "store", "backend", default="rest")
    if backend == "memory":
        logger.warning("Using in-memory store; data is lost on restart")
        return InMemoryTableStore()

    return RestTableStore(
        base_url=get_secret(config, "store", "url_env"),
        api_key=get_secret(config, "store", "key_env"),
        timeout=get_param(config, "store", "timeout_seconds", default=StoreConstants.REQUEST_TIMEOUT_SECONDS),
    )


@lru_cache
def get_store() -> TableStore:
    return build_store(get_config())


@lru_cache
def get_trade_repository() -> TradeRepository:
    return TradeRepository(get_store())


@lru_cache
def get_strategy_repository() -> StrategyRepository:
    return StrategyRepository(get_store())


@lru_cache
def get_autosave() -> DebouncedAutosave:
    """Sync dependency: FastAPI resolves it, including the first load, in the threadpool."""
    repository = get_strategy_repository()
    if not repository.loaded:
        repository.load()
    delay_ms = get_param(get_config(), "strategy", "autosave_delay_ms", default=StrategyConstants.AUTOSAVE_DELAY_MS)
    return DebouncedAutosave(repository, delay_ms=delay_ms)


def build_coach(config: dict) -> CoachClient:
    """Coach client using the configured model and default key."""
    return CoachClient(
        default_api_key=get_secret(config, "coach", "api_key_env"),
        model=get_param(config, "coach", "model", default=CoachConstants.DEFAULT_MODEL),
        max_trades=get_param(config, "coach", "max_trades", default=CoachConstants.MAX_TRADES),
        timeout=get_param(config, "coach", "timeout_seconds", default=CoachConstants.REQUEST_TIMEOUT_SECONDS),
    )


@lru_cache
def get_coach() -> CoachClient:
    return build_coach(get_config())
