"""Centralized constants and paths for the trade journal.

All table names, enumerations and analysis thresholds live here so the
repository, analysis and API layers never embed magic values.
"""
from pathlib import Path
from typing import Final


class Paths:
    """Centralized file system paths."""

    ROOT: Final[Path] = Path(__file__).parent.parent.parent

    CONFIG_DIR: Final[Path] = ROOT / 'configs'
    DEFAULT_CONFIG: Final[Path] = CONFIG_DIR / 'default.yaml'

    LOGS_DIR: Final[Path] = ROOT / 'logs'
    API_ERROR_LOG: Final[Path] = LOGS_DIR / 'api_errors.log'


class Tables:
    """Table names in the hosted store."""

    TRADES: Final[str] = 'trades'
    STRATEGIES: Final[str] = 'strategies'

    ORDER_COLUMN: Final[str] = 'date'
    ID_COLUMN: Final[str] = 'id'


class TradeResult:
    """Stored values of a trade's outcome."""

    WIN: Final[str] = 'Win'
    LOSE: Final[str] = 'Lose'
    BREAKEVEN: Final[str] = 'BE'
    PENDING: Final[str] = 'Pending'

    DECIDED: Final[frozenset[str]] = frozenset({WIN, LOSE, BREAKEVEN})


class PatternConstants:
    """Thresholds for sweet spot / danger zone classification."""

    MIN_SAMPLE: Final[int] = 3
    SWEET_SPOT_WIN_RATE: Final[float] = 70.0
    DANGER_ZONE_WIN_RATE: Final[float] = 40.0

    TOP_N_BREAKDOWN: Final[int] = 5

    DIMENSION_HOURLY: Final[str] = 'hourly'
    DIMENSION_PAIRS: Final[str] = 'pairs'
    DIMENSION_STRATEGIES: Final[str] = 'strategies'
    DIMENSION_DIRECTIONS: Final[str] = 'directions'


class DashboardConstants:
    """Dashboard presentation constants."""

    RECENT_TRADES: Final[int] = 5
    WIN_RATE_PRECISION: Final[int] = 1


class CoachConstants:
    """Text-generation ("AI coach") request constants."""

    MAX_TRADES: Final[int] = 30
    DEFAULT_MODEL: Final[str] = 'gemini-1.5-flash'
    ENDPOINT_TEMPLATE: Final[str] = (
        'https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent'
    )
    RATE_LIMIT_STATUS: Final[int] = 429
    RATE_LIMIT_DEFAULT_MESSAGE: Final[str] = 'Rate limit exceeded.'
    QUOTA_HINT: Final[str] = '(Please check your Google AI Studio quota)'
    NO_INSIGHTS_MESSAGE: Final[str] = 'No insights generated.'
    MISSING_KEY_MESSAGE: Final[str] = 'A text-generation API key is required.'
    REQUEST_TIMEOUT_SECONDS: Final[int] = 60


class StrategyConstants:
    """Strategy document autosave constants."""

    AUTOSAVE_DELAY_MS: Final[int] = 2000


class StoreConstants:
    """HTTP store client constants."""

    REST_PATH: Final[str] = '/rest/v1'
    REQUEST_TIMEOUT_SECONDS: Final[int] = 15


class FileFormats:
    """Date and time formats."""

    DATE_FORMAT: Final[str] = '%Y-%m-%d'
    TIME_FORMAT: Final[str] = '%H:%M'


SENSITIVE_KEYS: Final[tuple[str, ...]] = ('password', 'token', 'secret', 'key', 'api')
