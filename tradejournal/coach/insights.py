"""
AI coach: turns recent trades into a coaching prompt and asks a Gemini
``generateContent`` endpoint for three actionable insights.

One request per call, no retry, nothing cached. Failures come back as an
``InsightResult``; a 429 from the endpoint is reported as rate-limited.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

import requests

from tradejournal.core.constants import CoachConstants
from tradejournal.core.error_decorator import log_errors_to_file
from tradejournal.core.logger import get_logger

logger = get_logger(__name__)

PROMPT_TEMPLATE = """You are a professional trading coach. Analyze these recent trade logs from a trader's journal.
Identify patterns in their behavior, winning conditions, and losing conditions.
Pay special attention to their comments and mental state if mentioned.

Trade Logs:
{trade_logs}

Provide 3 concise, actionable insights to help them improve.
Format as a simple bulleted list in Markdown."""


class CoachError(Exception):
    """Text generation failed or produced nothing."""


class RateLimitError(CoachError):
    """The endpoint answered HTTP 429."""


@dataclass
class InsightResult:
    """Outcome of one insight request."""

    success: bool
    text: Optional[str] = None
    error: Optional[str] = None
    rate_limited: bool = False
    missing_key: bool = False


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def format_trade_line(trade: Mapping[str, Any]) -> str:
    return (
        f"- Result: {_text(trade.get('result'))}, Pair: {_text(trade.get('pair'))}, "
        f"Strategy: {_text(trade.get('strategy'))}, PnL: {_text(trade.get('pnl'))}, "
        f"Comment: \"{_text(trade.get('comment'))}\", Setup: \"{_text(trade.get('setup'))}\""
    )


def build_prompt(trades: Iterable[Mapping[str, Any]], max_trades: int = CoachConstants.MAX_TRADES) -> str:
    """Prompt covering the first ``max_trades`` trades in the given (newest-first) order."""
    recent: List[Mapping[str, Any]] = list(trades)[:max_trades]
    trade_logs = "\n".join(format_trade_line(trade) for trade in recent)
    return PROMPT_TEMPLATE.format(trade_logs=trade_logs)


class CoachClient:
    """Client for the Gemini text-generation endpoint."""

    def __init__(
        self,
        default_api_key: str = "",
        model: str = CoachConstants.DEFAULT_MODEL,
        max_trades: int = CoachConstants.MAX_TRADES,
        timeout: int = CoachConstants.REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.default_api_key = default_api_key
        self.model = model
        self.max_trades = max_trades
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return CoachConstants.ENDPOINT_TEMPLATE.format(model=self.model)

    def generate_insights(
        self, trades: Iterable[Mapping[str, Any]], api_key: Optional[str] = None
    ) -> InsightResult:
        """
        Ask the coach about the most recent trades.

        Args:
            trades: Trades newest first (the repository's cached order)
            api_key: Per-request key; falls back to the configured default

        Returns:
            InsightResult with the first candidate's text on success
        """
        key = api_key or self.default_api_key
        if not key:
            return InsightResult(success=False, error=CoachConstants.MISSING_KEY_MESSAGE, missing_key=True)

        prompt = build_prompt(trades, self.max_trades)
        try:
            text = self._request_insights(prompt, params={"key": key})
        except RateLimitError as e:
            logger.warning(f"AI coach rate limited: {e}")
            return InsightResult(success=False, error=str(e), rate_limited=True)
        except CoachError as e:
            logger.error(f"AI coach error: {e}")
            return InsightResult(success=False, error=str(e))

        logger.info(f"AI coach returned {len(text)} characters")
        return InsightResult(success=True, text=text)

    @log_errors_to_file()
    def _request_insights(self, prompt: str, params: dict) -> str:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            response = self.session.post(self.endpoint, params=params, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise CoachError(f"Request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        error = data.get("error") if isinstance(data.get("error"), dict) else None

        if response.status_code == CoachConstants.RATE_LIMIT_STATUS:
            message = (error or {}).get("message") or CoachConstants.RATE_LIMIT_DEFAULT_MESSAGE
            raise RateLimitError(f"{message} {CoachConstants.QUOTA_HINT}")

        if error:
            raise CoachError(error.get("message") or f"HTTP {response.status_code}")
        if response.status_code >= 400:
            raise CoachError(f"Text generation endpoint responded with HTTP {response.status_code}")

        text = _first_candidate_text(data)
        if not text:
            raise CoachError(CoachConstants.NO_INSIGHTS_MESSAGE)
        return text


def _first_candidate_text(data: Mapping[str, Any]) -> Optional[str]:
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
