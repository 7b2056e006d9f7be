#!/usr/bin/env python3
"""
Unified CLI Runner for the Trade Journal
Main entry point for all operations.

Usage:
    python -m tradejournal.run api [--host HOST] [--port PORT] [--reload]
    python -m tradejournal.run summary [--config CONFIG]
    python -m tradejournal.run patterns [--config CONFIG]
    python -m tradejournal.run coach [--config CONFIG] [--api-key KEY]
"""

import argparse
import json
import sys

from tradejournal.core.config import get_param, load_config
from tradejournal.core.logger import get_logger, setup_logger

logger = get_logger(__name__)


def _load_repository(args):
    """Build the store from config and fetch all trades."""
    from tradejournal.api.dependencies import build_store
    from tradejournal.journal.repository import TradeRepository

    config = load_config(args.config)
    setup_logger(config)
    repository = TradeRepository(build_store(config))
    repository.fetch()
    if repository.error:
        raise RuntimeError(f"Could not fetch trades: {repository.error}")
    return config, repository


def run_api(args):
    """Start FastAPI server."""
    import uvicorn

    config = load_config(args.config)
    setup_logger(config)
    uvicorn.run(
        "tradejournal.api.main:app",
        host=args.host or get_param(config, "api", "host", default="127.0.0.1"),
        port=args.port or get_param(config, "api", "port", default=8084),
        reload=args.reload,
        log_level="info"
    )


def run_summary(args):
    """Print dashboard statistics."""
    from tradejournal.analysis.summary import summarize_trades

    _, repository = _load_repository(args)
    summary = summarize_trades(repository.trades)
    summary.pop("recent_trades")
    print(json.dumps(summary, indent=2))


def run_patterns(args):
    """Print sweet spots, danger zones and per-dimension breakdown."""
    from tradejournal.analysis.patterns import analyze_patterns

    _, repository = _load_repository(args)
    report = analyze_patterns(repository.trades)

    print(f"Analysed {report['total_trades']} trades")
    for title, items in (("Sweet spots", report["sweet_spots"]), ("Danger zones", report["danger_zones"])):
        print(f"\n{title}:")
        if not items:
            print("  (none)")
        for item in items:
            print(f"  {item['key']:<20} {item['win_rate']:5.0f}% WR  {item['wins']}W / {item['losses']}L")

    for dimension, items in report["breakdown"].items():
        print(f"\n{dimension}:")
        for item in items:
            print(f"  {item['key']:<20} {item['win_rate']:5.0f}%  ({item['total']} trades)")


def run_coach(args):
    """Ask the AI coach about the most recent trades."""
    from tradejournal.api.dependencies import build_coach

    config, repository = _load_repository(args)
    coach = build_coach(config)
    result = coach.generate_insights(repository.trades, api_key=args.api_key)
    if not result.success:
        raise RuntimeError(f"AI Coach Error: {result.error}")
    print(result.text)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Unified CLI Runner for the Trade Journal",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    api_parser = subparsers.add_parser("api", help="Start FastAPI server")
    api_parser.add_argument("--config", type=str, default=None, help="Config file path")
    api_parser.add_argument("--host", type=str, default=None, help="Host to bind to")
    api_parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    api_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    summary_parser = subparsers.add_parser("summary", help="Print dashboard statistics")
    summary_parser.add_argument("--config", type=str, default=None, help="Config file path")

    patterns_parser = subparsers.add_parser("patterns", help="Print pattern analysis")
    patterns_parser.add_argument("--config", type=str, default=None, help="Config file path")

    coach_parser = subparsers.add_parser("coach", help="Ask the AI coach for insights")
    coach_parser.add_argument("--config", type=str, default=None, help="Config file path")
    coach_parser.add_argument("--api-key", type=str, default=None, help="Text-generation API key")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "api": run_api,
        "summary": run_summary,
        "patterns": run_patterns,
        "coach": run_coach,
    }

    try:
        commands[args.command](args)
    except KeyboardInterrupt:
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error running {args.command}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
