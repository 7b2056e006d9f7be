"""Pattern detection over the trade history.

Groups decided trades (Win, Lose, BE) by hour of day, pair, strategy and
direction, computes win/loss counts, net P&L and win-rate per group, and
pools every group to pick out sweet spots (high win-rate) and danger zones
(low win-rate). Pure functions: no I/O, no state.
"""
import math
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from tradejournal.core.constants import PatternConstants, TradeResult


Bucket = Dict[str, Any]

DIMENSIONS: Tuple[str, ...] = (
    PatternConstants.DIMENSION_HOURLY,
    PatternConstants.DIMENSION_PAIRS,
    PatternConstants.DIMENSION_STRATEGIES,
    PatternConstants.DIMENSION_DIRECTIONS,
)


def coerce_pnl(value: Any) -> float:
    """
    Numeric value of a stored P&L, 0.0 when missing or not a number.

    P&L is stored as entered, so strings such as ``"120.5"`` are accepted
    and anything unparseable (``"n/a"``, NaN) counts as zero.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def hour_key(time_value: Any) -> Optional[str]:
    """``"HH:00"`` bucket for a time-of-day string, None when it has no usable hour."""
    if not time_value:
        return None
    try:
        hour = int(str(time_value).split(':')[0])
    except ValueError:
        return None
    return f"{hour:02d}:00"


def _non_empty(field: str) -> Callable[[Mapping[str, Any]], Optional[str]]:
    def key(trade: Mapping[str, Any]) -> Optional[str]:
        value = trade.get(field)
        return value if value else None
    return key


_KEY_FUNCS: Dict[str, Callable[[Mapping[str, Any]], Optional[str]]] = {
    PatternConstants.DIMENSION_HOURLY: lambda trade: hour_key(trade.get('time')),
    PatternConstants.DIMENSION_PAIRS: _non_empty('pair'),
    PatternConstants.DIMENSION_STRATEGIES: _non_empty('strategy'),
    PatternConstants.DIMENSION_DIRECTIONS: _non_empty('direction'),
}


def win_rate(wins: int, total: int) -> float:
    """Percentage of ``total`` that were wins, 0 for an empty bucket."""
    return wins / total * 100 if total > 0 else 0.0


def group_trades(trades: Iterable[Mapping[str, Any]]) -> Dict[str, List[Bucket]]:
    """
    Build per-dimension buckets from a trade sequence.

    Args:
        trades: Trade records (store rows) in any order

    Returns:
        Mapping of dimension name -> list of buckets in first-seen order.
        Each bucket has keys ``dimension``, ``key``, ``wins``, ``losses``,
        ``total``, ``pnl`` and ``win_rate``.

    Notes:
        - Pending (or any undecided) results are skipped for every dimension.
        - BE counts toward ``total`` only, so win-rate is wins / total.
        - A missing value excludes the trade from that dimension alone.
    """
    grouped: Dict[str, Dict[str, Bucket]] = {dimension: {} for dimension in DIMENSIONS}

    for trade in trades:
        result = trade.get('result')
        if result not in TradeResult.DECIDED:
            continue
        pnl = coerce_pnl(trade.get('pnl'))

        for dimension in DIMENSIONS:
            key = _KEY_FUNCS[dimension](trade)
            if key is None:
                continue
            bucket = grouped[dimension].setdefault(
                key,
                {'dimension': dimension, 'key': key, 'wins': 0, 'losses': 0, 'total': 0, 'pnl': 0.0},
            )
            bucket['total'] += 1
            if result == TradeResult.WIN:
                bucket['wins'] += 1
            elif result == TradeResult.LOSE:
                bucket['losses'] += 1
            bucket['pnl'] += pnl

    return {
        dimension: [
            {**bucket, 'win_rate': win_rate(bucket['wins'], bucket['total'])}
            for bucket in buckets.values()
        ]
        for dimension, buckets in grouped.items()
    }


def find_anomalies(buckets: Iterable[Bucket]) -> Tuple[List[Bucket], List[Bucket]]:
    """
    Split pooled buckets into sweet spots and danger zones.

    Only buckets with at least ``MIN_SAMPLE`` trades qualify. Sweet spots
    (win-rate >= 70) come highest first, danger zones (win-rate <= 40)
    lowest first; ties keep input order.
    """
    eligible = [b for b in buckets if b['total'] >= PatternConstants.MIN_SAMPLE]
    sweet_spots = sorted(
        (b for b in eligible if b['win_rate'] >= PatternConstants.SWEET_SPOT_WIN_RATE),
        key=lambda b: b['win_rate'],
        reverse=True,
    )
    danger_zones = sorted(
        (b for b in eligible if b['win_rate'] <= PatternConstants.DANGER_ZONE_WIN_RATE),
        key=lambda b: b['win_rate'],
    )
    return sweet_spots, danger_zones


def top_buckets(buckets: Iterable[Bucket], n: int = PatternConstants.TOP_N_BREAKDOWN) -> List[Bucket]:
    """Most-traded ``n`` buckets of one dimension, ties in input order."""
    return sorted(buckets, key=lambda b: b['total'], reverse=True)[:n]


def analyze_patterns(trades: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Full pattern report for the analysis view.

    Returns:
        Dictionary with:
            - total_trades: number of records analysed (all results)
            - buckets: dimension -> all buckets
            - sweet_spots / danger_zones: pooled rankings
            - breakdown: dimension -> top buckets by trade count
    """
    trades = list(trades)
    buckets = group_trades(trades)
    pooled = [bucket for dimension in DIMENSIONS for bucket in buckets[dimension]]
    sweet_spots, danger_zones = find_anomalies(pooled)

    return {
        'total_trades': len(trades),
        'buckets': buckets,
        'sweet_spots': sweet_spots,
        'danger_zones': danger_zones,
        'breakdown': {dimension: top_buckets(buckets[dimension]) for dimension in DIMENSIONS},
    }
