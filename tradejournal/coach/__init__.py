"""Generative-text coaching over recent trades."""

from .insights import CoachClient, CoachError, InsightResult, RateLimitError, build_prompt

__all__ = [
    "CoachClient",
    "CoachError",
    "InsightResult",
    "RateLimitError",
    "build_prompt",
]
