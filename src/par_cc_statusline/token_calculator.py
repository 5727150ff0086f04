"""Context window token calculations."""

from __future__ import annotations

import math

from .models import MAX_TOKEN_COUNT, ContextWindow

# Standard context window for current Claude models (Opus 4.5, Sonnet 4, ...)
DEFAULT_CONTEXT_WINDOW = 200_000


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero.

    Python's round() uses banker's rounding, which would turn 2.5 into 2.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_token_count(value: float) -> int:
    """Round to a token count, saturating at zero and MAX_TOKEN_COUNT.

    NaN counts as zero, infinity as MAX_TOKEN_COUNT.
    """
    if math.isnan(value) or value <= 0:
        return 0
    if value >= MAX_TOKEN_COUNT:
        return MAX_TOKEN_COUNT
    return min(round_half_away(value), MAX_TOKEN_COUNT)


def compute_context_stats(
    context_window: ContextWindow,
    default_size: int = DEFAULT_CONTEXT_WINDOW,
) -> tuple[int, int, float]:
    """Compute kilotoken usage for the context window.

    The used percentage is authoritative; the used token count is derived from
    it. Rounding happens once at token granularity and once at kilotoken
    granularity. Out of range percentages are displayed as is while the token
    counts saturate.

    Args:
        context_window: Context window info from Claude Code
        default_size: Size to assume when none was reported

    Returns:
        Tuple of (used_k, max_k, percentage)
    """
    max_tokens = context_window.context_window_size if context_window.context_window_size > 0 else default_size
    pct = context_window.used_percentage

    used_tokens = round_token_count(max_tokens * (pct / 100.0))
    used_k = round_token_count(used_tokens / 1000.0)
    max_k = round_token_count(max_tokens / 1000.0)

    return used_k, max_k, pct


def format_token_usage(used_k: int, max_k: int, pct: float) -> str:
    """Format token usage as ``usedk/maxk (pct%)``."""
    return f"{used_k}k/{max_k}k ({pct:.0f}%)"
