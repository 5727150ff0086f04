"""Session cost rounding and classification."""

from __future__ import annotations

from .enums import CostTier
from .token_calculator import round_half_away


def round_cost(total_cost_usd: float) -> int:
    """Round a dollar amount to whole dollars."""
    return round_half_away(total_cost_usd)


def classify_cost(cost: int, low_max: int = 5, medium_max: int = 20) -> CostTier:
    """Classify a rounded cost into a display tier.

    Args:
        cost: Rounded cost in USD
        low_max: Highest cost still considered cheap
        medium_max: Highest cost still considered moderate

    Returns:
        Cost tier
    """
    if 0 <= cost <= low_max:
        return CostTier.LOW
    if low_max < cost <= medium_max:
        return CostTier.MEDIUM
    return CostTier.HIGH


def format_cost(cost: int) -> str:
    """Format a rounded cost for display."""
    return f"${cost}"
