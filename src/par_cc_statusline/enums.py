"""Enums for PAR CC Statusline."""

from __future__ import annotations

from enum import Enum


class CostTier(str, Enum):
    """Severity tier of the session cost, used to pick the cost color."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
