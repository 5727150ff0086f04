"""Data models for the Claude Code status line payload."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from .enums import CostTier

logger = logging.getLogger(__name__)

# Token counts are unsigned 64-bit values
MAX_TOKEN_COUNT = 2**64 - 1


class _LenientModel(BaseModel):
    """Base model whose fields fall back to their default instead of failing validation."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="wrap")
    @classmethod
    def default_on_error(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.debug("Invalid value for %s.%s: %r", cls.__name__, info.field_name, value)
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class ModelInfo(_LenientModel):
    """Model identification sent by Claude Code."""

    id: str = ""
    display_name: str = ""

    @property
    def name(self) -> str:
        """Name to display: display name, then id, then a placeholder."""
        if self.display_name:
            return self.display_name
        if self.id:
            return self.id
        return "?"


class CostInfo(_LenientModel):
    """Accumulated session cost."""

    total_cost_usd: float = Field(default=0.0, allow_inf_nan=False)


class ContextWindow(_LenientModel):
    """Context window size and usage."""

    context_window_size: int = Field(default=0, ge=0, le=MAX_TOKEN_COUNT)
    used_percentage: float = Field(default=0.0, allow_inf_nan=False)


class SessionSnapshot(_LenientModel):
    """Decoded status line request. Every field is always populated."""

    model: ModelInfo = Field(default_factory=ModelInfo)
    cost: CostInfo = Field(default_factory=CostInfo)
    cwd: str = ""
    context_window: ContextWindow = Field(default_factory=ContextWindow)


def decode_snapshot(raw: bytes | str) -> SessionSnapshot:
    """Decode a status line request, never raising.

    Invalid fields are replaced by their defaults. If the document as a whole
    cannot be decoded (empty, truncated, not an object) the fully default
    snapshot is returned.

    Args:
        raw: JSON document read from stdin

    Returns:
        A complete SessionSnapshot
    """
    try:
        return SessionSnapshot.model_validate_json(raw)
    except ValidationError as e:
        logger.debug("Discarding undecodable status line input: %s", e)
        return SessionSnapshot()


@dataclass
class DerivedMetrics:
    """Display-ready values computed from a SessionSnapshot."""

    model_name: str
    cost_rounded_usd: int
    cost_tier: CostTier
    used_kilotokens: int
    max_kilotokens: int
    used_percentage: float
    dir_label: str
    short_path: str
    repo_label: str | None = None
    elapsed_micros: int = 0

    @property
    def location_label(self) -> str:
        """Repository label when inside a git checkout, directory name otherwise."""
        return self.repo_label or self.dir_label
