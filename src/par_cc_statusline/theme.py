"""Color theme for the status line."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

from .enums import CostTier


class ColorScheme(BaseModel):
    """Colors for each status line segment.

    Defaults are the Tokyo Night palette. Values are any color rich accepts.
    """

    model_config = ConfigDict(protected_namespaces=())

    model_name: str = Field(default="#7aa2f7", description="Model name")
    project_name: str = Field(default="#bb9af7", description="Repository or directory label")
    token_count: str = Field(default="#7dcfff", description="Context window usage")
    cost_low: str = Field(default="#9ece6a", description="Cost in the low tier")
    cost_medium: str = Field(default="#e0af68", description="Cost in the medium tier")
    cost_high: str = Field(default="#ff9e64", description="Cost in the high tier")
    text_dim: str = Field(default="#565f89", description="Elapsed time and working directory")

    @field_validator("*")
    @classmethod
    def validate_style(cls, value: str) -> str:
        try:
            Style.parse(value)
        except StyleSyntaxError as e:
            raise ValueError(str(e)) from e
        return value


def get_cost_color(colors: ColorScheme, tier: CostTier) -> str:
    """Get the color for a cost tier.

    Args:
        colors: Color scheme to pick from
        tier: Cost tier

    Returns:
        Color string
    """
    if tier == CostTier.LOW:
        return colors.cost_low
    if tier == CostTier.MEDIUM:
        return colors.cost_medium
    return colors.cost_high
