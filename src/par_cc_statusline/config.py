"""Configuration management for par_cc_statusline."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .models import MAX_TOKEN_COUNT
from .theme import ColorScheme
from .token_calculator import DEFAULT_CONTEXT_WINDOW
from .xdg_dirs import get_config_file_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "PAR_CC_STATUSLINE_"

# Environment variable suffix -> config field
ENV_FIELDS = {
    "DEFAULT_CONTEXT_WINDOW": "default_context_window",
    "COLOR_ENABLED": "color_enabled",
    "GIT_ENABLED": "git_enabled",
    "HOME_DIR": "home_dir",
    "COST_LOW_MAX": "cost_low_max",
    "COST_MEDIUM_MAX": "cost_medium_max",
}


def _default_home_dir() -> str | None:
    return os.environ.get("HOME") or None


class Config(BaseModel):
    """Main configuration model."""

    default_context_window: int = Field(
        default=DEFAULT_CONTEXT_WINDOW,
        gt=0,
        le=MAX_TOKEN_COUNT,
        description="Context window size assumed when Claude Code does not report one",
    )
    color_enabled: bool = Field(
        default=True,
        description="Emit truecolor escape sequences even when stdout is not a terminal",
    )
    git_enabled: bool = Field(default=True, description="Show repository and branch from .git")
    home_dir: str | None = Field(
        default_factory=_default_home_dir,
        description="Home directory replaced by ~ in the path line",
    )
    cost_low_max: int = Field(default=5, description="Highest rounded cost shown in the low cost color")
    cost_medium_max: int = Field(default=20, description="Highest rounded cost shown in the medium cost color")
    colors: ColorScheme = Field(default_factory=ColorScheme)


def _load_env_overrides() -> dict[str, Any]:
    """Collect configuration values from PAR_CC_STATUSLINE_* environment variables."""
    overrides: dict[str, Any] = {}
    for suffix, field_name in ENV_FIELDS.items():
        value = os.environ.get(f"{ENV_PREFIX}{suffix}")
        if value is not None:
            overrides[field_name] = value
    return overrides


def _load_yaml_file(config_file: Path) -> dict[str, Any]:
    """Load a YAML config file, returning an empty mapping if it is missing or unusable."""
    try:
        if not config_file.exists():
            return {}
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning("Could not read config file %s: %s", config_file, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a mapping", config_file)
        return {}
    return data


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from file and environment variables.

    Environment variables override values from the file. Any invalid value
    results in the default configuration rather than an error, since the
    status line must always render.

    Args:
        config_file: Path to config file (defaults to the XDG config location)

    Returns:
        Loaded configuration
    """
    if config_file is None:
        config_file = get_config_file_path()

    config_data = _load_yaml_file(config_file)
    config_data.update(_load_env_overrides())

    try:
        return Config.model_validate(config_data)
    except ValidationError as e:
        logger.warning("Invalid configuration, using defaults: %s", e)
        return Config()
