"""XDG Base Directory Specification utilities for par_cc_statusline."""

from __future__ import annotations

from pathlib import Path

from xdg_base_dirs import xdg_cache_home, xdg_config_home

APP_NAME = "par_cc_statusline"


def get_config_dir() -> Path:
    """Get XDG config directory for par_cc_statusline.

    Returns:
        Path to config directory (~/.config/par_cc_statusline by default)
    """
    return xdg_config_home() / APP_NAME


def get_cache_dir() -> Path:
    """Get XDG cache directory for par_cc_statusline.

    Returns:
        Path to cache directory (~/.cache/par_cc_statusline by default)
    """
    return xdg_cache_home() / APP_NAME


def get_config_file_path() -> Path:
    """Get the path to the main configuration file."""
    return get_config_dir() / "config.yaml"


def get_log_file_path() -> Path:
    """Get the path to the debug log file."""
    return get_cache_dir() / "statusline.log"
