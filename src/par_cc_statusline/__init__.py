"""PAR CC Statusline - a fast status line renderer for Claude Code."""

from __future__ import annotations

__version__ = "0.1.0"
__application_title__ = "PAR CC Statusline"
__application_binary__ = "par-cc-statusline"

__all__: list[str] = [
    "__version__",
    "__application_title__",
    "__application_binary__",
]
