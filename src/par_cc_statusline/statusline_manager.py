"""Status line generation for Claude Code integration."""

from __future__ import annotations

import io
import logging
import time

from rich.color import ColorSystem
from rich.console import Console
from rich.text import Text

from .config import Config
from .git_info import RepoLabelResolver, repo_label
from .models import DerivedMetrics, SessionSnapshot, decode_snapshot
from .pricing import classify_cost, format_cost, round_cost
from .theme import get_cost_color
from .token_calculator import compute_context_stats, format_token_usage
from .utils import dir_basename, shorten_path

logger = logging.getLogger(__name__)


class StatusLineManager:
    """Turns a Claude Code status line request into the two status lines."""

    def __init__(self, config: Config, repo_resolver: RepoLabelResolver | None = None):
        """Initialize the status line manager.

        Args:
            config: Application configuration
            repo_resolver: Callable returning the ``repo:branch`` label for a
                directory. Defaults to reading ``.git`` on disk.
        """
        self.config = config
        self.repo_resolver = repo_resolver if repo_resolver is not None else repo_label
        # Only used to resolve styles; output is never written through it
        self._console = Console(file=io.StringIO(), highlight=False, markup=False, emoji=False)

    def _get_repo_label(self, cwd: str) -> str | None:
        """Get the repository label, or None if git lookups are disabled or fail."""
        if not self.config.git_enabled:
            return None
        return self.repo_resolver(cwd)

    def derive_metrics(self, snapshot: SessionSnapshot, started_ns: int | None = None) -> DerivedMetrics:
        """Compute display values from a decoded request.

        Args:
            snapshot: Decoded request
            started_ns: ``time.perf_counter_ns()`` value when processing began

        Returns:
            Derived metrics, with elapsed time measured up to now
        """
        if started_ns is None:
            started_ns = time.perf_counter_ns()

        used_k, max_k, pct = compute_context_stats(snapshot.context_window, self.config.default_context_window)
        cost = round_cost(snapshot.cost.total_cost_usd)
        tier = classify_cost(cost, self.config.cost_low_max, self.config.cost_medium_max)

        metrics = DerivedMetrics(
            model_name=snapshot.model.name,
            cost_rounded_usd=cost,
            cost_tier=tier,
            used_kilotokens=used_k,
            max_kilotokens=max_k,
            used_percentage=pct,
            dir_label=dir_basename(snapshot.cwd),
            short_path=shorten_path(snapshot.cwd, self.config.home_dir),
            repo_label=self._get_repo_label(snapshot.cwd),
        )
        metrics.elapsed_micros = (time.perf_counter_ns() - started_ns) // 1000
        return metrics

    def format_status_line(self, metrics: DerivedMetrics) -> Text:
        """Format the main status line.

        ``[model] $cost - [repo:branch] - usedk/maxk (pct%) - elapsedus``
        """
        colors = self.config.colors
        return Text.assemble(
            "[",
            (metrics.model_name, colors.model_name),
            "] ",
            (format_cost(metrics.cost_rounded_usd), get_cost_color(colors, metrics.cost_tier)),
            " - [",
            (metrics.location_label, colors.project_name),
            "] - ",
            (
                format_token_usage(metrics.used_kilotokens, metrics.max_kilotokens, metrics.used_percentage),
                colors.token_count,
            ),
            " - ",
            (f"{metrics.elapsed_micros}us", colors.text_dim),
        )

    def format_path_line(self, metrics: DerivedMetrics) -> Text:
        """Format the working directory line, dimmed."""
        return Text(metrics.short_path, style=self.config.colors.text_dim)

    def _to_ansi(self, text: Text) -> str:
        """Render rich text to a truecolor ANSI string.

        Colors are forced on because Claude Code reads the status line through
        a pipe. Segments are styled one by one so the text itself is emitted
        unchanged (no tab expansion or wrapping).
        """
        return "".join(
            segment.style.render(segment.text, color_system=ColorSystem.TRUECOLOR) if segment.style else segment.text
            for segment in text.render(self._console)
        )

    def render(self, metrics: DerivedMetrics) -> str:
        """Render both status lines.

        Args:
            metrics: Derived metrics

        Returns:
            The two lines joined by a newline, without a trailing newline
        """
        lines = [self.format_status_line(metrics), self.format_path_line(metrics)]
        if self.config.color_enabled:
            return "\n".join(self._to_ansi(line) for line in lines)
        return "\n".join(line.plain for line in lines)

    def get_status_line_for_request(self, raw: bytes | str, started_ns: int | None = None) -> str:
        """Get the status lines for a Claude Code request.

        Args:
            raw: JSON document sent by Claude Code
            started_ns: ``time.perf_counter_ns()`` value when processing began

        Returns:
            The rendered status lines
        """
        snapshot = decode_snapshot(raw)
        logger.debug("Decoded status line request: %s", snapshot)
        return self.render(self.derive_metrics(snapshot, started_ns))
