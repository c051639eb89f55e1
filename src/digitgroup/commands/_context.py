"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Loads presets lazily and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from digitgroup.config.logging import configure_logging
from digitgroup.config.models import PresetsConfig
from digitgroup.domain.errors import GroupingError
from digitgroup.output.formatters import format_result
from digitgroup.output.result import FormatResult

logger = logging.getLogger(__name__)


class AppContext:
    """Global CLI options plus the lazily loaded preset table."""

    def __init__(
        self,
        *,
        json_output: bool = False,
        verbose: bool = False,
        log_json: bool = False,
        config_path: Path | None = None,
    ) -> None:
        self.json_output = json_output
        self.verbose = verbose
        self.config_path = config_path
        self._presets: PresetsConfig | None = None
        configure_logging(verbose=verbose, log_json=log_json)

    @property
    def presets(self) -> PresetsConfig:
        """Built-in presets merged with digitgroup.toml (loaded on first access)."""
        if self._presets is None:
            from digitgroup.config.presets import load_presets

            self._presets = load_presets(self.config_path)
        return self._presets

    def run(self, op: str, func: Callable[[], dict[str, Any]]) -> None:
        """Call *func*, wrap its payload or GroupingError in a FormatResult, emit it."""
        try:
            data = func()
        except GroupingError as exc:
            logger.debug("%s failed: %s", op, exc.code)
            result = FormatResult.failure(op, exc)
        else:
            logger.debug("%s succeeded", op)
            result = FormatResult.success(op, **data)
        self.emit(result)

    def emit(self, result: FormatResult) -> None:
        """Print a FormatResult: stdout on success, stderr and exit 1 on failure."""
        output = format_result(result, json_output=self.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
