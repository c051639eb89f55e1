"""Command: list the available grouping presets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from digitgroup.commands._base import ExamplesCommand

if TYPE_CHECKING:
    from digitgroup.commands._context import AppContext


@click.command(
    "presets",
    cls=ExamplesCommand,
    examples="""\
  digitgroup presets
  digitgroup --json presets
  digitgroup -c ./digitgroup.toml presets""",
)
@click.pass_obj
def presets_cmd(app: AppContext) -> None:
    """List built-in presets and those defined in digitgroup.toml."""

    def _op() -> dict[str, Any]:
        presets = app.presets
        return {name: presets.get(name).model_dump() for name in presets.names}

    app.run("presets", _op)
