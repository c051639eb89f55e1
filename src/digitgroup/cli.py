"""Root CLI group for digitgroup with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from digitgroup import __version__
from digitgroup.commands import register_commands
from digitgroup.commands._context import AppContext


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digitgroup")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Preset file (default: digitgroup.toml found by walking up from the cwd).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: Path | None,
) -> None:
    """digitgroup: insert thousands separators into decimal numerals."""
    ctx.obj = AppContext(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        config_path=config_path,
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
