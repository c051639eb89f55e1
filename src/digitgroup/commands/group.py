"""Commands that group a single numeral: group, commas, si, preset."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from digitgroup.commands._base import ExamplesCommand

if TYPE_CHECKING:
    from digitgroup.commands._context import AppContext

_precision_option = click.option(
    "-p",
    "--precision",
    type=click.IntRange(min=0),
    default=None,
    help="Digits after the decimal point (rounds the value first).",
)


@click.command(
    "group",
    cls=ExamplesCommand,
    examples="""\
  digitgroup group 12345678
  digitgroup group -- -1234567.891
  digitgroup group 1234567.89 --int-size 2 --first-size 3 --no-group-fraction
  digitgroup group 3.14159265 --delimiter ' ' --frac-size 2""",
)
@click.argument("raw")
@click.option("--decimal-mark", default=".", show_default=True, help="Output decimal mark.")
@click.option("--delimiter", default=",", show_default=True, help="Group delimiter.")
@click.option("--int-size", type=int, default=3, show_default=True, help="Integer group size.")
@click.option("--frac-size", type=int, default=3, show_default=True, help="Fraction group size.")
@click.option(
    "--first-size", type=int, default=None, help="Size of the integer group next to the mark."
)
@click.option("--compact/--no-compact", default=False, help="Merge a short remainder group.")
@click.option(
    "--group-fraction/--no-group-fraction",
    default=True,
    show_default=True,
    help="Group the fractional digits.",
)
@click.pass_obj
def group_cmd(
    app: AppContext,
    raw: str,
    decimal_mark: str,
    delimiter: str,
    int_size: int,
    frac_size: int,
    first_size: int | None,
    compact: bool,
    group_fraction: bool,
) -> None:
    """Group RAW, an already-rendered numeral such as 1234567.891."""
    from digitgroup.api import group

    def _op() -> dict[str, Any]:
        output = group(
            raw,
            decimal_mark,
            delimiter,
            int_size,
            frac_size,
            compact,
            group_fraction=group_fraction,
            int_first_group_size=first_size,
        )
        return {"input": raw, "output": output}

    app.run("group", _op)


@click.command(
    "commas",
    cls=ExamplesCommand,
    examples="""\
  digitgroup commas 123456789
  digitgroup commas 1234.5 --precision 2""",
)
@click.argument("value")
@_precision_option
@click.pass_obj
def commas_cmd(app: AppContext, value: str, precision: int | None) -> None:
    """Comma-group VALUE's integer part."""
    from digitgroup.api import format_commas
    from digitgroup.domain.numerals import parse_number

    def _op() -> dict[str, Any]:
        output = format_commas(parse_number(value), precision=precision)
        return {"input": value, "output": output}

    app.run("commas", _op)


@click.command(
    "si",
    cls=ExamplesCommand,
    examples="""\
  digitgroup si 123456789.01234
  digitgroup si 1234567.5 --decimal-mark ,
  digitgroup si 299792458 --delimiter _""",
)
@click.argument("value")
@click.option("--delimiter", default=" ", show_default=True, help="Group delimiter.")
@click.option("--decimal-mark", default=".", show_default=True, help="Output decimal mark.")
@_precision_option
@click.pass_obj
def si_cmd(
    app: AppContext,
    value: str,
    delimiter: str,
    decimal_mark: str,
    precision: int | None,
) -> None:
    """Group VALUE in threes on both sides of the decimal mark."""
    from digitgroup.api import format_si
    from digitgroup.domain.numerals import parse_number

    def _op() -> dict[str, Any]:
        output = format_si(
            parse_number(value),
            delimiter,
            decimal_mark=decimal_mark,
            precision=precision,
        )
        return {"input": value, "output": output}

    app.run("si", _op)


@click.command(
    "preset",
    cls=ExamplesCommand,
    examples="""\
  digitgroup preset india 1234567.89
  digitgroup preset europe 1234.5 --precision 2
  digitgroup -c ./digitgroup.toml preset swiss 1234567""",
)
@click.argument("name")
@click.argument("value")
@_precision_option
@click.pass_obj
def preset_cmd(app: AppContext, name: str, value: str, precision: int | None) -> None:
    """Group VALUE with the preset NAME (see `digitgroup presets`)."""
    from digitgroup.api import format_preset
    from digitgroup.domain.numerals import parse_number

    def _op() -> dict[str, Any]:
        output = format_preset(
            parse_number(value),
            name,
            presets=app.presets,
            precision=precision,
        )
        return {"preset": name, "input": value, "output": output}

    app.run("preset", _op)
