"""Convenience entry points over the grouping core.

Each wrapper renders a number to a plain numeral (see
:func:`digitgroup.domain.numerals.render`) and hands it to
:func:`digitgroup.domain.grouping.group_numeral` with a fixed or
caller-supplied :class:`GroupingConfig`. ``group`` goes through
:func:`digitgroup.domain.grouping.format_digits` instead, for callers that
already hold a numeral, e.g. one formatted with ``f"{x:.8f}"``.
"""

from __future__ import annotations

from decimal import Decimal

from digitgroup.config.models import BUILTIN_PRESETS, GroupingConfig, PresetsConfig
from digitgroup.domain.grouping import format_digits, group_numeral
from digitgroup.domain.numerals import parse_numeral, render

Number = int | float | Decimal


def _format_value(value: Number, config: GroupingConfig, precision: int | None) -> str:
    return group_numeral(parse_numeral(render(value, precision)), config)


def format_commas(value: Number, *, precision: int | None = None) -> str:
    """Comma-group the integer part: ``-123456789.123456`` -> ``-123,456,789.123456``.

    The fractional digits are left ungrouped.
    """
    return _format_value(value, BUILTIN_PRESETS["commas"], precision)


def format_si(
    value: Number,
    delimiter: str = " ",
    *,
    decimal_mark: str = ".",
    precision: int | None = None,
) -> str:
    """Group both sides in threes, ISO 80000-1 style: ``123 456 789.123 456 7``."""
    config = GroupingConfig(decimal_mark=decimal_mark, delimiter=delimiter)
    return _format_value(value, config, precision)


def format_custom(
    value: Number,
    decimal_mark: str,
    delimiter: str,
    int_group_size: int,
    frac_group_size: int,
    compact_remainder: bool = False,
    *,
    group_fraction: bool = True,
    int_first_group_size: int | None = None,
    precision: int | None = None,
) -> str:
    """Render *value* and group it with fully custom parameters."""
    config = GroupingConfig(
        decimal_mark=decimal_mark,
        delimiter=delimiter,
        int_group_size=int_group_size,
        frac_group_size=frac_group_size,
        compact_remainder=compact_remainder,
        group_fraction=group_fraction,
        int_first_group_size=int_first_group_size,
    )
    return _format_value(value, config, precision)


def group(
    raw: str,
    decimal_mark: str,
    delimiter: str,
    int_group_size: int,
    frac_group_size: int,
    compact_remainder: bool = False,
    *,
    group_fraction: bool = True,
    int_first_group_size: int | None = None,
) -> str:
    """Group a pre-rendered numeral string.

    >>> group(f"{111222.3:.3f}", ".", ",", 3, 3)
    '111,222.300'
    """
    config = GroupingConfig(
        decimal_mark=decimal_mark,
        delimiter=delimiter,
        int_group_size=int_group_size,
        frac_group_size=frac_group_size,
        compact_remainder=compact_remainder,
        group_fraction=group_fraction,
        int_first_group_size=int_first_group_size,
    )
    return format_digits(raw, config)


def format_preset(
    value: Number | str,
    name: str,
    *,
    presets: PresetsConfig | None = None,
    precision: int | None = None,
) -> str:
    """Group *value* with a named preset (built-ins unless *presets* is given).

    A ``str`` value is taken as an already-rendered numeral; *precision*
    only applies to numbers.
    """
    config = (presets or PresetsConfig()).get(name)
    if isinstance(value, str):
        return format_digits(value, config)
    return _format_value(value, config, precision)
