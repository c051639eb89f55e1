"""The grouping core: partition digit runs and reassemble them.

Integer digits are grouped from the units digit outward (remainder at the
most-significant end). Fractional digits are grouped from the decimal mark
outward (remainder at the least-significant end).

INVARIANT: grouping never drops or reorders digits. ``ungroup`` inverts
``format_digits`` for the same config.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from digitgroup.domain.errors import InvalidConfig, InvalidInput
from digitgroup.domain.numerals import Numeral, parse_numeral

if TYPE_CHECKING:
    from digitgroup.config.models import GroupingConfig


def partition(
    digits: str,
    size: int,
    *,
    first_size: int | None = None,
    from_right: bool = False,
    compact: bool = False,
) -> list[str]:
    """Split *digits* into groups, most-significant group first.

    Groups are cut starting at one end: from the right for integer digits,
    from the left for fractional digits. The first group cut has
    *first_size* digits (default *size*), every later group *size* digits;
    whatever is left over becomes the remainder group at the far end.
    With *compact*, a remainder shorter than *size* joins its neighbour.
    """
    first_size = size if first_size is None else first_size
    if size < 1 or first_size < 1:
        msg = f"Group sizes must be positive, got {size} and {first_size}"
        raise InvalidConfig(msg)

    run = digits[::-1] if from_right else digits
    groups: list[str] = []
    start, step = 0, first_size
    while start < len(run):
        groups.append(run[start : start + step])
        start += step
        step = size

    if compact and len(groups) > 1 and len(groups[-1]) < size:
        remainder = groups.pop()
        groups[-1] += remainder

    if from_right:
        return [g[::-1] for g in reversed(groups)]
    return groups


def format_digits(text: str, config: GroupingConfig) -> str:
    """Group an ungrouped decimal numeral according to *config*.

    Raises:
        InvalidInput: *text* is not ``[sign] digit+ [separator digit*]``, or its
            separator is *config*'s delimiter (the text is already grouped).
        InvalidConfig: *config* carries a non-positive group size.

    >>> from digitgroup.config.models import GroupingConfig
    >>> format_digits("-1234567.891", GroupingConfig())
    '-1,234,567.891'
    """
    numeral = parse_numeral(text)
    if numeral.separator == config.delimiter:
        msg = f"Text is already grouped with {config.delimiter!r}: {text!r} (ungroup it first)"
        raise InvalidInput(msg)
    return group_numeral(numeral, config)


def group_numeral(numeral: Numeral, config: GroupingConfig) -> str:
    """Reassemble an already parsed numeral with *config*'s groups and marks.

    Used directly for text produced by ``render``, which is ungrouped by
    construction, so its ``.`` separator is never mistaken for a delimiter.
    """
    integer = config.delimiter.join(
        partition(
            numeral.integer,
            config.int_group_size,
            first_size=config.int_first_group_size,
            from_right=True,
            compact=config.compact_remainder,
        )
    )
    if not numeral.fraction:
        return numeral.sign + integer

    fraction = numeral.fraction
    if config.group_fraction:
        fraction = config.delimiter.join(
            partition(
                fraction,
                config.frac_group_size,
                compact=config.compact_remainder,
            )
        )
    return f"{numeral.sign}{integer}{config.decimal_mark}{fraction}"


def ungroup(text: str, config: GroupingConfig, separator: str = ".") -> str:
    """Strip *config*'s delimiters and restore *separator* as the decimal point.

    The result is validated as a numeral, so text that was not produced
    with *config* (wrong delimiter, stray characters) raises InvalidInput.
    Re-grouping under a new config is ``format_digits(ungroup(text, old), new)``,
    with a *separator* that is not the new config's delimiter.
    """
    if not isinstance(text, str):
        msg = f"Expected grouped text, got {type(text).__name__}"
        raise InvalidInput(msg)
    if len(separator) != 1 or separator.isdigit():
        msg = f"separator must be a single non-digit character, got {separator!r}"
        raise InvalidConfig(msg)

    plain = text.replace(config.delimiter, "").replace(config.decimal_mark, separator)
    return parse_numeral(plain).text
