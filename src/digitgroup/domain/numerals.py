"""Decimal numeral grammar and numeric-to-text rendering.

A numeral is ``[sign] digit+ [separator digit*]``: an optional ``+``/``-``,
a nonempty run of ASCII digits, then optionally one non-digit separator
followed by the fractional digits.

INVARIANT: parsing never alters digits. ``Numeral.text`` reproduces the input.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from digitgroup.domain.errors import InvalidConfig, InvalidInput

NUMERAL_PATTERN = re.compile(r"([+-]?)([0-9]+)(?:([^0-9])([0-9]*))?")


class Numeral(NamedTuple):
    """A parsed decimal numeral. ``separator`` is empty when absent."""

    sign: str
    integer: str
    separator: str
    fraction: str

    @property
    def text(self) -> str:
        return f"{self.sign}{self.integer}{self.separator}{self.fraction}"


def parse_numeral(text: str) -> Numeral:
    """Split *text* into sign, integer digits, separator, and fractional digits.

    Raises:
        InvalidInput: *text* is not a string or does not match the grammar
            (empty, grouped, multiple separators, stray characters).
    """
    if not isinstance(text, str):
        msg = f"Expected a numeral string, got {type(text).__name__}"
        raise InvalidInput(msg)
    match = NUMERAL_PATTERN.fullmatch(text)
    if match is None:
        msg = f"Not an ungrouped decimal numeral: {text!r}"
        raise InvalidInput(msg)
    sign, integer, separator, fraction = match.groups(default="")
    return Numeral(sign, integer, separator, fraction)


def parse_number(text: str) -> Decimal:
    """Read a number typed by a user (``"1234.5"``, ``"-1e6"``) as a Decimal."""
    try:
        return Decimal(text.strip())
    except (InvalidOperation, AttributeError) as exc:
        msg = f"Not a number: {text!r}"
        raise InvalidInput(msg) from exc


def render(value: int | float | Decimal, precision: int | None = None) -> str:
    """Render a number as a plain decimal numeral (never exponent notation).

    ``int`` uses ``str()``; ``float`` and ``Decimal`` go through ``Decimal``'s
    fixed-point formatting so ``1e16`` becomes ``10000000000000000``. With
    *precision*, Python's ``.{precision}f`` formatting does the rounding.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        msg = f"Cannot render {type(value).__name__} as a numeral"
        raise InvalidInput(msg)
    if precision is not None and (
        not isinstance(precision, int) or isinstance(precision, bool) or precision < 0
    ):
        msg = f"precision must be a non-negative integer, got {precision!r}"
        raise InvalidConfig(msg)

    if isinstance(value, float) and not math.isfinite(value):
        msg = f"Cannot render non-finite value {value!r}"
        raise InvalidInput(msg)
    if isinstance(value, Decimal) and not value.is_finite():
        msg = f"Cannot render non-finite value {value!r}"
        raise InvalidInput(msg)

    if precision is not None:
        # ints above float range would overflow ``.Nf`` formatting
        number = Decimal(value) if isinstance(value, int) else value
        return format(number, f".{precision}f")
    if isinstance(value, int):
        return str(value)
    # repr() keeps the shortest round-tripping digits of a float
    number = Decimal(repr(value)) if isinstance(value, float) else value
    return format(number, "f")
