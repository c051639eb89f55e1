"""Error types raised by the grouping core and its wrappers.

Every error carries a stable ``code`` so adapters (the CLI, JSON output)
can report failures without parsing messages.
"""

from __future__ import annotations


class GroupingError(Exception):
    """Base class for all digitgroup failures."""

    code = "GROUPING_ERROR"


class InvalidInput(GroupingError):
    """The text is not an ungrouped decimal numeral, or a value cannot be rendered."""

    code = "INVALID_INPUT"


class InvalidConfig(GroupingError):
    """A grouping parameter, preset, or preset file is unusable."""

    code = "INVALID_CONFIG"
