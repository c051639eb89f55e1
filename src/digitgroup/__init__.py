"""digitgroup: digit grouping (thousands separators) for decimal numerals."""

from __future__ import annotations

from digitgroup.api import format_commas, format_custom, format_preset, format_si, group
from digitgroup.config.models import GroupingConfig
from digitgroup.domain.errors import GroupingError, InvalidConfig, InvalidInput
from digitgroup.domain.grouping import format_digits, ungroup

__version__ = "0.1.0"

__all__ = [
    "GroupingConfig",
    "GroupingError",
    "InvalidConfig",
    "InvalidInput",
    "__version__",
    "format_commas",
    "format_custom",
    "format_digits",
    "format_preset",
    "format_si",
    "group",
    "ungroup",
]
