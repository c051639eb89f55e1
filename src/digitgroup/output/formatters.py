"""Human/JSON rendering of FormatResult.

Human mode prints the grouped text alone so it can be piped; listings
print one ``key: value`` line per entry. JSON mode dumps the whole result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from digitgroup.output.result import FormatResult


def _format_data_human(data: dict[str, Any]) -> str:
    if "output" in data:
        return str(data["output"])
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, dict):
            pairs = ", ".join(f"{k}={v!r}" for k, v in value.items())
            lines.append(f"{key}: {pairs}")
        else:
            lines.append(f"{key}: {value}")
    return "\n".join(lines)


def format_result(result: FormatResult, *, json_output: bool = False) -> str:
    """Format a FormatResult for display.

    Args:
        result: The result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        return _format_data_human(result.data)
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op}: {error_msg}"
