# Area: Shared
"""Error formatting for structured advisory error logs."""

from __future__ import annotations
import json
from typing import Any, Dict, List, Optional


def format_error_block(
    error_type: str,
    context: Dict[str, Any],
    timeout_seconds: Optional[float] = None,
    output_payload: Optional[Dict[str, Any]] = None,
    validation_errors: Optional[List[str]] = None,
    cause: Optional[str] = None,
) -> str:
    """Format a structured error block for an advisory fallback."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " ADVISORY ERROR — FALLBACK USED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
    ]

    if timeout_seconds is not None:
        lines.append(f" Timeout:      {timeout_seconds} seconds")
    if cause:
        lines.append(f" Cause:        {cause}")

    lines.append("")
    lines.append(" ── REQUEST CONTEXT " + "─" * 44)
    lines.append(indent_json(context))

    if output_payload is not None:
        lines.append("")
        lines.append(" ── RESPONSE PAYLOAD " + "─" * 43)
        lines.append(indent_json(output_payload))

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str, ensure_ascii=False)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
