# Area: Advisory
"""
Advisory client and static advisories.

This package contains:
- AdvisoryClient, the best-effort wrapper around the generation service
- The fixed greeting, duplicate and per-hint fallback advisories
- The prompt and structured-output tool definition
"""

from .client import AdvisoryClient, extract_tool_input
from .fallback import DUPLICATE, FALLBACKS, GREETING, fallback_advisory
from .prompts import ADVISORY_TOOL, ADVISORY_TOOL_NAME, build_prompt

__all__ = [
    "AdvisoryClient",
    "extract_tool_input",
    "DUPLICATE",
    "FALLBACKS",
    "GREETING",
    "fallback_advisory",
    "ADVISORY_TOOL",
    "ADVISORY_TOOL_NAME",
    "build_prompt",
]
