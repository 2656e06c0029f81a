# Area: Advisory
"""
mind_reader._advisory.prompts — Prompt and structured-output schema
====================================================================

Builds the natural-language prompt for one guess and the tool
definition that forces the model to answer with an object holding
``message`` and ``emoji`` strings.
"""

from __future__ import annotations
from typing import Any, Dict

from ..types import AdvisoryContext

ADVISORY_TOOL_NAME = "report_advisory"

ADVISORY_TOOL: Dict[str, Any] = {
    "name": ADVISORY_TOOL_NAME,
    "description": "Report the game master's comment on the player's latest guess.",
    "input_schema": {
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "A very short, witty and encouraging comment",
            },
            "emoji": {
                "type": "string",
                "description": "A single emoji matching the comment",
            },
        },
        "required": ["message", "emoji"],
    },
}

PROMPT_TEMPLATE = (
    "You are the game master of a number guessing game (1 to 100). "
    "The user guessed {guess}. The target number is {target}. "
    "The hint is {hint}. Previous guesses: [{history}]. "
    "Provide a very short, witty, and encouraging comment. "
    "Never reveal the target number unless the hint is CORRECT. "
    "Answer by calling the {tool} tool."
)


def build_prompt(ctx: AdvisoryContext) -> str:
    """Render the prompt for one advisory request."""
    return PROMPT_TEMPLATE.format(
        guess=ctx["guess"],
        target=ctx["target"],
        hint=ctx["hint"],
        history=", ".join(str(value) for value in ctx["history"]),
        tool=ADVISORY_TOOL_NAME,
    )
