# Area: Advisory
"""
mind_reader._advisory.fallback — Static advisories
===================================================

Deterministic advisories used when the service cannot be reached,
plus the fixed greeting and duplicate-guess messages that never go
through the service at all.
"""

from ..types import AdvisoryResult, Hint

GREETING = AdvisoryResult(
    message="I'm thinking of a number between 1 and 100. Can you guess it?",
    emoji="🔮",
)

DUPLICATE = AdvisoryResult(
    message="You already guessed that number!",
    emoji="⚠️",
)

FALLBACKS = {
    Hint.UP: AdvisoryResult(message="Go higher!", emoji="💡"),
    Hint.DOWN: AdvisoryResult(message="Go lower!", emoji="💡"),
    Hint.CORRECT: AdvisoryResult(message="Correct! You read my mind!", emoji="🎉"),
}


def fallback_advisory(hint: Hint) -> AdvisoryResult:
    """Return the fixed advisory for a hint."""
    return FALLBACKS[hint]
