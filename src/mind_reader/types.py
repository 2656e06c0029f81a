"""
mind_reader.types — Shared enums and advisory payload types
============================================================

Defines the hint and status enums used across the package, the
context dict handed to the advisory service, and the validated
``AdvisoryResult`` shape the service must return.

All types are exported from the main package:

    from mind_reader import Hint, GameStatus, AdvisoryResult

Use __annotations__ to inspect fields:

    >>> AdvisoryContext.__annotations__
    {'guess': int, 'target': int, 'hint': str, 'history': List[int]}
"""

from enum import Enum
from typing import List, TypedDict

from pydantic import BaseModel, ConfigDict, Field


class GameStatus(Enum):
    """Lifecycle status of a game session."""
    IDLE    = "IDLE"       # Before the first start()
    PLAYING = "PLAYING"    # Accepting guesses
    WON     = "WON"        # Latest guess matched the target
    LOST    = "LOST"       # Guesses exhausted without a match


class Hint(Enum):
    """Direction the player has to move after a guess."""
    UP      = "UP"         # Target is greater than the guess
    DOWN    = "DOWN"       # Target is lower than the guess
    CORRECT = "CORRECT"


# ============================================
# fetch_advisory() Input/Output
# ============================================

class AdvisoryContext(TypedDict):
    """Context sent to the advisory service for one guess.

    Fields
    ------
    guess : int
        The value just submitted.
    target : int
        The secret number.
    hint : str
        ``Hint.value`` computed for the guess.
    history : List[int]
        Every guessed value so far, chronological.
    """
    guess: int
    target: int
    hint: str
    history: List[int]


class AdvisoryResult(BaseModel):
    """Flavor message and emoji shown next to a guess outcome.

    Fields
    ------
    message : str
        Non-empty display string, e.g. "So close, aim a little higher!"
    emoji : str
        Short display string, expected to be a single glyph.
    """
    model_config = ConfigDict(strict=True, frozen=True, str_strip_whitespace=True)

    message: str = Field(min_length=1, description="A short, witty game-master comment")
    emoji: str = Field(min_length=1, description="A relevant emoji")
