# Area: Game Session
"""
mind_reader._state — Game session state machine
================================================

Owns the authoritative state of one playthrough: the secret target,
the guess history and the status. Validates guesses, derives hints
and decides win/loss before anything else (advisory calls included)
gets to see the outcome.

State transitions:
IDLE    -> PLAYING (on start)
PLAYING -> PLAYING (on a wrong guess with attempts left)
PLAYING -> WON     (on a guess equal to the target)
PLAYING -> LOST    (on the last wrong guess)
WON     -> PLAYING (on start)
LOST    -> PLAYING (on start)
"""

from __future__ import annotations
import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from ._config import MAX_GUESSES, RANGE_MAX
from .types import GameStatus, Hint

logger = logging.getLogger("mind_reader.session")


# Valid status transitions: {current_status: {next_status, ...}}
TRANSITIONS = {
    GameStatus.IDLE: {GameStatus.PLAYING},
    GameStatus.PLAYING: {GameStatus.PLAYING, GameStatus.WON, GameStatus.LOST},
    GameStatus.WON: {GameStatus.PLAYING},
    GameStatus.LOST: {GameStatus.PLAYING},
}


class GuessVerdict(Enum):
    """How submit_guess() disposed of a raw input."""
    ACCEPTED     = "accepted"
    INVALID      = "invalid"        # Not an integer
    OUT_OF_RANGE = "out_of_range"   # Integer outside [1, RANGE_MAX]
    NOT_PLAYING  = "not_playing"    # Session is IDLE, WON or LOST
    DUPLICATE    = "duplicate"      # Value already guessed this session
    BUSY         = "busy"           # Previous advisory still pending (controller only)


@dataclass(frozen=True)
class GuessRecord:
    """One accepted guess. created_at is only used for display ordering."""
    value: int
    hint: Hint
    created_at: int


@dataclass(frozen=True)
class GuessOutcome:
    """Result of submit_guess(), enough to drive the advisory call and the display."""
    verdict: GuessVerdict
    status: GameStatus
    value: Optional[int] = None
    hint: Optional[Hint] = None
    record: Optional[GuessRecord] = None

    @property
    def accepted(self) -> bool:
        return self.verdict is GuessVerdict.ACCEPTED


def parse_guess(raw_input: Any) -> Optional[int]:
    """
    Parse a raw guess token into an integer.

    Accepts ints, integral floats and strings holding an optionally
    signed decimal integer (surrounding whitespace ignored).

    Returns:
        The integer, or None if the input is not an integer
    """
    if isinstance(raw_input, bool):
        return None
    if isinstance(raw_input, int):
        return raw_input
    if isinstance(raw_input, float):
        return int(raw_input) if raw_input.is_integer() else None
    if isinstance(raw_input, str):
        text = raw_input.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not digits.isascii() or not digits.isdigit():
            return None
        sign = -1 if text.startswith("-") else 1
        significant = digits.lstrip("0") or "0"
        # More digits than RANGE_MAX is out of range; int() is capped on long strings
        if len(significant) > len(str(RANGE_MAX)):
            return sign * (RANGE_MAX + 1)
        return sign * int(significant)
    return None


def derive_hint(value: int, target: int) -> Hint:
    """UP when the target is higher than the guess, DOWN when lower."""
    if value == target:
        return Hint.CORRECT
    return Hint.UP if value < target else Hint.DOWN


@dataclass
class GameSession:
    """
    Full state of one playthrough.

    Attributes:
        target: The secret number, drawn on start()
        status: Current GameStatus
        history: Accepted guesses, newest last
        generation: Incremented on every start(); identifies the playthrough
    """
    rng: random.Random = field(default_factory=random.Random, repr=False)
    target: int = 0
    status: GameStatus = GameStatus.IDLE
    history: List[GuessRecord] = field(default_factory=list)
    generation: int = 0
    max_guesses: int = field(default=MAX_GUESSES, init=False)
    _last_stamp: int = field(default=0, init=False, repr=False)

    # ── Queries ──────────────────────────────────────────────

    @property
    def guessed_values(self) -> List[int]:
        return [record.value for record in self.history]

    def has_guessed(self, value: int) -> bool:
        return any(record.value == value for record in self.history)

    @property
    def is_over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.LOST)

    def newest_first(self) -> Tuple[GuessRecord, ...]:
        return tuple(reversed(self.history))

    # ── Commands ─────────────────────────────────────────────

    def start(self) -> None:
        """Draw a new target, clear the history and start accepting guesses."""
        self.target = self.rng.randint(1, RANGE_MAX)
        self.history = []
        self.generation += 1
        self.advance_status(GameStatus.PLAYING)
        logger.info(f"[game {self.generation}] New target drawn")

    def submit_guess(self, raw_input: Any) -> GuessOutcome:
        """
        Validate a raw guess, record it and decide termination.

        Checks run in order: integer, range, status, duplicate. Any
        failed check returns a rejection verdict and leaves the session
        untouched.
        """
        value = parse_guess(raw_input)
        if value is None:
            logger.debug(f"Rejected non-integer guess {raw_input!r}")
            return GuessOutcome(GuessVerdict.INVALID, self.status)

        if not 1 <= value <= RANGE_MAX:
            logger.debug(f"Rejected out-of-range guess {value}")
            return GuessOutcome(GuessVerdict.OUT_OF_RANGE, self.status, value=value)

        if self.status is not GameStatus.PLAYING:
            logger.debug(f"Ignored guess {value} while {self.status.value}")
            return GuessOutcome(GuessVerdict.NOT_PLAYING, self.status, value=value)

        if self.has_guessed(value):
            logger.info(f"[game {self.generation}] Duplicate guess {value}")
            return GuessOutcome(GuessVerdict.DUPLICATE, self.status, value=value)

        hint = derive_hint(value, self.target)
        record = GuessRecord(value=value, hint=hint, created_at=self._next_stamp())
        self.history.append(record)
        logger.info(
            f"[game {self.generation}] Guess {len(self.history)}/{self.max_guesses}: "
            f"{value} → {hint.value}"
        )

        # Correctness is checked before exhaustion: a correct last guess wins
        if hint is Hint.CORRECT:
            self.advance_status(GameStatus.WON)
        elif len(self.history) >= self.max_guesses:
            self.advance_status(GameStatus.LOST)

        return GuessOutcome(
            GuessVerdict.ACCEPTED, self.status, value=value, hint=hint, record=record,
        )

    def advance_status(self, new_status: GameStatus) -> None:
        """
        Move to a new status.

        Raises:
            ValueError: If the transition is not allowed from the current status
        """
        if new_status not in TRANSITIONS[self.status]:
            raise ValueError(
                f"Invalid status transition: {self.status.value} → {new_status.value}"
            )
        if new_status is not self.status:
            logger.info(f"[game {self.generation}] Status: {self.status.value} → {new_status.value}")
        self.status = new_status

    def _next_stamp(self) -> int:
        # Strictly increasing even when the clock does not advance between guesses
        stamp = max(time.monotonic_ns(), self._last_stamp + 1)
        self._last_stamp = stamp
        return stamp
