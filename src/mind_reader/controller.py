# Area: Controller
"""
mind_reader.controller — Presentation boundary
===============================================

The GameController is what front ends instantiate. It exposes the
read-only view of the game and the two commands, ``start()`` and
``submit_guess()``.

Game rules run synchronously on the caller's thread. After an accepted
guess the advisory fetch runs on a single background worker; while it
is pending, ``loading`` is set and further guesses are turned away
with ``GuessVerdict.BUSY``. Each fetch is tagged with the session
generation at dispatch time, and a result arriving after ``start()``
began a new game is dropped.
"""

from __future__ import annotations
import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Optional, Tuple

from ._advisory import DUPLICATE, GREETING, AdvisoryClient, fallback_advisory
from ._state import GameSession, GuessOutcome, GuessRecord, GuessVerdict
from .types import AdvisoryResult, GameStatus, Hint

logger = logging.getLogger("mind_reader.controller")


class GameController:
    """
    Single-player number guessing game with advisory comments.

    Usage
    -----
        from mind_reader import GameController, AdvisoryClient, load_config

        game = GameController(AdvisoryClient(load_config()))
        game.start()
        outcome = game.submit_guess("42")
        game.wait()
        print(outcome.hint, game.advisory.message)
        game.close()
    """

    def __init__(
        self,
        advisory_client: Optional[AdvisoryClient] = None,
        session: Optional[GameSession] = None,
        executor: Optional[Executor] = None,
    ):
        self.advisory_client = advisory_client or AdvisoryClient()
        self.session = session or GameSession()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="mind-reader-advisory",
        )
        self._lock = threading.Lock()
        self._loading = False
        self._advisory: Optional[AdvisoryResult] = None
        self._pending: Optional[Future] = None

    # ── Read-only view ───────────────────────────────────────

    @property
    def status(self) -> GameStatus:
        return self.session.status

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self.session.history)

    @property
    def history_newest_first(self) -> Tuple[GuessRecord, ...]:
        return self.session.newest_first()

    @property
    def target(self) -> Optional[int]:
        """The secret number, revealed only once the game is over."""
        return self.session.target if self.session.is_over else None

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def advisory(self) -> Optional[AdvisoryResult]:
        return self._advisory

    @property
    def max_guesses(self) -> int:
        return self.session.max_guesses

    @property
    def guess_count(self) -> int:
        return len(self.session.history)

    @property
    def guesses_remaining(self) -> int:
        return self.max_guesses - self.guess_count

    @property
    def pending(self) -> Optional[Future]:
        """The most recently dispatched advisory job, finished or not."""
        return self._pending

    # ── Commands ─────────────────────────────────────────────

    def start(self) -> None:
        """Start a new game. Any advisory still in flight is discarded on arrival."""
        with self._lock:
            self.session.start()
            self._loading = False
            self._advisory = GREETING

    def submit_guess(self, raw_input: Any) -> GuessOutcome:
        """
        Submit one guess.

        Returns the session's outcome. Accepted guesses dispatch an
        advisory fetch; duplicates show the duplicate advisory; other
        rejections leave everything as it was.
        """
        with self._lock:
            if self._loading:
                logger.debug(f"Guess {raw_input!r} refused: advisory pending")
                return GuessOutcome(GuessVerdict.BUSY, self.session.status)

            outcome = self.session.submit_guess(raw_input)

            if outcome.verdict is GuessVerdict.DUPLICATE:
                self._advisory = DUPLICATE
                return outcome
            if not outcome.accepted:
                return outcome

            self._loading = True
            generation = self.session.generation
            history_values = self.session.guessed_values
            target = self.session.target

        try:
            self._pending = self._executor.submit(
                self._run_advisory, generation, outcome.value, target, history_values, outcome.hint,
            )
        except RuntimeError:
            # Executor shut down: the guess stands, show the fallback and reopen the guard
            logger.warning("Advisory worker unavailable, using fallback")
            self._apply_advisory(generation, fallback_advisory(outcome.hint))
        return outcome

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until the most recent advisory job has been applied or dropped."""
        if self._pending is not None:
            self._pending.result(timeout=timeout)

    def close(self) -> None:
        """Stop the advisory worker if this controller created it."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "GameController":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # ── Advisory worker ──────────────────────────────────────

    def _run_advisory(
        self,
        generation: int,
        guess: int,
        target: int,
        history_values: list,
        hint: Hint,
    ) -> None:
        try:
            advisory = self.advisory_client.fetch_advisory(guess, target, history_values, hint)
        except Exception:
            # loading must clear even if a custom client raises
            logger.exception("Advisory client raised, using fallback")
            advisory = fallback_advisory(hint)
        self._apply_advisory(generation, advisory)

    def _apply_advisory(self, generation: int, advisory: AdvisoryResult) -> None:
        with self._lock:
            if generation != self.session.generation:
                logger.info(
                    f"Discarding advisory from game {generation} "
                    f"(current game {self.session.generation})"
                )
                return
            self._advisory = advisory
            self._loading = False
