"""
mind_reader — Number guessing game with advisory comments
=========================================================

Guess a secret number between 1 and 100 in at most 10 attempts. Each
guess gets an UP / DOWN / CORRECT hint from the game rules and a short
comment plus emoji from a language model. The model is decoration
only: when it is missing, slow or broken, a fixed message is shown and
the game plays on.

Quick Start:
    from mind_reader import GameController, AdvisoryClient, load_config

    game = GameController(AdvisoryClient(load_config()))
    game.start()
    outcome = game.submit_guess("50")
    game.wait()
    print(outcome.hint, game.advisory.emoji, game.advisory.message)

Rules only (no advisory):
    from mind_reader import GameSession

    session = GameSession()
    session.start()
    session.submit_guess(50)
"""

from ._config import (
    MAX_GUESSES,
    RANGE_MAX,
    AdvisoryConfig,
    load_config,
    validate_config,
)
from ._state import (
    GameSession,
    GuessOutcome,
    GuessRecord,
    GuessVerdict,
    derive_hint,
    parse_guess,
)
from ._advisory import AdvisoryClient, fallback_advisory
from ._shared import setup_logging
from .controller import GameController
from .errors import (
    MindReaderError,
    AdvisoryUnavailableError,
    AdvisoryTimeoutError,
    AdvisoryServiceError,
    InvalidAdvisoryResponseError,
    AdvisorySchemaError,
)
from .types import AdvisoryContext, AdvisoryResult, GameStatus, Hint

__all__ = [
    # Main classes
    "GameController",
    "GameSession",
    "AdvisoryClient",
    # Configuration
    "AdvisoryConfig",
    "load_config",
    "validate_config",
    "setup_logging",
    "MAX_GUESSES",
    "RANGE_MAX",
    # Rules
    "GuessOutcome",
    "GuessRecord",
    "GuessVerdict",
    "derive_hint",
    "parse_guess",
    "fallback_advisory",
    # Errors
    "MindReaderError",
    "AdvisoryUnavailableError",
    "AdvisoryTimeoutError",
    "AdvisoryServiceError",
    "InvalidAdvisoryResponseError",
    "AdvisorySchemaError",
    # Types
    "AdvisoryContext",
    "AdvisoryResult",
    "GameStatus",
    "Hint",
]
__version__ = "1.0.0"
