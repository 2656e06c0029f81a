"""
play.py — Play Mind Reader in the terminal
===========================================

Guess the number between 1 and 100 in at most 10 tries. Put your
Anthropic key in a .env file (ANTHROPIC_API_KEY=...) to get comments
from the model; without it you still get a fixed hint message.

    python play.py

Type a number and press Enter. Type "q" to quit.
"""

import logging

from mind_reader import (
    AdvisoryClient,
    GameController,
    GameStatus,
    GuessVerdict,
    Hint,
    load_config,
    setup_logging,
)
from mind_reader._shared import enable_quiet_mode

ARROWS = {Hint.UP: "▲ higher", Hint.DOWN: "▼ lower", Hint.CORRECT: "● correct"}


def show_advisory(game: GameController) -> None:
    if game.advisory is not None:
        print(f"  {game.advisory.emoji}  {game.advisory.message}")


def show_history(game: GameController) -> None:
    for record in game.history_newest_first:
        print(f"     {record.value:>3}  {ARROWS[record.hint]}")


def show_result(game: GameController) -> None:
    banner = "🏆 You got it!" if game.status is GameStatus.WON else "💀 Game over"
    print()
    print("=" * 40)
    print(f"  {banner}  The number was {game.target}.")
    print("=" * 40)


def play_round(game: GameController) -> bool:
    """Play one game. Returns False if the player quit."""
    game.start()
    show_advisory(game)

    while game.status is GameStatus.PLAYING:
        raw = input(f"\n[{game.guess_count}/{game.max_guesses}] Your guess: ").strip()
        if raw.lower() in ("q", "quit", "exit"):
            return False

        outcome = game.submit_guess(raw)
        if outcome.verdict in (GuessVerdict.INVALID, GuessVerdict.OUT_OF_RANGE):
            print("  Enter a whole number between 1 and 100.")
            continue
        if outcome.verdict is GuessVerdict.DUPLICATE:
            show_advisory(game)
            continue

        print("  …")
        game.wait()
        show_advisory(game)
        show_history(game)

    show_result(game)
    return True


def main() -> None:
    config = load_config()
    setup_logging(log_file_path=config.log_file, level=logging.DEBUG)
    enable_quiet_mode()

    with GameController(AdvisoryClient(config)) as game:
        print("Mind Reader — guess my number!")
        while play_round(game):
            again = input("\nPlay again? [Y/n] ").strip().lower()
            if again in ("n", "no"):
                break


if __name__ == "__main__":
    main()
