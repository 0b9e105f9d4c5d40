"""Interactive number guessing game.

A secret number between 1 and 100 is drawn once per game.  The player is
prompted repeatedly and told whether each guess is too small or too big
until it matches, or until they type ``q`` or ``quit``.  Lines that are
neither a quit word nor a number are dropped without comment.

The game is split into :class:`GuessingGame`, which evaluates one trimmed
line at a time and never touches the terminal, and :func:`play`, which owns
the prompt loop.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
import logging
import random
import sys
from typing import Optional, Sequence, TextIO

from .console import (
    ConsoleIOError,
    ExitStatus,
    InvalidNumberError,
    LOG_LEVELS,
    configure_logging,
    parse_unsigned,
    prompt_line,
    write_line,
)

logger = logging.getLogger(__name__)

BANNER = "Guess the number!"
PROMPT = "Please input your guess: "
FAREWELL = "Thanks for playing!"
TOO_SMALL = "Too small!"
TOO_BIG = "Too big!"
QUIT_WORDS = frozenset({"q", "quit"})
SECRET_RANGE = (1, 100)


class Comparison(Enum):
    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"


class GameOutcome(Enum):
    """Terminal states of a game."""

    WON = "won"
    QUIT = "quit"


@dataclass(frozen=True)
class Turn:
    """Result of evaluating one line of input.

    ``message`` is ``None`` when the line is silently discarded and
    ``outcome`` is ``None`` while the game continues.
    """

    message: Optional[str] = None
    outcome: Optional[GameOutcome] = None


def draw_secret(rng: random.Random | None = None) -> int:
    """Draw the secret number uniformly from :data:`SECRET_RANGE`."""

    low, high = SECRET_RANGE
    return (rng or random.Random()).randint(low, high)


def compare(guess: int, secret: int) -> Comparison:
    if guess < secret:
        return Comparison.LESS
    if guess > secret:
        return Comparison.GREATER
    return Comparison.EQUAL


class GuessingGame:
    """State for a single game around an immutable secret."""

    def __init__(self, secret: int) -> None:
        low, high = SECRET_RANGE
        if not low <= secret <= high:
            raise ValueError(f"secret must be between {low} and {high}")
        self._secret = secret
        self.guesses = 0

    @property
    def secret(self) -> int:
        return self._secret

    def evaluate(self, line: str) -> Turn:
        """Evaluate one trimmed line of player input."""

        if line in QUIT_WORDS:
            return Turn(message=FAREWELL, outcome=GameOutcome.QUIT)

        try:
            guess = parse_unsigned(line)
        except InvalidNumberError:
            logger.debug("Discarding unparsable guess %r", line)
            return Turn()

        self.guesses += 1
        result = compare(guess, self.secret)
        logger.debug("Guess %d compared %s", guess, result.value)
        if result is Comparison.LESS:
            return Turn(message=TOO_SMALL)
        if result is Comparison.GREATER:
            return Turn(message=TOO_BIG)
        return Turn(
            message=f"{guess} is correct: congratulations!",
            outcome=GameOutcome.WON,
        )


def play(game: GuessingGame, *, stdin: TextIO, stdout: TextIO) -> GameOutcome:
    """Run the prompt loop until the player wins or quits.

    Raises :class:`~exercises.console.InputClosedError` if input ends first.
    """

    write_line(BANNER, stdout=stdout)
    while True:
        line = prompt_line(PROMPT, stdin=stdin, stdout=stdout, allow_eof=False)
        turn = game.evaluate(line)
        if turn.message is not None:
            write_line(turn.message, stdout=stdout)
        if turn.outcome is not None:
            logger.info(
                "Game finished: %s after %d guesses", turn.outcome.value, game.guesses
            )
            return turn.outcome


def run(
    *, stdin: TextIO, stdout: TextIO, rng: random.Random | None = None
) -> ExitStatus:
    """Draw a secret and play one game; both outcomes succeed."""

    secret = draw_secret(rng)
    logger.debug("Secret number drawn: %d", secret)
    play(GuessingGame(secret), stdin=stdin, stdout=stdout)
    return ExitStatus.SUCCESS


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Guess a secret number between 1 and 100",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the secret number draw (default: system entropy)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Logging verbosity for diagnostic output (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        return int(run(stdin=sys.stdin, stdout=sys.stdout, rng=rng))
    except ConsoleIOError as exc:
        logger.error("Guessing game aborted: %s", exc)
        return int(ExitStatus.IO_ERROR)


__all__ = [
    "BANNER",
    "Comparison",
    "FAREWELL",
    "GameOutcome",
    "GuessingGame",
    "PROMPT",
    "QUIT_WORDS",
    "SECRET_RANGE",
    "Turn",
    "compare",
    "draw_secret",
    "main",
    "play",
    "run",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
