"""Introductory command line exercises.

Two independent interactive programs live here: a Fibonacci reporter and a
number guessing game.  They share only the line-oriented console helpers in
:mod:`exercises.console`.
"""

from __future__ import annotations

from .console import (
    ConsoleIOError,
    ExitStatus,
    InputClosedError,
    InvalidNumberError,
    parse_unsigned,
    prompt_line,
)
from .guessing_game import GameOutcome, GuessingGame, Turn, draw_secret, play

__all__ = [
    "ConsoleIOError",
    "ExitStatus",
    "GameOutcome",
    "GuessingGame",
    "InputClosedError",
    "InvalidNumberError",
    "Turn",
    "draw_secret",
    "parse_unsigned",
    "play",
    "prompt_line",
]
