"""Interactive Fibonacci reporter.

Asks for an index, computes the Fibonacci value at that index and prints it
in a fixed sentence.  Values are accumulated in an unsigned 32-bit pair, so
indices of 48 and above wrap modulo ``2**32`` instead of growing without
bound; that boundary is accepted and not guarded.

Running the module as a script starts the interactive prompt::

    python -m exercises.fibonacci
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

import numpy as np

from .console import (
    ConsoleIOError,
    ExitStatus,
    InvalidNumberError,
    LOG_LEVELS,
    U32_MAX,
    configure_logging,
    parse_unsigned,
    prompt_line,
    write_line,
)

logger = logging.getLogger(__name__)

PROMPT = "What number in the Fibonacci sequence do you want to see? "


def _validate_index(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n must be an integer")
    if n < 0:
        raise ValueError("n must be non-negative")
    if n > U32_MAX:
        raise ValueError("n must fit in an unsigned 32-bit integer")


def fibonacci(n: int) -> int:
    """Return the Fibonacci value at index *n*, with F(0)=0 and F(1)=1.

    The pair ``(previous, current)`` starts at the values for indices 1 and 2
    and advances once per index until ``current`` holds F(n).  Additions wrap
    silently on overflow.
    """

    _validate_index(n)
    if n < 2:
        return n

    previous = np.uint32(1)
    current = np.uint32(1)
    with np.errstate(over="ignore"):
        for _ in range(2, n):
            previous, current = current, previous + current
    return int(current)


def format_result(n: int, value: int) -> str:
    """Return the success sentence for index *n*."""

    return f"Number {n} in the Fibonacci sequence is {value}."


def format_invalid(raw: str) -> str:
    """Return the diagnostic echoed for unparsable input."""

    return f"You entered '{raw}'. Try again with a number."


def run(*, stdin: TextIO, stdout: TextIO) -> ExitStatus:
    """Prompt for one index and report its Fibonacci value."""

    raw = prompt_line(PROMPT, stdin=stdin, stdout=stdout)
    try:
        wanted = parse_unsigned(raw)
    except InvalidNumberError as exc:
        logger.debug("Rejected index input: %s", exc)
        write_line(format_invalid(raw), stdout=stdout)
        return ExitStatus.INVALID_INPUT

    value = fibonacci(wanted)
    logger.debug("F(%d) = %d", wanted, value)
    write_line(format_result(wanted, value), stdout=stdout)
    return ExitStatus.SUCCESS


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the Fibonacci value at an index read from the terminal",
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

    try:
        return int(run(stdin=sys.stdin, stdout=sys.stdout))
    except ConsoleIOError as exc:
        logger.error("Fibonacci reporter aborted: %s", exc)
        return int(ExitStatus.IO_ERROR)


__all__ = [
    "PROMPT",
    "fibonacci",
    "format_invalid",
    "format_result",
    "main",
    "run",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
