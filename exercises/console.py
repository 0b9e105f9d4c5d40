"""Line-oriented terminal helpers shared by the exercise programs.

Both programs talk to the user the same way: write a prompt without a
trailing newline, flush it so it is visible, block on a single line of
input and interpret the trimmed text.  The helpers here keep that
behaviour in one place and translate low-level failures into the small
exception hierarchy the command line entry points dispatch on.
"""

from __future__ import annotations

from enum import IntEnum
import logging
import re
from typing import TextIO

logger = logging.getLogger(__name__)

U32_MAX = 2**32 - 1
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


class ExitStatus(IntEnum):
    """Process exit codes returned by the command line entry points."""

    SUCCESS = 0
    INVALID_INPUT = 1
    IO_ERROR = 2


class InvalidNumberError(ValueError):
    """Raised when text cannot be interpreted as an unsigned 32-bit integer."""

    def __init__(self, text: str) -> None:
        super().__init__(f"not an unsigned 32-bit integer: {text!r}")
        self.text = text


class ConsoleIOError(OSError):
    """Raised when the terminal cannot be written to or read from."""


class InputClosedError(ConsoleIOError):
    """Raised when input ends while the caller still needs a line."""


def parse_unsigned(text: str) -> int:
    """Parse *text* as an unsigned 32-bit integer.

    Only an optional leading ``+`` followed by ASCII digits is accepted.
    Signs, separators, fractional parts and values wider than 32 bits are
    rejected with :class:`InvalidNumberError`.
    """

    if not _UNSIGNED_PATTERN.fullmatch(text):
        raise InvalidNumberError(text)
    value = int(text)
    if value > U32_MAX:
        raise InvalidNumberError(text)
    return value


def prompt_line(
    prompt: str,
    *,
    stdin: TextIO,
    stdout: TextIO,
    allow_eof: bool = True,
) -> str:
    """Show *prompt*, then read and return one trimmed line.

    The prompt is flushed before the blocking read starts.  End of input
    yields an empty string unless ``allow_eof`` is false, in which case
    :class:`InputClosedError` is raised.
    """

    try:
        stdout.write(prompt)
    except OSError as exc:
        raise ConsoleIOError(f"failed to write prompt: {exc}") from exc
    try:
        stdout.flush()
    except OSError as exc:
        raise ConsoleIOError(f"failed to flush prompt: {exc}") from exc

    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConsoleIOError(f"failed to read line: {exc}") from exc

    if not line:
        logger.debug("End of input reached after prompt %r", prompt)
        if not allow_eof:
            raise InputClosedError("input closed before a line was read")
    return line.strip()


def write_line(text: str, *, stdout: TextIO) -> None:
    """Write *text* followed by a newline."""

    try:
        stdout.write(text + "\n")
    except OSError as exc:
        raise ConsoleIOError(f"failed to write output: {exc}") from exc


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr at *level*."""

    logging.basicConfig(level=getattr(logging, level, logging.WARNING))


__all__ = [
    "ConsoleIOError",
    "ExitStatus",
    "InputClosedError",
    "InvalidNumberError",
    "LOG_LEVELS",
    "U32_MAX",
    "configure_logging",
    "parse_unsigned",
    "prompt_line",
    "write_line",
]
