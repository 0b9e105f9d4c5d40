"""Run the top-level scripts the way a user would."""

from __future__ import annotations

import os
import random
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


def _run_script(name: str, stdin: str, *args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(  # noqa: S603  # trusted input
        [sys.executable, str(ROOT / name), *args],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=ROOT,
        check=False,
    )


@pytest.mark.integration
def test_fib_number_script_success() -> None:
    result = _run_script("fib_number.py", "10\n")
    assert result.returncode == 0
    assert result.stdout == (
        "What number in the Fibonacci sequence do you want to see? "
        "Number 10 in the Fibonacci sequence is 55.\n"
    )


@pytest.mark.integration
def test_fib_number_script_failure_status() -> None:
    result = _run_script("fib_number.py", "abc\n")
    assert result.returncode == 1
    assert "You entered 'abc'. Try again with a number." in result.stdout


@pytest.mark.integration
def test_guess_script_win_and_quit() -> None:
    secret = random.Random(11).randint(1, 100)
    won = _run_script("guess.py", f"banana\n{secret}\n", "--seed", "11")
    assert won.returncode == 0
    assert won.stdout.endswith(f"{secret} is correct: congratulations!\n")

    quit_ = _run_script("guess.py", "q\n")
    assert quit_.returncode == 0
    assert quit_.stdout == (
        "Guess the number!\nPlease input your guess: Thanks for playing!\n"
    )


@pytest.mark.integration
def test_guess_script_closed_input_fails() -> None:
    result = _run_script("guess.py", "")
    assert result.returncode == 2
    assert result.stdout.startswith("Guess the number!\n")
    assert "aborted" in result.stderr


def _run_script_bytes(name: str, stdin: bytes) -> subprocess.CompletedProcess[bytes]:
    env = dict(os.environ, PYTHONIOENCODING="utf-8:strict")
    return subprocess.run(  # noqa: S603  # trusted input
        [sys.executable, str(ROOT / name)],
        input=stdin,
        capture_output=True,
        cwd=ROOT,
        env=env,
        check=False,
    )


@pytest.mark.integration
@pytest.mark.parametrize(
    "name, payload", [("fib_number.py", b"\xff\n"), ("guess.py", b"\xff\nq\n")]
)
def test_undecodable_input_is_an_io_failure(name: str, payload: bytes) -> None:
    result = _run_script_bytes(name, payload)
    assert result.returncode == 2
    assert b"aborted: failed to read line" in result.stderr
    assert b"Traceback" not in result.stderr
