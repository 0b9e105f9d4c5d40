"""Command line script for the number guessing game.

Run ``python guess.py`` and type numbers until the secret is found, or
``q``/``quit`` to leave early.  See :mod:`exercises.guessing_game`.
"""

from __future__ import annotations

from exercises.guessing_game import main

if __name__ == "__main__":
    raise SystemExit(main())
