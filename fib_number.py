"""Command line script for the interactive Fibonacci reporter.

Prompts for an index on the terminal and prints the Fibonacci value at that
index.  All behaviour lives in :mod:`exercises.fibonacci`; this script only
provides a file that can be run directly with ``python fib_number.py``.
"""

from __future__ import annotations

from exercises.fibonacci import main

if __name__ == "__main__":
    raise SystemExit(main())
