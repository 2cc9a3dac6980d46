"""Command-line entrypoint for wcheck.

Equivalent to ``python -m src.word_check`` or the installed ``wcheck`` script.
"""

from __future__ import annotations

from src.word_check.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
