"""wcheck: dictionary spell checking for source code and text files."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "models",
    "word_check",
]
