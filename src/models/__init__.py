"""Public model exports for the project.

Keep the :mod:`src` namespace clean — tests and other modules should import
``from src.models import Word, BaselineEntry, ExitCode``.
"""

from __future__ import annotations

from .baseline_entry import BASELINE_SEPARATOR, BaselineEntry
from .enums import ExitCode, WordCase
from .word import Word, relative_file_path

__all__ = [
    "BASELINE_SEPARATOR",
    "BaselineEntry",
    "ExitCode",
    "Word",
    "WordCase",
    "relative_file_path",
]
