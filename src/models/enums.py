"""Enumerations shared by the word checker and its command-line interface."""

from __future__ import annotations

from enum import Enum, IntEnum


class WordCase(str, Enum):
    """Identifier style of a token, as decided by the case classifier.

    Values:
        CAMEL: camelCase / PascalCase identifiers (checked first)
        SNAKE: snake_case identifiers
        PLAIN: anything else, looked up as a single word
    """

    CAMEL = "camel"
    SNAKE = "snake"
    PLAIN = "plain"

    @property
    def is_multi_word(self) -> bool:
        return self is not WordCase.PLAIN


class ExitCode(IntEnum):
    """Process exit codes.

    Counts of misspelled words occupy ``1..MAX_MISSPELLING_COUNT``; fatal
    errors use the reserved range above it so the two never overlap.
    """

    SUCCESS = 0
    MAX_MISSPELLING_COUNT = 99
    CONFIGURATION_ERROR = 100
    INPUT_ERROR = 101
    BASELINE_READ_ERROR = 102
    BASELINE_WRITE_ERROR = 103
    INTERNAL_ERROR = 104

    @classmethod
    def for_misspellings(cls, count: int) -> int:
        """Map a misspelling count onto the exit status range."""
        if count <= 0:
            return int(cls.SUCCESS)
        return min(count, int(cls.MAX_MISSPELLING_COUNT))
