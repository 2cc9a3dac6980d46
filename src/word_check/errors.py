"""Exception hierarchy for the word checker.

Every fatal condition maps onto a reserved exit code so the CLI can report it
without colliding with a misspelling count.
"""

from __future__ import annotations

from src.models import ExitCode


class WordCheckError(Exception):
    """Base class for fatal word-check errors."""

    exit_code: int = int(ExitCode.INTERNAL_ERROR)


class ConfigurationError(WordCheckError):
    """A dictionary or reserved-word list is missing or unreadable."""

    exit_code = int(ExitCode.CONFIGURATION_ERROR)


class InputError(WordCheckError):
    """A target path cannot be read (or is a directory without recursion)."""

    exit_code = int(ExitCode.INPUT_ERROR)


class BaselineParseError(WordCheckError):
    """The baseline file is unreadable or holds a malformed line."""

    exit_code = int(ExitCode.BASELINE_READ_ERROR)

    def __init__(self, message: str, *, path: object = None, line_number: int | None = None) -> None:
        location = ""
        if path is not None:
            location = f"{path}:{line_number}: " if line_number is not None else f"{path}: "
        super().__init__(f"{location}{message}")
        self.path = path
        self.line_number = line_number


class BaselineWriteError(WordCheckError):
    """New baseline entries could not be written."""

    exit_code = int(ExitCode.BASELINE_WRITE_ERROR)


class InternalInvariantError(WordCheckError):
    """A condition the code guarantees could not happen did happen."""

    exit_code = int(ExitCode.INTERNAL_ERROR)
