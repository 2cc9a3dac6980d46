"""Pydantic model for a single baseline line.

A baseline file holds one ``"<relative-path>: <word>"`` entry per line. The
separator is not escaped, so a path containing ``": "`` cannot round-trip;
parsing splits on the last separator because words never contain one.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

BASELINE_SEPARATOR = ": "


class BaselineEntry(BaseModel):
    """An accepted misspelling: ``word`` must not be reported again in ``file``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    file: str
    word: str

    @field_validator("file", mode="before")
    def _clean_file(cls, value: object) -> str:
        result = str(value or "")
        if not result.strip():
            raise ValueError("file must not be empty")
        return result

    @field_validator("word", mode="before")
    def _clean_word(cls, value: object) -> str:
        result = str(value or "").strip()
        if not result:
            raise ValueError("word must not be empty")
        if BASELINE_SEPARATOR in result:
            raise ValueError(f"word must not contain {BASELINE_SEPARATOR!r}")
        return result

    @classmethod
    def from_line(cls, line: str) -> "BaselineEntry":
        """Parse a persisted baseline line.

        Raises:
            ValueError: If the separator is missing or either side is empty.
        """
        file, separator, word = line.rstrip("\r\n").rpartition(BASELINE_SEPARATOR)
        if not separator:
            raise ValueError(f"missing {BASELINE_SEPARATOR!r} separator")
        return cls(file=file, word=word)

    def to_line(self) -> str:
        """Render the entry in the persisted ``"<file>: <word>"`` format."""
        return f"{self.file}{BASELINE_SEPARATOR}{self.word}"
