"""Sorted, case-folded dictionary used for spelling lookups.

Word lists are concatenated, lower-cased and sorted once at start-up. Lookups
are binary searches, so the stored sequence must never contain mixed-case
entries or fall out of order.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from pathlib import Path
from typing import Iterable, Iterator

from src.utils.line_utils import iter_lines, read_text_file

from .errors import ConfigurationError

LOGGER = logging.getLogger(__name__)


def read_dictionary_file(path: Path) -> list[str]:
    """Return the lower-cased words of a one-word-per-line list.

    Raises:
        ConfigurationError: If the list is missing, unreadable or not UTF-8.
    """
    try:
        text = read_text_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read dictionary {path}: {exc}") from exc

    words = [line.lower() for line in iter_lines(text)]
    LOGGER.debug("Read %d word(s) from %s", len(words), path)
    return words


class Dictionary:
    """Immutable collection of known words.

    Duplicates are kept; membership is all that matters.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: tuple[str, ...] = tuple(sorted(word.lower() for word in words))

    @classmethod
    def from_files(cls, paths: Iterable[Path]) -> "Dictionary":
        """Merge the word lists at ``paths`` into one dictionary."""
        merged: list[str] = []
        for path in paths:
            merged.extend(read_dictionary_file(Path(path)))
        dictionary = cls(merged)
        LOGGER.info("Loaded dictionary with %d word(s)", len(dictionary))
        return dictionary

    def contains(self, word: str) -> bool:
        """Return ``True`` if the lower-cased ``word`` is a known word."""
        lowered = word.lower()
        index = bisect_left(self._words, lowered)
        return index < len(self._words) and self._words[index] == lowered

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"
