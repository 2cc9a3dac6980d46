"""Extract candidate words from file contents.

A word starts and ends with an ASCII letter and may contain letters,
underscores and apostrophes in between. Each whitespace-delimited chunk
contributes at most one word: the first match inside it, which strips any
punctuation wrapped around the word (``"word,"``, ``(word)``).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from src.models import Word
from src.utils.line_utils import iter_numbered_lines, read_text_file

from .errors import InputError, InternalInvariantError

LOGGER = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z_']*[a-zA-Z]")


def tokenize_line(line: str, line_number: int, source_file: Path) -> list[Word]:
    """Return the words found on a single line, in order."""
    chunks = [chunk for chunk in line.split() if WORD_PATTERN.search(chunk)]

    words: list[Word] = []
    for chunk in chunks:
        match = WORD_PATTERN.search(chunk)
        if match is None:
            raise InternalInvariantError(
                f"Missing word in chunk {chunk!r} at {source_file}:{line_number}"
            )
        words.append(Word(text=match.group(0), source_file=source_file, line_number=line_number))
    return words


def tokenize_text(text: str, source_file: Path) -> list[Word]:
    """Return every word in ``text`` in document order."""
    words: list[Word] = []
    for line_number, line in iter_numbered_lines(text):
        words.extend(tokenize_line(line, line_number, source_file))
    return words


def read_words_from_file(path: Path) -> list[Word]:
    """Read ``path`` and tokenize its contents.

    Raises:
        InputError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        text = read_text_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Failed to read file {path}: {exc}") from exc

    words = tokenize_text(text, path)
    LOGGER.debug("Tokenized %d word(s) from %s", len(words), path)
    return words
