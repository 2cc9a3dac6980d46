"""Utilities for splitting file contents into numbered lines.

Word lists and target files are split on ``\\n`` only, with a trailing ``\\r``
removed from each line. ``str.splitlines`` is deliberately not used: it also
breaks on form feeds and other separators, which would shift line numbers
in source files that contain them.

Functions:
    - iter_lines: Yield the lines of a text
    - iter_numbered_lines: Yield ``(line_number, line)`` pairs, 1-based
    - read_text_file: Read a UTF-8 file in one go
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def iter_lines(text: str) -> Iterator[str]:
    """Yield each line of ``text`` without its line terminator.

    A final terminator does not produce an extra empty line.

    Example:
        >>> list(iter_lines("one\\r\\ntwo\\n"))
        ['one', 'two']
    """
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line.removesuffix("\r")


def iter_numbered_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs with 1-based line numbers."""
    yield from enumerate(iter_lines(text), start=1)


def read_text_file(path: Path) -> str:
    """Return the UTF-8 decoded contents of ``path``.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the contents are not valid UTF-8.
    """
    return Path(path).read_text(encoding="utf-8")
