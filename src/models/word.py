"""Word dataclass for tokens found while scanning a file.

A ``Word`` is the unit the checker validates and the baseline suppresses. It
records where the token came from so diagnostics and baseline entries can point
back at the file and line.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def relative_file_path(path: Path | str, *, cwd: Path | None = None, strict: bool = True) -> Path:
    """Return ``path`` relative to the working directory.

    Relative paths are returned unchanged. Absolute paths have the working
    directory prefix stripped.

    Args:
        path: File path as stored on a word.
        cwd: Directory to strip (defaults to :func:`Path.cwd`).
        strict: When ``True`` an absolute path outside ``cwd`` raises
            ``ValueError``; otherwise the path is returned as given.
    """
    file_path = Path(path)
    if not file_path.is_absolute():
        return file_path

    base = Path.cwd() if cwd is None else Path(cwd)
    try:
        return file_path.relative_to(base)
    except ValueError:
        if strict:
            raise ValueError(f"{file_path} is not inside the working directory {base}") from None
        return file_path


@dataclass(frozen=True)
class Word:
    """Immutable token extracted from a line of a file.

    Attributes:
        text: The extracted word (letters, underscores and apostrophes)
        source_file: Path of the file the word came from
        line_number: 1-based line index within the file
    """

    text: str
    source_file: Path
    line_number: int

    def relative_path(self, *, cwd: Path | None = None, strict: bool = True) -> Path:
        """Return the source file relative to the working directory."""
        return relative_file_path(self.source_file, cwd=cwd, strict=strict)

    def __str__(self) -> str:
        return f"{self.source_file}:{self.line_number}: {self.text}"
