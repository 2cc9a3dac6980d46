"""Baseline of accepted misspellings, keyed by file.

The baseline file lists ``"<relative-path>: <word>"`` entries. A word listed
for one file is only suppressed in that file. New entries are appended; the
file is never rewritten.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from src.models import BaselineEntry, Word
from src.utils.line_utils import iter_numbered_lines, read_text_file

from .errors import BaselineParseError, BaselineWriteError

LOGGER = logging.getLogger(__name__)

DEFAULT_BASELINE_FILE = Path(".wcheck-baseline")


def _normalise_key(file: Path | str) -> str:
    return str(Path(file))


def read_baseline_file(path: Path) -> dict[str, set[str]]:
    """Parse the baseline at ``path`` into ``{relative path: {words}}``.

    A missing file yields an empty mapping. Blank lines are ignored.

    Raises:
        BaselineParseError: If the file cannot be read or a line lacks the
            ``": "`` separator.
    """
    baseline: dict[str, set[str]] = {}
    if not path.exists():
        LOGGER.debug("No baseline file at %s", path)
        return baseline

    try:
        text = read_text_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise BaselineParseError(f"Failed to read baseline file: {exc}", path=path) from exc

    for line_number, line in iter_numbered_lines(text):
        if not line.strip():
            continue
        try:
            entry = BaselineEntry.from_line(line)
        except ValueError as exc:
            raise BaselineParseError(
                f"Malformed baseline entry {line!r}: {exc}",
                path=path,
                line_number=line_number,
            ) from exc
        baseline.setdefault(_normalise_key(entry.file), set()).add(entry.word)

    return baseline


class BaselineStore:
    """In-memory view of the baseline file plus the entries added this run."""

    def __init__(self, path: Path, entries: dict[str, set[str]] | None = None) -> None:
        self.path = Path(path)
        self.entries: dict[str, set[str]] = {
            _normalise_key(file): set(words) for file, words in (entries or {}).items()
        }

    @classmethod
    def load(cls, path: Path = DEFAULT_BASELINE_FILE) -> "BaselineStore":
        store = cls(path, read_baseline_file(Path(path)))
        LOGGER.info(
            "Loaded %d baseline entr%s from %s",
            len(store),
            "y" if len(store) == 1 else "ies",
            store.path,
        )
        return store

    def __len__(self) -> int:
        return sum(len(words) for words in self.entries.values())

    def is_suppressed(self, file: Path | str, word: str) -> bool:
        """Return ``True`` if ``word`` is accepted for ``file``."""
        return word in self.entries.get(_normalise_key(file), ())

    def record_new(self, words: Iterable[Word]) -> list[BaselineEntry]:
        """Append an entry for every misspelled word not yet in the baseline.

        Returns the entries that were written. Pairs already known (loaded or
        recorded earlier) are skipped, so repeated calls never duplicate lines.

        Raises:
            BaselineWriteError: If a word's file lies outside the working
                directory or the baseline file cannot be written.
        """
        pending: list[BaselineEntry] = []
        seen: set[tuple[str, str]] = set()
        for word in words:
            try:
                relative_path = word.relative_path()
            except ValueError as exc:
                raise BaselineWriteError(f"Cannot baseline {word.text!r}: {exc}") from exc

            entry = BaselineEntry(file=str(relative_path), word=word.text)
            key = (_normalise_key(entry.file), entry.word)
            if key in seen or self.is_suppressed(*key):
                continue
            seen.add(key)
            pending.append(entry)

        try:
            with self.path.open("a", encoding="utf-8") as baseline_file:
                for entry in pending:
                    baseline_file.write(entry.to_line() + "\n")
        except OSError as exc:
            raise BaselineWriteError(f"Failed to write baseline file {self.path}: {exc}") from exc

        for entry in pending:
            self.entries.setdefault(_normalise_key(entry.file), set()).add(entry.word)

        LOGGER.info(
            "Appended %d baseline entr%s to %s",
            len(pending),
            "y" if len(pending) == 1 else "ies",
            self.path,
        )
        return pending
