"""Run spelling checks over files and aggregate the results.

Each file goes through the same steps: tokenize, classify and validate every
word, drop the failures the baseline already accepts, then print one
diagnostic per failing sub-word. Files are processed one after another and any
read failure aborts the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from src.models import ExitCode, Word, relative_file_path

from .baseline import BaselineStore
from .config import CheckConfiguration
from .dictionary import Dictionary
from .file_discovery import iter_target_files
from .report_utils import write_report_csv
from .tokenizer import read_words_from_file
from .validator import ValidationResult, validate_word

LOGGER = logging.getLogger(__name__)

RED = "\x1b[91m"
YELLOW = "\x1b[93m"
RESET = "\x1b[0m"

Emitter = Callable[[str], None]


@dataclass
class FileReport:
    """Unsuppressed misspellings found in one file."""

    path: Path
    display_path: str
    word_count: int = 0
    suppressed: int = 0
    results: list[ValidationResult] = field(default_factory=list)

    @property
    def misspelled_words(self) -> list[Word]:
        return [result.word for result in self.results]


@dataclass
class CheckResult:
    """Aggregated outcome of a run."""

    reports: list[FileReport] = field(default_factory=list)

    @property
    def misspelled_words(self) -> list[Word]:
        return [word for report in self.reports for word in report.misspelled_words]

    @property
    def misspelled_count(self) -> int:
        return sum(len(report.results) for report in self.reports)

    @property
    def exit_code(self) -> int:
        return ExitCode.for_misspellings(self.misspelled_count)


def _colour(text: str, code: str, enabled: bool) -> str:
    return f"{code}{text}{RESET}" if enabled else text


def format_misspelling(
    file_path: str,
    line_number: int,
    sub_word: str,
    containing_word: str | None = None,
    *,
    color: bool = False,
) -> str:
    """Return the diagnostic line for one failing sub-word.

    ``containing_word`` is given for camelCase and snake_case tokens so the
    whole identifier is shown alongside the failing part.
    """
    message = f"Misspelled word in {file_path}:{line_number}: '{_colour(sub_word, RED, color)}'"
    if containing_word is not None:
        message += f" within '{_colour(containing_word, YELLOW, color)}'"
    return message


def display_path(path: Path) -> str:
    """Path shown in diagnostics: relative to the working directory when possible."""
    return str(relative_file_path(path, strict=False))


def check_spelling_for_words(
    words: Iterable[Word],
    dictionary: Dictionary,
    baseline: BaselineStore | None = None,
    *,
    color: bool = False,
    emit: Emitter = print,
) -> tuple[list[ValidationResult], int]:
    """Validate ``words`` and report the misspellings the baseline does not accept.

    Returns the unsuppressed failing results, in document order, and the number
    of failures the baseline suppressed.
    """
    misspelled: list[ValidationResult] = []
    suppressed = 0

    for word in words:
        result = validate_word(word, dictionary)
        if result.is_correct:
            continue

        file_path = display_path(word.source_file)
        if baseline is not None and baseline.is_suppressed(file_path, word.text):
            LOGGER.debug("Baseline accepts %r in %s", word.text, file_path)
            suppressed += 1
            continue

        containing_word = word.text if result.is_multi_word else None
        for sub_word in result.misspelled:
            emit(
                format_misspelling(
                    file_path, word.line_number, sub_word, containing_word, color=color
                )
            )
        misspelled.append(result)

    return misspelled, suppressed


def check_file(
    path: Path,
    dictionary: Dictionary,
    baseline: BaselineStore | None = None,
    *,
    color: bool = False,
    emit: Emitter = print,
) -> FileReport:
    """Check a single file and return its report."""
    words = read_words_from_file(path)
    results, suppressed = check_spelling_for_words(
        words, dictionary, baseline, color=color, emit=emit
    )
    report = FileReport(
        path=path,
        display_path=display_path(path),
        word_count=len(words),
        suppressed=suppressed,
        results=results,
    )
    LOGGER.info(
        "Checked %s: %d word(s), %d misspelled, %d accepted by baseline",
        report.display_path,
        report.word_count,
        len(report.results),
        report.suppressed,
    )
    return report


def run_checks(config: CheckConfiguration, *, emit: Emitter = print) -> CheckResult:
    """Run a full check as described by ``config``.

    Dictionaries and the baseline are loaded before any file is read. When
    ``config.generate_baseline`` is set the surviving misspellings are appended
    to the baseline file at the end of the run.
    """
    dictionary = Dictionary.from_files(config.dictionary_files)
    baseline = BaselineStore.load(config.baseline_file)

    result = CheckResult()
    for path in iter_target_files(
        config.targets, recursive=config.recursive, skip=[config.baseline_file]
    ):
        result.reports.append(
            check_file(path, dictionary, baseline, color=config.color, emit=emit)
        )

    if config.generate_baseline:
        emit("Generating baseline file")
        baseline.record_new(result.misspelled_words)

    if config.report_path is not None:
        write_report_csv(result.reports, config.report_path)
        LOGGER.info("CSV report written to %s", config.report_path)

    LOGGER.info(
        "Checked %d file(s): %d misspelled word(s)",
        len(result.reports),
        result.misspelled_count,
    )
    return result
