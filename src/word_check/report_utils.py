"""CSV report for a word-check run.

Kept apart from the checker so the report layout can be tested without
touching dictionaries or baselines.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .checker import FileReport

REPORT_HEADER = ["File", "Line", "Word", "Misspelled", "Multi-word"]


def build_report_csv(reports: Iterable["FileReport"]) -> list[list[str]]:
    """Return CSV rows (header first), one row per failing sub-word."""
    rows: list[list[str]] = [list(REPORT_HEADER)]
    for report in reports:
        for result in report.results:
            for sub_word in result.misspelled:
                rows.append(
                    [
                        report.display_path,
                        str(result.word.line_number),
                        result.word.text,
                        sub_word,
                        "yes" if result.is_multi_word else "no",
                    ]
                )
    return rows


def write_report_csv(reports: Iterable["FileReport"], report_path: Path) -> Path:
    report_path.parent.mkdir(parents=True, exist_ok=True)
    with report_path.open("w", encoding="utf-8", newline="") as csv_file:
        writer = csv.writer(csv_file)
        writer.writerows(build_report_csv(reports))
    return report_path
