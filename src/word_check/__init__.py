"""Word check package exports.

This package exposes the key helpers used by other parts of the project
so callers can import from ``src.word_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    # These imports are only for type checkers — they are not executed at runtime
    from .baseline import BaselineStore, read_baseline_file
    from .checker import (
        CheckResult,
        FileReport,
        check_file,
        check_spelling_for_words,
        format_misspelling,
        run_checks,
    )
    from .classifier import classify, is_camel_case, is_snake_case
    from .config import CheckConfiguration
    from .dictionary import Dictionary, read_dictionary_file
    from .file_discovery import iter_target_files
    from .splitter import split_camel_case, split_snake_case, split_sub_words
    from .tokenizer import read_words_from_file, tokenize_line, tokenize_text
    from .validator import ValidationResult, validate_word

__all__ = [
    "BaselineStore",
    "CheckConfiguration",
    "CheckResult",
    "Dictionary",
    "FileReport",
    "ValidationResult",
    "check_file",
    "check_spelling_for_words",
    "classify",
    "format_misspelling",
    "is_camel_case",
    "is_snake_case",
    "iter_target_files",
    "read_baseline_file",
    "read_dictionary_file",
    "read_words_from_file",
    "run_checks",
    "split_camel_case",
    "split_snake_case",
    "split_sub_words",
    "tokenize_line",
    "tokenize_text",
    "validate_word",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "BaselineStore": (".baseline", "BaselineStore"),
    "read_baseline_file": (".baseline", "read_baseline_file"),
    "CheckResult": (".checker", "CheckResult"),
    "FileReport": (".checker", "FileReport"),
    "check_file": (".checker", "check_file"),
    "check_spelling_for_words": (".checker", "check_spelling_for_words"),
    "format_misspelling": (".checker", "format_misspelling"),
    "run_checks": (".checker", "run_checks"),
    "classify": (".classifier", "classify"),
    "is_camel_case": (".classifier", "is_camel_case"),
    "is_snake_case": (".classifier", "is_snake_case"),
    "CheckConfiguration": (".config", "CheckConfiguration"),
    "Dictionary": (".dictionary", "Dictionary"),
    "read_dictionary_file": (".dictionary", "read_dictionary_file"),
    "iter_target_files": (".file_discovery", "iter_target_files"),
    "split_camel_case": (".splitter", "split_camel_case"),
    "split_snake_case": (".splitter", "split_snake_case"),
    "split_sub_words": (".splitter", "split_sub_words"),
    "read_words_from_file": (".tokenizer", "read_words_from_file"),
    "tokenize_line": (".tokenizer", "tokenize_line"),
    "tokenize_text": (".tokenizer", "tokenize_text"),
    "ValidationResult": (".validator", "ValidationResult"),
    "validate_word": (".validator", "validate_word"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    Submodules are only imported when an export is first used, so importing
    the package stays cheap for callers that need one helper.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"src.word_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
