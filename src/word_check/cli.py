"""Command-line interface for the word checker.

The exit status is the number of misspelled words found (capped, see
:class:`src.models.ExitCode`); fatal errors use reserved codes above the cap.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from src.models import ExitCode

from .checker import run_checks
from .config import (
    DICTIONARY_VARIANTS,
    CheckConfiguration,
    build_dictionary_paths,
    default_baseline_file,
    default_dictionary_dir,
    default_dictionary_variant,
    default_reserved_words_file,
)
from .errors import ConfigurationError, WordCheckError

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wcheck",
        description="Spell check source code and text files against a dictionary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check two files
  wcheck README.md src/main.py

  # Check a whole tree and accept everything currently flagged
  wcheck --recursive --baseline src

  # Use the American English word list plus a project word list
  wcheck --dictionary-variant american-english --dictionary words.txt notes.txt

Environment Variables:
  WCHECK_DICTIONARY_DIR      Directory holding word lists (default: /usr/share/dict)
  WCHECK_DICTIONARY_VARIANT  Regional word list (default: british-english)
  WCHECK_RESERVED_WORDS      Reserved words list (default: /usr/share/dict/wcheck-reserved-words)
  WCHECK_BASELINE_FILE       Baseline file (default: .wcheck-baseline)
        """,
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Files (or, with --recursive, directories) to spell check",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Check every file under the given directories",
    )

    # Baseline
    parser.add_argument(
        "--baseline",
        dest="generate_baseline",
        action="store_true",
        help="Append the misspellings found to the baseline so future runs ignore them",
    )
    parser.add_argument(
        "--baseline-file",
        type=Path,
        default=None,
        help="Baseline file path (default: .wcheck-baseline or WCHECK_BASELINE_FILE)",
    )

    # Dictionaries
    parser.add_argument(
        "--dictionary-variant",
        default=None,
        metavar="NAME",
        help=(
            "Regional word list inside the dictionary directory, e.g. "
            f"{', '.join(DICTIONARY_VARIANTS)} (default: british-english or "
            "WCHECK_DICTIONARY_VARIANT)"
        ),
    )
    parser.add_argument(
        "--dictionary",
        action="append",
        dest="extra_dictionaries",
        type=Path,
        metavar="PATH",
        help="Additional word list to merge (can be specified multiple times)",
    )
    parser.add_argument(
        "--reserved-words",
        type=Path,
        default=None,
        help="Reserved words list (default: /usr/share/dict/wcheck-reserved-words or WCHECK_RESERVED_WORDS)",
    )
    parser.add_argument(
        "--no-reserved-words",
        action="store_true",
        help="Don't merge the reserved words list",
    )

    # Output
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also write a CSV report of the misspellings to this path",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output (colour is used only when stdout is a terminal)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: WARNING).",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        default=None,
        help="Path to a .env file with WCHECK_* settings (default: .env in the working directory)",
    )
    return parser


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(list(argv) if argv is not None else None)


def load_environment(dotenv_path: Path | None) -> None:
    """Load ``WCHECK_*`` settings from a .env file.

    An explicit file overrides variables already set; the default ``.env`` in
    the working directory does not.
    """
    if dotenv_path is not None:
        if not dotenv_path.is_file():
            raise ConfigurationError(f"dotenv file not found: {dotenv_path}")
        load_dotenv(dotenv_path=str(dotenv_path), override=True)
        return
    load_dotenv(find_dotenv(usecwd=True))


def create_configuration(
    args: argparse.Namespace, environ: Mapping[str, str] | None = None
) -> CheckConfiguration:
    """Build the run configuration from parsed arguments and the environment."""
    reserved_words = None
    if not args.no_reserved_words:
        reserved_words = args.reserved_words or default_reserved_words_file(environ)

    dictionary_files = build_dictionary_paths(
        args.dictionary_variant or default_dictionary_variant(environ),
        dictionary_dir=default_dictionary_dir(environ),
        reserved_words=reserved_words,
        extra=args.extra_dictionaries or [],
    )

    return CheckConfiguration(
        targets=list(args.paths),
        recursive=args.recursive,
        dictionary_files=dictionary_files,
        baseline_file=args.baseline_file or default_baseline_file(environ),
        generate_baseline=args.generate_baseline,
        color=not args.no_color and sys.stdout.isatty(),
        report_path=args.report,
    )


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        load_environment(args.dotenv)
        config = create_configuration(args, os.environ)
        result = run_checks(config)
    except WordCheckError as exc:
        LOGGER.error("%s", exc)
        return exc.exit_code

    if result.misspelled_count > ExitCode.MAX_MISSPELLING_COUNT:
        LOGGER.warning(
            "Found %d misspelled word(s); exit status capped at %d",
            result.misspelled_count,
            int(ExitCode.MAX_MISSPELLING_COUNT),
        )
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
