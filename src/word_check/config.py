"""Run configuration and environment-driven defaults.

Defaults can be overridden through ``WCHECK_*`` environment variables, which
the CLI loads from a ``.env`` file before building the configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping

from .baseline import DEFAULT_BASELINE_FILE

ENV_PREFIX = "WCHECK"

DEFAULT_DICTIONARY_DIR = Path("/usr/share/dict")
DEFAULT_DICTIONARY_VARIANT = "british-english"
DEFAULT_RESERVED_WORDS_FILE = DEFAULT_DICTIONARY_DIR / "wcheck-reserved-words"

# Regional word lists shipped by the distribution ``wbritish``/``wamerican`` packages.
DICTIONARY_VARIANTS = ("british-english", "american-english", "canadian-english")


@dataclass
class CheckConfiguration:
    """Everything a word-check run needs."""

    # Input
    targets: list[Path]
    recursive: bool = False

    # Dictionaries, merged in order
    dictionary_files: list[Path] = field(default_factory=list)

    # Baseline
    baseline_file: Path = DEFAULT_BASELINE_FILE
    generate_baseline: bool = False

    # Output
    color: bool = False
    report_path: Path | None = None


def env_value(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return ``WCHECK_<name>`` from the environment, or ``None`` when unset/blank."""
    source = os.environ if environ is None else environ
    value = source.get(f"{ENV_PREFIX}_{name}", "").strip()
    return value or None


def default_dictionary_dir(environ: Mapping[str, str] | None = None) -> Path:
    value = env_value("DICTIONARY_DIR", environ)
    return Path(value) if value else DEFAULT_DICTIONARY_DIR


def default_dictionary_variant(environ: Mapping[str, str] | None = None) -> str:
    return env_value("DICTIONARY_VARIANT", environ) or DEFAULT_DICTIONARY_VARIANT


def default_reserved_words_file(environ: Mapping[str, str] | None = None) -> Path:
    value = env_value("RESERVED_WORDS", environ)
    return Path(value) if value else DEFAULT_RESERVED_WORDS_FILE


def default_baseline_file(environ: Mapping[str, str] | None = None) -> Path:
    value = env_value("BASELINE_FILE", environ)
    return Path(value) if value else DEFAULT_BASELINE_FILE


def resolve_dictionary_variant(variant: str, dictionary_dir: Path) -> Path:
    """Map a variant name (``british-english``) or explicit path to a word list."""
    candidate = Path(variant)
    if candidate.is_absolute() or len(candidate.parts) > 1:
        return candidate
    return dictionary_dir / variant


def build_dictionary_paths(
    variant: str,
    *,
    dictionary_dir: Path,
    reserved_words: Path | None,
    extra: Iterable[Path] = (),
) -> list[Path]:
    """Return the word lists to merge: regional list, reserved words, extras."""
    paths = [resolve_dictionary_variant(variant, dictionary_dir)]
    if reserved_words is not None:
        paths.append(reserved_words)
    paths.extend(Path(path) for path in extra)
    return paths
