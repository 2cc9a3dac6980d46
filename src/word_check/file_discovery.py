"""Resolve command-line targets into the files to check."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .errors import InputError

LOGGER = logging.getLogger(__name__)


def iter_target_files(
    paths: Iterable[Path],
    *,
    recursive: bool = False,
    skip: Iterable[Path] = (),
) -> Iterator[Path]:
    """Yield the files named by ``paths`` in order.

    Directories are walked (sorted) only when ``recursive`` is set. Files found
    while walking that resolve to one of ``skip`` (the baseline file) are left
    out; files named explicitly are always yielded.

    Raises:
        InputError: For a missing path or a directory without ``recursive``.
    """
    skipped = {Path(path).resolve() for path in skip}

    for path in paths:
        path = Path(path)
        if path.is_dir():
            if not recursive:
                raise InputError(f"{path} is a directory; pass --recursive to check it")
            for child in sorted(path.rglob("*")):
                if not child.is_file():
                    continue
                if child.resolve() in skipped:
                    LOGGER.debug("Skipping baseline file %s", child)
                    continue
                yield child
        elif path.exists():
            yield path
        else:
            raise InputError(f"File not found: {path}")
