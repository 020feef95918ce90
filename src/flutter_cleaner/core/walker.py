"""Lazy depth-first directory traversal."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

log = logging.getLogger(__name__)


def is_skipped(name: str, skip_dirs: Iterable[str] = ("node_modules",)) -> bool:
    """Whether a directory named *name* should not be descended into."""
    return name.startswith(".") or name in skip_dirs


def iter_directories(
    root: Path | str,
    recursive: bool = True,
    skip_dirs: Iterable[str] = ("node_modules",),
) -> Iterator[Path]:
    """Yield *root* and, if *recursive*, every directory below it.

    Directories are yielded depth-first in pre-order, children sorted by
    name. Hidden directories and names in *skip_dirs* are pruned together
    with their subtree. Symlinks are never followed. A subdirectory that
    cannot be listed is skipped and the walk continues with its siblings.
    """
    root = Path(root)
    skip = frozenset(skip_dirs)
    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        yield current
        if not recursive:
            return
        try:
            with os.scandir(current) as it:
                children = sorted(
                    entry.name
                    for entry in it
                    if _is_real_dir(entry) and not is_skipped(entry.name, skip)
                )
        except OSError as exc:
            log.debug("Cannot list %s: %s", current, exc)
            continue
        # Reversed so the smallest name is popped first.
        stack.extend(current / name for name in reversed(children))


def _is_real_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
