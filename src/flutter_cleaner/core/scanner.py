"""Project discovery."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from flutter_cleaner.core.detector import is_project
from flutter_cleaner.core.walker import iter_directories
from flutter_cleaner.models.ecosystem import FLUTTER, Ecosystem
from flutter_cleaner.models.project import Project
from flutter_cleaner.utils import dir_size

log = logging.getLogger(__name__)

ProgressCallback = Callable[[Path, str], None]  # (directory, status)


class FlutterCleanerError(Exception):
    """Base exception for flutter-cleaner."""


class DirectoryNotFoundError(FlutterCleanerError):
    """Raised when the scan root does not exist."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Directory does not exist: {path}")
        self.path = path


def scan_projects(
    root: Path | str,
    recursive: bool = True,
    verbose: bool = False,
    ecosystem: Ecosystem = FLUTTER,
    on_progress: ProgressCallback | None = None,
) -> list[Project]:
    """Find projects under *root* that have something to clean.

    A directory is returned when it is a project root and its build
    directory holds more than zero bytes. Results follow the walk order.

    Args:
        root: Directory to start from.
        recursive: Descend into subdirectories.
        verbose: Report ``"found"`` and ``"skipped"`` events to *on_progress*.
        ecosystem: Which projects to look for.
        on_progress: Optional callback for verbose progress updates.

    Raises:
        DirectoryNotFoundError: If *root* is not an existing directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise DirectoryNotFoundError(root)

    def report(path: Path, status: str) -> None:
        log.debug("%s: %s", status, path)
        if verbose and on_progress:
            on_progress(path, status)

    projects: list[Project] = []
    for directory in iter_directories(root, recursive=recursive, skip_dirs=ecosystem.skip_dirs):
        if not is_project(directory, ecosystem):
            continue
        report(directory, "found")
        size = dir_size(directory / ecosystem.build_dir)
        if size > 0:
            projects.append(Project(path=directory, build_size=size))
        else:
            report(directory, "skipped")

    log.info("Found %d %s project(s) to clean under %s", len(projects), ecosystem.name, root)
    return projects
