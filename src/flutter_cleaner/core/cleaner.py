"""Parallel execution of the external clean command."""

from __future__ import annotations

import logging
import shutil
import subprocess
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Sequence

from flutter_cleaner.models.clean_result import CleanResult, ProjectOutcome
from flutter_cleaner.models.ecosystem import FLUTTER, Ecosystem
from flutter_cleaner.models.project import Project

log = logging.getLogger(__name__)

ProgressCallback = Callable[[Path, str], None]  # (project path, status)
OutcomeCallback = Callable[[ProjectOutcome], None]


def run_clean_command(path: Path, command: Sequence[str]) -> subprocess.CompletedProcess:
    """Run *command* with *path* as the working directory.

    The executable is looked up on PATH first so wrapper scripts such as
    ``flutter.bat`` resolve without a shell.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    executable = shutil.which(command[0])
    if executable is None:
        raise FileNotFoundError(f"Command not found: {command[0]}")
    return subprocess.run(
        [executable, *command[1:]],
        cwd=path,
        capture_output=True,
        encoding="utf-8",
        errors="replace",
    )


def clean_project(project: Project, ecosystem: Ecosystem = FLUTTER) -> ProjectOutcome:
    """Run the clean command for one project and report how it went."""
    try:
        proc = run_clean_command(project.path, ecosystem.clean_command)
    except (OSError, subprocess.SubprocessError) as exc:
        return ProjectOutcome(project=project, success=False, error=str(exc))
    except Exception as exc:
        log.exception("Unexpected error cleaning %s", project.path)
        return ProjectOutcome(project=project, success=False, error=str(exc))
    if proc.returncode != 0:
        error = (proc.stderr or "").strip() or f"exit status {proc.returncode}"
        return ProjectOutcome(project=project, success=False, error=error)
    return ProjectOutcome(project=project, success=True)


def clean_projects(
    projects: list[Project],
    ecosystem: Ecosystem = FLUTTER,
    on_progress: ProgressCallback | None = None,
    on_result: OutcomeCallback | None = None,
) -> CleanResult:
    """Clean all *projects* concurrently and aggregate the outcomes.

    Every project gets its own worker, there is no cap. Workers only return
    a ProjectOutcome; the counters are updated on the calling thread as
    futures complete, so concurrent completions cannot lose an update.

    Args:
        projects: Confirmed projects to clean.
        ecosystem: Supplies the clean command.
        on_progress: Optional callback fired when a project starts cleaning.
        on_result: Optional callback fired for each outcome, in completion order.

    Returns:
        CleanResult once every task has finished.
    """
    if not projects:
        return CleanResult()

    def _clean(project: Project) -> ProjectOutcome:
        if on_progress:
            on_progress(project.path, "cleaning")
        log.debug("Running %s in %s", " ".join(ecosystem.clean_command), project.path)
        return clean_project(project, ecosystem)

    cleaned = 0
    freed = 0
    with ThreadPoolExecutor(max_workers=len(projects)) as executor:
        futures = [executor.submit(_clean, project) for project in projects]
        for future in as_completed(futures):
            outcome = future.result()
            if outcome.success:
                cleaned += 1
                freed += outcome.project.build_size
                log.info("Cleaned %s (%d bytes)", outcome.project.path, outcome.project.build_size)
            else:
                log.error("Failed to clean %s", outcome.project.path)
                log.debug("Clean error for %s: %s", outcome.project.path, outcome.error)
            if on_result:
                on_result(outcome)

    return CleanResult(
        projects_found=len(projects),
        projects_cleaned=cleaned,
        space_freed=freed,
    )
