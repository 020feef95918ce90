"""Cleaning result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from flutter_cleaner.models.project import Project


@dataclass(frozen=True, slots=True)
class ProjectOutcome:
    """Result of running the clean command in a single project.

    ``error`` carries the captured stderr for a non-zero exit, or the
    exception text when the command could not be started.
    """

    project: Project
    success: bool
    error: str = ""


@dataclass(frozen=True, slots=True)
class CleanResult:
    """Aggregate result of a cleaning run."""

    projects_found: int = 0
    projects_cleaned: int = 0
    space_freed: int = 0
