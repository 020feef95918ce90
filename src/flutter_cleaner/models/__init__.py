"""flutter-cleaner data models."""

from flutter_cleaner.models.ecosystem import FLUTTER, Ecosystem
from flutter_cleaner.models.project import Project
from flutter_cleaner.models.clean_result import CleanResult, ProjectOutcome

__all__ = [
    "FLUTTER",
    "CleanResult",
    "Ecosystem",
    "Project",
    "ProjectOutcome",
]
