"""Project dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Project:
    """A detected project root and the size of its build directory at scan time."""

    path: Path
    build_size: int
