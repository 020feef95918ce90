"""Project root detection."""

from __future__ import annotations

import logging
from pathlib import Path

from flutter_cleaner.models.ecosystem import FLUTTER, Ecosystem

log = logging.getLogger(__name__)


def is_project(path: Path | str, ecosystem: Ecosystem = FLUTTER) -> bool:
    """Check whether *path* is a project root of *ecosystem*.

    The manifest is not parsed; its text only has to contain one of the
    ecosystem markers, so a marker inside a comment also matches.
    """
    manifest = Path(path) / ecosystem.manifest
    if not manifest.is_file():
        return False
    try:
        content = manifest.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.debug("Cannot read %s: %s", manifest, exc)
        return False
    return any(marker in content for marker in ecosystem.markers)
