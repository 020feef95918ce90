"""Read-only JSON settings store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from flutter_cleaner.models.ecosystem import FLUTTER, Ecosystem
from flutter_cleaner.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "flutter-cleaner"
_SETTINGS_FILE = "settings.json"


class Settings:
    """User settings backed by a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("flutter.executable")  # reads data["flutter"]["executable"]

    The file is never written; edit it by hand.
    """

    _instance: Settings | None = None

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @classmethod
    def instance(cls) -> Settings:
        """Return the singleton settings instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def ecosystem(self, base: Ecosystem = FLUTTER) -> Ecosystem:
        """Apply the configured overrides to *base*."""
        result = base
        executable = self.get("flutter.executable")
        if isinstance(executable, str) and executable:
            result = result.with_executable(executable)
        extra = self.get("scan.skip_dirs", [])
        if isinstance(extra, list) and extra:
            result = result.with_skip_dirs([str(name) for name in extra])
        return result

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: top level must be an object", self._path)
            return
        self._data = data
