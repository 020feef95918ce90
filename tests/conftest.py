"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from flutter_cleaner.settings import Settings

FLUTTER_PUBSPEC = """name: demo
environment:
  sdk: ">=3.0.0 <4.0.0"
dependencies:
  flutter:
    sdk: flutter
"""

DART_PUBSPEC = """name: plain_dart
environment:
  sdk: ">=3.0.0 <4.0.0"
dependencies:
  path: ^1.8.0
"""


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Keep the user's real settings file out of the tests."""
    config_dir = tmp_path / "xdg_config"
    config_dir.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
    monkeypatch.setattr(Settings, "_instance", None)
    return config_dir


def make_project(
    parent: Path,
    name: str,
    pubspec: str | None = FLUTTER_PUBSPEC,
    build_bytes: int | None = 0,
) -> Path:
    """Create a project directory with an optional manifest and build output.

    ``build_bytes=None`` leaves out the build directory entirely.
    """
    project = parent / name
    project.mkdir(parents=True, exist_ok=True)
    if pubspec is not None:
        (project / "pubspec.yaml").write_text(pubspec, encoding="utf-8")
    if build_bytes is not None:
        build = project / "build"
        build.mkdir(exist_ok=True)
        if build_bytes:
            (build / "app.dill").write_bytes(b"x" * build_bytes)
    return project


@pytest.fixture
def workspace(tmp_path):
    """Scan root, kept separate from the config directory."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root
