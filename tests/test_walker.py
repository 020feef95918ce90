"""Tests for directory traversal."""

from __future__ import annotations

import os

import pytest

from flutter_cleaner.core.walker import is_skipped, iter_directories


class TestIsSkipped:
    @pytest.mark.parametrize("name", [".git", ".dart_tool", "node_modules"])
    def test_skipped(self, name):
        assert is_skipped(name)

    @pytest.mark.parametrize("name", ["lib", "build", "packages", "node_modules_old"])
    def test_not_skipped(self, name):
        assert not is_skipped(name)


class TestIterDirectories:
    def test_root_first(self, workspace):
        (workspace / "a").mkdir()
        dirs = list(iter_directories(workspace))
        assert dirs[0] == workspace

    def test_non_recursive_yields_only_root(self, workspace):
        (workspace / "a" / "b").mkdir(parents=True)
        assert list(iter_directories(workspace, recursive=False)) == [workspace]

    def test_depth_first_sorted_order(self, workspace):
        for rel in ("b", "a/y", "a/x", "c"):
            (workspace / rel).mkdir(parents=True)
        names = [p.relative_to(workspace).as_posix() for p in iter_directories(workspace)]
        assert names == [".", "a", "a/x", "a/y", "b", "c"]

    def test_prunes_hidden_and_dependency_cache(self, workspace):
        (workspace / ".git" / "objects").mkdir(parents=True)
        (workspace / "node_modules" / "pkg").mkdir(parents=True)
        (workspace / "app" / "lib").mkdir(parents=True)
        names = {p.name for p in iter_directories(workspace)}
        assert ".git" not in names
        assert "objects" not in names
        assert "node_modules" not in names
        assert "pkg" not in names
        assert {"app", "lib"} <= names

    def test_custom_skip_dirs(self, workspace):
        (workspace / "vendor").mkdir()
        (workspace / "src").mkdir()
        names = {p.name for p in iter_directories(workspace, skip_dirs=("vendor",))}
        assert "vendor" not in names
        assert "src" in names

    def test_does_not_follow_symlinks(self, workspace):
        real = workspace / "real"
        real.mkdir()
        try:
            (real / "loop").symlink_to(workspace, target_is_directory=True)
        except OSError:
            pytest.skip("symlinks not supported")
        dirs = list(iter_directories(workspace))
        assert dirs == [workspace, real]

    def test_is_lazy(self, workspace):
        (workspace / "a").mkdir()
        it = iter_directories(workspace)
        assert next(it) == workspace
        # Created after the root was yielded but before it was listed.
        (workspace / "late").mkdir()
        assert {p.name for p in it} == {"a", "late"}

    @pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root ignores permissions")
    def test_unreadable_subdirectory_does_not_stop_walk(self, workspace):
        locked = workspace / "locked"
        (locked / "inner").mkdir(parents=True)
        (workspace / "open").mkdir()
        locked.chmod(0)
        try:
            names = {p.name for p in iter_directories(workspace)}
        finally:
            locked.chmod(0o755)
        assert {"locked", "open"} <= names
        assert "inner" not in names
