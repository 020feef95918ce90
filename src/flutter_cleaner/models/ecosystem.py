"""Build ecosystem description."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Ecosystem:
    """Everything needed to recognize and clean projects of one build ecosystem."""

    name: str
    manifest: str
    markers: tuple[str, ...]
    build_dir: str
    skip_dirs: tuple[str, ...]
    clean_command: tuple[str, ...]

    def with_executable(self, executable: str) -> Ecosystem:
        """Return a copy that runs *executable* instead of the default one."""
        return replace(self, clean_command=(executable, *self.clean_command[1:]))

    def with_skip_dirs(self, extra: list[str] | tuple[str, ...]) -> Ecosystem:
        """Return a copy that also skips the given directory names."""
        merged = tuple(dict.fromkeys((*self.skip_dirs, *extra)))
        return replace(self, skip_dirs=merged)


FLUTTER = Ecosystem(
    name="Flutter",
    manifest="pubspec.yaml",
    markers=("flutter:", "sdk: flutter"),
    build_dir="build",
    skip_dirs=("node_modules",),
    clean_command=("flutter", "clean"),
)
