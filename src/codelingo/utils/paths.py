"""Path utilities for path normalization and gitignore filtering."""

from pathlib import Path, PurePath
from typing import ClassVar

import pathspec


class GitignoreFilter:
    """
    Filter files based on .gitignore patterns.

    Uses pathspec library for gitignore-style pattern matching.
    Walks up from root to find the git root and loads
    .gitignore files from both locations.
    """

    # Patterns that are always excluded regardless of .gitignore
    BUILTIN_PATTERNS: ClassVar[list[str]] = [".git/", ".hg/", ".svn/"]

    def __init__(self, root: Path) -> None:
        """
        Initialize filter with the scanned root directory.

        Args:
            root: Directory being scanned.
        """
        self.root = root.resolve()
        self._git_root = self._find_git_root()
        self._specs: list[tuple[Path, pathspec.PathSpec]] = []
        self._load_gitignore()

    def _find_git_root(self) -> Path | None:
        """Find the git root by walking up from root."""
        current = self.root
        while True:
            if (current / ".git").exists():
                return current
            parent = current.parent
            if parent == current:
                return None
            current = parent

    def _load_gitignore(self) -> None:
        """Load .gitignore patterns from git root and scanned root."""
        dirs: list[Path] = []
        if self._git_root is not None:
            dirs.append(self._git_root)
        if self.root not in dirs:
            dirs.append(self.root)

        for base_dir in dirs:
            patterns = list(self.BUILTIN_PATTERNS)
            gitignore_path = base_dir / ".gitignore"
            if gitignore_path.exists():
                with gitignore_path.open() as f:
                    for raw_line in f:
                        stripped_line = raw_line.strip()
                        if stripped_line and not stripped_line.startswith("#"):
                            patterns.append(stripped_line)
            spec = pathspec.PathSpec.from_lines("gitignore", patterns)
            self._specs.append((base_dir, spec))

    def is_ignored(self, file_path: Path) -> bool:
        """
        Check if a file should be ignored.

        Args:
            file_path: Path to check (absolute, or relative to the root).

        Returns:
            True if the file matches a gitignore pattern.
        """
        if not self._specs:
            return False

        resolved = file_path if file_path.is_absolute() else self.root / file_path
        resolved = resolved.resolve()

        for base_dir, spec in self._specs:
            try:
                relative = resolved.relative_to(base_dir)
            except ValueError:
                continue
            if spec.match_file(relative.as_posix()):
                return True

        return False


def to_posix(path: str | PurePath) -> str:
    """
    Normalize a path to forward slashes without a leading "./".

    Args:
        path: Path as string or PurePath.

    Returns:
        POSIX style path string.
    """
    text = str(path).replace("\\", "/")
    while text.startswith("./"):
        text = text[2:]
    return text


def normalize_path(file_path: Path, root: Path) -> str:
    """
    Normalize a file path to be relative to a root directory.

    Args:
        file_path: Path to normalize.
        root: Root directory.

    Returns:
        Relative path as string with forward slashes.
    """
    try:
        resolved = file_path.resolve()
        relative = resolved.relative_to(root.resolve())
    except ValueError:
        # Already relative or not under root
        relative = file_path

    return to_posix(relative)
