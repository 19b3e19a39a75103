"""Directory scanner for tree analysis.

Lists the files of a directory tree, honoring .gitignore files and
skipping version control metadata.
"""

import os
from collections.abc import Generator
from pathlib import Path

from loguru import logger

from codelingo.utils.paths import GitignoreFilter, normalize_path


class TreeScanner:
    """Walks a directory and yields relative POSIX paths.

    Attributes:
        root: Root directory being scanned.
        respect_gitignore: Whether .gitignore patterns are honored.
        gitignore_filter: Filter for ignored paths.
    """

    def __init__(self, root: Path, respect_gitignore: bool = True) -> None:
        """Initialize scanner.

        Args:
            root: Root directory to scan.
            respect_gitignore: Skip files matched by .gitignore patterns.
        """
        self.root = root.resolve()
        self.respect_gitignore = respect_gitignore
        self.gitignore_filter = GitignoreFilter(self.root)

    def iter_files(self) -> Generator[str, None, None]:
        """Iterate over regular files in sorted order.

        Yields:
            Paths relative to the root, with forward slashes.
        """
        for dirpath, dirnames, filenames in os.walk(self.root, onerror=self._on_error):
            current = Path(dirpath)
            dirnames[:] = sorted(
                name for name in dirnames if not self._skip_dir(current / name)
            )
            for name in sorted(filenames):
                file_path = current / name
                if file_path.is_symlink() or not file_path.is_file():
                    continue
                relative = normalize_path(file_path, self.root)
                if self.respect_gitignore and self.gitignore_filter.is_ignored(Path(relative)):
                    continue
                yield relative

    @staticmethod
    def _skip_dir(directory: Path) -> bool:
        return directory.is_symlink() or directory.name in {".git", ".hg", ".svn"}

    @staticmethod
    def _on_error(error: OSError) -> None:
        logger.warning("Cannot scan {}: {}", error.filename, error)
