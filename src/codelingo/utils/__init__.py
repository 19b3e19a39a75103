"""codelingo utility modules."""

from codelingo.utils.logging import configure_logging
from codelingo.utils.paths import GitignoreFilter, normalize_path, to_posix

__all__ = [
    "GitignoreFilter",
    "configure_logging",
    "normalize_path",
    "to_posix",
]
