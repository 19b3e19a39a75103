"""Tree analysis services."""

from codelingo.services.aggregator import Aggregator, FileOutcome
from codelingo.services.content import (
    CallableContentProvider,
    ContentProvider,
    FileContent,
    FilesystemContentProvider,
    as_content_provider,
)
from codelingo.services.scanner import TreeScanner

__all__ = [
    "Aggregator",
    "CallableContentProvider",
    "ContentProvider",
    "FileContent",
    "FileOutcome",
    "FilesystemContentProvider",
    "TreeScanner",
    "as_content_provider",
]
