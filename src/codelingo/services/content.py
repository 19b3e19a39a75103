"""Content providers used by tree analysis."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from codelingo.errors import UnreadableContentError


@dataclass(frozen=True)
class FileContent:
    """Bounded content sample of a file.

    Attributes:
        data: First bytes of the file (at most the provider's bound).
        size: Size of the whole file in bytes.
    """

    data: bytes
    size: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "FileContent":
        """Wrap complete in-memory content."""
        return cls(data=data, size=len(data))


@runtime_checkable
class ContentProvider(Protocol):
    """Source of file content for a path."""

    def read(self, path: str) -> FileContent:
        """
        Read a file.

        Raises:
            UnreadableContentError: If the content cannot be obtained.
        """
        ...


class FilesystemContentProvider:
    """Reads files below a root directory.

    Attributes:
        root: Directory that relative paths are resolved against.
        max_bytes: Number of leading bytes read from each file.
    """

    def __init__(self, root: Path, max_bytes: int) -> None:
        self.root = root
        self.max_bytes = max_bytes

    def read(self, path: str) -> FileContent:
        full_path = self.root / path
        try:
            with full_path.open("rb") as f:
                data = f.read(self.max_bytes)
            size = full_path.stat().st_size
        except OSError as e:
            raise UnreadableContentError(f"Cannot read {full_path}: {e}", path=path) from e
        return FileContent(data=data, size=size)


class CallableContentProvider:
    """Adapts a plain ``path -> bytes`` function to the provider protocol.

    OSError and lookup errors (missing keys of an in-memory mapping)
    raised by the function are reported as unreadable content.
    """

    def __init__(self, reader: Callable[[str], bytes]) -> None:
        self.reader = reader

    def read(self, path: str) -> FileContent:
        try:
            data = self.reader(path)
        except (OSError, LookupError) as e:
            raise UnreadableContentError(f"Cannot read {path}: {e}", path=path) from e
        return FileContent.from_bytes(data)


def as_content_provider(
    source: ContentProvider | Callable[[str], bytes],
) -> ContentProvider:
    """Return a provider for either a provider object or a plain function."""
    if isinstance(source, ContentProvider):
        return source
    return CallableContentProvider(source)
