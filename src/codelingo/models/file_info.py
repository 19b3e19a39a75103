"""File information consumed by the identification strategies."""

from dataclasses import dataclass
from functools import cached_property
from pathlib import PurePosixPath

# Same window git uses to decide whether a blob is binary.
BINARY_SNIFF_BYTES = 8000


@dataclass(frozen=True)
class FileInfo:
    """A file path together with a bounded sample of its content.

    Attributes:
        path: POSIX style path as given by the caller.
        content: Decoded content sample (at most the sampling bound).
        size: Size of the whole file in bytes.
        is_binary: True if the sample contains a NUL byte.
    """

    path: str
    content: str
    size: int
    is_binary: bool = False

    @classmethod
    def from_bytes(
        cls,
        path: str,
        data: bytes,
        max_bytes: int,
        size: int | None = None,
    ) -> "FileInfo":
        """
        Build FileInfo from raw bytes.

        Only the first max_bytes bytes are kept, so heuristics and
        the classifier always see the same sample.

        Args:
            path: File path.
            data: Raw content (full or already a prefix).
            max_bytes: Sampling bound.
            size: Real file size when data is only a prefix.

        Returns:
            FileInfo instance.
        """
        sample = data[:max_bytes]
        return cls(
            path=str(path).replace("\\", "/"),
            content=sample.decode("utf-8", errors="replace"),
            size=len(data) if size is None else size,
            is_binary=b"\x00" in sample[:BINARY_SNIFF_BYTES],
        )

    @cached_property
    def basename(self) -> str:
        """Final path component."""
        return PurePosixPath(self.path).name

    @cached_property
    def extensions(self) -> tuple[str, ...]:
        """All dotted suffixes, longest first.

        "foo.d.ts" gives (".d.ts", ".ts"); ".bashrc" gives (".bashrc",).
        """
        _, *segments = self.basename.lower().split(".")
        suffixes = ("." + ".".join(segments[index:]) for index in range(len(segments)))
        return tuple(suffix for suffix in suffixes if suffix != "." and not suffix.endswith("."))

    @cached_property
    def lines(self) -> list[str]:
        """Content split into lines without line terminators."""
        return self.content.splitlines()

    @property
    def first_line(self) -> str:
        """First line of the content, or an empty string."""
        return self.lines[0] if self.lines else ""
