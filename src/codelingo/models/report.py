"""Aggregate statistics models."""

from pydantic import BaseModel, Field

from codelingo.models.exclusion import ExclusionKind
from codelingo.models.results import IdentificationResult


class LanguageStats(BaseModel):
    """Accumulated totals for one language (or bucket)."""

    bytes: int = 0
    files: int = 0

    def add(self, size: int) -> None:
        """Account for one more file of the given size."""
        self.bytes += size
        self.files += 1


class FileReport(BaseModel):
    """Per-file outcome recorded when file details are requested."""

    path: str
    size: int
    excluded_as: ExclusionKind | None = None
    result: IdentificationResult | None = None


class AggregateReport(BaseModel):
    """
    Language totals for a set of files.

    Only the aggregator mutates a report, one accumulation per file.
    Files that could not be identified are counted in ``unknown``;
    files excluded by policy are counted in ``excluded`` and never
    contribute to ``languages``.
    """

    languages: dict[str, LanguageStats] = Field(default_factory=dict)
    unknown: LanguageStats = Field(default_factory=LanguageStats)
    excluded: LanguageStats = Field(default_factory=LanguageStats)
    unreadable: list[str] = Field(default_factory=list)
    files: list[FileReport] = Field(default_factory=list)

    def add_language(self, language: str, size: int) -> None:
        """Add a file's bytes to a resolved language."""
        self.languages.setdefault(language, LanguageStats()).add(size)

    @property
    def total_bytes(self) -> int:
        """Bytes attributed to resolved languages."""
        return sum(stats.bytes for stats in self.languages.values())

    def sorted_languages(self) -> list[tuple[str, LanguageStats]]:
        """Languages ordered by byte count (descending), then name."""
        return sorted(self.languages.items(), key=lambda item: (-item[1].bytes, item[0]))

    def percentages(self) -> dict[str, float]:
        """Share of resolved bytes per language, rounded to two decimals."""
        total = self.total_bytes
        if total == 0:
            return {}
        return {
            name: round(stats.bytes * 100.0 / total, 2) for name, stats in self.sorted_languages()
        }

    @property
    def primary_language(self) -> str | None:
        """Language with the most bytes, if any."""
        ordered = self.sorted_languages()
        return ordered[0][0] if ordered else None
