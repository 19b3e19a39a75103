"""Language statistics over many files.

Evaluates files on a worker pool and accumulates the outcomes into an
AggregateReport. Evaluation is a pure function of a file's path and
content; only the accumulation step touches shared state.
"""

import threading
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from loguru import logger

from codelingo.config.models import AnalysisConfig
from codelingo.errors import UnreadableContentError
from codelingo.filters.exclusion import ExclusionFilter
from codelingo.models.exclusion import ExclusionKind
from codelingo.models.file_info import FileInfo
from codelingo.models.report import AggregateReport, FileReport
from codelingo.models.results import IdentificationResult
from codelingo.services.content import ContentProvider, as_content_provider
from codelingo.strategies.pipeline import StrategyPipeline
from codelingo.utils.paths import to_posix


@dataclass(frozen=True)
class FileOutcome:
    """Result of evaluating one file."""

    path: str
    size: int = 0
    excluded_as: ExclusionKind | None = None
    result: IdentificationResult | None = None
    error: UnreadableContentError | None = None


class Aggregator:
    """Builds aggregate language reports.

    Attributes:
        pipeline: Identification pipeline.
        exclusion_filter: Statistics exclusion policy.
        max_bytes: Content sampling bound.
        config: Analysis behavior.
    """

    def __init__(
        self,
        pipeline: StrategyPipeline,
        exclusion_filter: ExclusionFilter,
        max_bytes: int,
        config: AnalysisConfig | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.exclusion_filter = exclusion_filter
        self.max_bytes = max_bytes
        self.config = config or AnalysisConfig()
        self._lock = threading.Lock()

    def analyze(
        self,
        paths: Iterable[str],
        content_provider: ContentProvider | Callable[[str], bytes],
    ) -> AggregateReport:
        """Identify a set of files and total their bytes per language.

        Files are evaluated concurrently but merged in input order, so
        the same input always yields the same report.

        Args:
            paths: File paths, relative to whatever the provider reads from.
            content_provider: Provider, or a plain ``path -> bytes`` function.

        Returns:
            Aggregate report.

        Raises:
            UnreadableContentError: If a file cannot be read and
                ``fail_on_unreadable`` is set.
        """
        provider = as_content_provider(content_provider)
        ordered = [to_posix(path) for path in paths]
        report = AggregateReport()

        logger.info("Analyzing {} files with {} workers", len(ordered), self.config.max_workers)
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            for outcome in executor.map(lambda path: self.evaluate(path, provider), ordered):
                self.merge(report, outcome)

        logger.info(
            "Analysis complete: {} languages, {} excluded, {} unknown, {} unreadable",
            len(report.languages),
            report.excluded.files,
            report.unknown.files,
            len(report.unreadable),
        )
        return report

    def evaluate(self, path: str, provider: ContentProvider) -> FileOutcome:
        """Read, filter and identify one file. Never mutates shared state."""
        try:
            content = provider.read(path)
        except UnreadableContentError as e:
            logger.warning("Unreadable file {}: {}", path, e)
            return FileOutcome(path=path, error=e)

        excluded_as = self.exclusion_filter.excluded_as(path)
        if excluded_as is not None and not self.config.identify_excluded:
            return FileOutcome(path=path, size=content.size, excluded_as=excluded_as)

        file = FileInfo.from_bytes(path, content.data, self.max_bytes, size=content.size)
        return FileOutcome(
            path=path,
            size=content.size,
            excluded_as=excluded_as,
            result=self.pipeline.identify(file),
        )

    def merge(self, report: AggregateReport, outcome: FileOutcome) -> None:
        """Accumulate one outcome into a report."""
        with self._lock:
            if outcome.error is not None:
                if self.config.fail_on_unreadable:
                    raise outcome.error
                report.unreadable.append(outcome.path)
                return

            if outcome.excluded_as is not None:
                report.excluded.add(outcome.size)
            elif outcome.result is not None and outcome.result.language is not None:
                report.add_language(outcome.result.language, outcome.size)
            else:
                report.unknown.add(outcome.size)

            if self.config.include_files:
                report.files.append(
                    FileReport(
                        path=outcome.path,
                        size=outcome.size,
                        excluded_as=outcome.excluded_as,
                        result=outcome.result,
                    )
                )
