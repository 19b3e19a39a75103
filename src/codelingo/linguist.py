"""Library entry point.

Wires the knowledge base, exclusion filter, strategy pipeline and
classifier together from one configuration object.
"""

from collections.abc import Callable, Iterable
from pathlib import PurePath

from loguru import logger

from codelingo.classifier.bayes import Classifier
from codelingo.config.models import Config
from codelingo.filters.exclusion import ExclusionFilter
from codelingo.knowledge.base import KnowledgeBase
from codelingo.knowledge.loader import load_knowledge_base
from codelingo.models.file_info import FileInfo
from codelingo.models.report import AggregateReport
from codelingo.models.results import IdentificationResult
from codelingo.services.aggregator import Aggregator
from codelingo.services.content import ContentProvider
from codelingo.strategies.pipeline import StrategyPipeline
from codelingo.utils.paths import to_posix


class Linguist:
    """Language identification and statistics.

    Every component is immutable after construction, so one instance
    can serve any number of threads.

    Attributes:
        config: Active configuration.
        knowledge_base: Language definitions.
        exclusion_filter: Statistics exclusion policy.
        classifier: Fallback classifier, None when disabled.
        pipeline: Identification pipeline.
        aggregator: Tree statistics builder.
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        config: Config | None = None,
    ) -> None:
        """Initialize from an already built knowledge base.

        Args:
            knowledge_base: Language definitions.
            config: Configuration (defaults when None).
        """
        self.config = config or Config()
        self.knowledge_base = knowledge_base
        self.exclusion_filter = ExclusionFilter(knowledge_base.exclusion_rules, self.config.filter)

        classifier_config = self.config.classifier
        self.classifier: Classifier | None = None
        if classifier_config.enabled and knowledge_base.has_classifier_data:
            self.classifier = Classifier(
                knowledge_base,
                smoothing=classifier_config.smoothing,
                max_tokens=classifier_config.max_tokens,
            )

        self.pipeline = StrategyPipeline(knowledge_base, self.classifier)
        self.aggregator = Aggregator(
            self.pipeline,
            self.exclusion_filter,
            max_bytes=self.config.sampling.max_bytes,
            config=self.config.analysis,
        )

    @classmethod
    def from_config(cls, config: Config | None = None) -> "Linguist":
        """Build a Linguist, loading definitions as configured.

        Raises:
            MalformedDefinitionError: If the definitions are invalid.
        """
        config = config or Config()
        knowledge_base = load_knowledge_base(
            config.definitions.directory,
            max_tokens=config.classifier.max_tokens,
        )
        logger.debug("Loaded {} language definitions", len(knowledge_base))
        return cls(knowledge_base, config)

    def identify_file(self, path: str | PurePath, content: bytes | str) -> IdentificationResult:
        """Identify the language of one file.

        Exclusion rules do not apply here: a vendored file is still
        identified.

        Args:
            path: File path (only the name and suffixes are used).
            content: Full content or a prefix of it.

        Returns:
            A match, or a NoMatch result with its reason.
        """
        data = content.encode("utf-8") if isinstance(content, str) else content
        file = FileInfo.from_bytes(to_posix(path), data, self.config.sampling.max_bytes)
        return self.pipeline.identify(file)

    def is_vendored(self, path: str | PurePath) -> bool:
        """Return True if a path is excluded from statistics."""
        return self.exclusion_filter.is_excluded(path)

    def analyze_tree(
        self,
        paths: Iterable[str | PurePath],
        content_provider: ContentProvider | Callable[[str], bytes],
    ) -> AggregateReport:
        """Aggregate language statistics over a set of files.

        Args:
            paths: File paths to analyze.
            content_provider: Provider, or a plain ``path -> bytes`` function.

        Returns:
            Aggregate report.
        """
        return self.aggregator.analyze((to_posix(path) for path in paths), content_provider)
