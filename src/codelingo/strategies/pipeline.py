"""Identification cascade.

Runs the strategies from most to least authoritative, narrowing one
candidate set. A stage leaving a single candidate decides the
language; the statistical classifier is consulted only when rules
leave several.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from loguru import logger

from codelingo.models.file_info import FileInfo
from codelingo.models.results import IdentificationResult, NoMatchReason, StrategyName
from codelingo.strategies.base import Strategy
from codelingo.strategies.extension import ExtensionStrategy
from codelingo.strategies.filename import FilenameStrategy
from codelingo.strategies.heuristics import HeuristicsStrategy
from codelingo.strategies.modeline import ModelineStrategy
from codelingo.strategies.shebang import ShebangStrategy

if TYPE_CHECKING:
    from codelingo.classifier.bayes import Classifier
    from codelingo.knowledge.base import KnowledgeBase


class StrategyPipeline:
    """Ordered strategy pipeline.

    Attributes:
        knowledge_base: Language definitions.
        classifier: Fallback classifier, or None to disable it.
        filename: Authoritative first stage, applied before the binary check.
        strategies: Remaining stages in evaluation order.
    """

    def __init__(
        self,
        knowledge_base: "KnowledgeBase",
        classifier: "Classifier | None" = None,
        strategies: Sequence[Strategy] | None = None,
    ) -> None:
        """Initialize pipeline.

        Args:
            knowledge_base: Language definitions.
            classifier: Fallback classifier for ambiguous candidates.
            strategies: Stages run after the filename stage; defaults to
                shebang, extension, modeline and heuristics.
        """
        self.knowledge_base = knowledge_base
        self.classifier = classifier
        self.filename = FilenameStrategy(knowledge_base)
        if strategies is None:
            strategies = (
                ShebangStrategy(knowledge_base),
                ExtensionStrategy(knowledge_base),
                ModelineStrategy(knowledge_base),
                HeuristicsStrategy(knowledge_base),
            )
        self.strategies: tuple[Strategy, ...] = tuple(strategies)

    def identify(self, file: FileInfo) -> IdentificationResult:
        """Identify the language of a file.

        Args:
            file: Path and bounded content sample.

        Returns:
            A match naming the deciding strategy, or a NoMatch with a
            reason and the surviving candidates.
        """
        candidates = self.filename.narrow(file, self.knowledge_base.all())
        language = candidates.single()
        if language is not None:
            return IdentificationResult.match(file.path, language.name, StrategyName.FILENAME)

        if file.is_binary:
            logger.debug("Binary content: {}", file.path)
            return IdentificationResult.no_match(file.path, NoMatchReason.BINARY)

        for strategy in self.strategies:
            candidates = strategy.narrow(file, candidates)
            language = candidates.single()
            if language is not None:
                return IdentificationResult.match(file.path, language.name, strategy.name)

        if candidates.is_universe:
            return IdentificationResult.no_match(file.path, NoMatchReason.UNKNOWN)

        if self.classifier is not None:
            language = self.classifier.classify(file.content, candidates)
            if language is not None:
                return IdentificationResult.match(
                    file.path, language.name, StrategyName.CLASSIFIER
                )

        logger.debug("Ambiguous {}: {}", file.path, candidates.names())
        return IdentificationResult.no_match(
            file.path, NoMatchReason.AMBIGUOUS, candidates.names()
        )
