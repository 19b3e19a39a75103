"""Statistical fallback classifier.

Scores the candidates left by the rule pipeline against their
token tables and picks the most probable one. Only candidates that
survived the earlier strategies are ever compared.
"""

import math
from typing import TYPE_CHECKING

from loguru import logger

from codelingo.classifier.tokenizer import DEFAULT_MAX_TOKENS, tokenize
from codelingo.models.candidates import CandidateSet
from codelingo.models.language import LanguageDefinition

if TYPE_CHECKING:
    from codelingo.knowledge.base import KnowledgeBase

DEFAULT_SMOOTHING = 1.0


class Classifier:
    """Naive Bayes style classifier over per-language token tables.

    Attributes:
        knowledge_base: Source of the classifier models and vocabulary size.
        smoothing: Additive smoothing constant.
        max_tokens: Bound on tokens read from the content sample.
    """

    def __init__(
        self,
        knowledge_base: "KnowledgeBase",
        smoothing: float = DEFAULT_SMOOTHING,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        if smoothing <= 0:
            raise ValueError("smoothing must be positive")
        self.knowledge_base = knowledge_base
        self.smoothing = smoothing
        self.max_tokens = max_tokens

    def scores(
        self,
        content: str,
        candidates: CandidateSet,
    ) -> list[tuple[LanguageDefinition, float]]:
        """
        Score every candidate that has a model.

        Args:
            content: Content sample.
            candidates: Languages still in play.

        Returns:
            (language, log-probability) pairs, best first. Ties are
            ordered by training size (larger first), then by name.
        """
        tokens = tokenize(content, self.max_tokens)
        vocabulary_size = self.knowledge_base.vocabulary_size

        scored: list[tuple[LanguageDefinition, float, int]] = []
        for language in candidates:
            model = self.knowledge_base.classifier_model(language.name)
            if model is None:
                continue
            score = model.log_probability(tokens, self.smoothing, vocabulary_size)
            scored.append((language, score, model.total))

        scored.sort(key=lambda item: (-item[1], -item[2], item[0].name))
        return [(language, score) for language, score, _ in scored]

    def classify(self, content: str, candidates: CandidateSet) -> LanguageDefinition | None:
        """
        Pick the most probable candidate.

        Args:
            content: Content sample.
            candidates: Languages still in play.

        Returns:
            The winning language, or None when no candidate has a model.
        """
        ranked = self.scores(content, candidates)
        if not ranked:
            logger.debug("No classifier model for candidates {}", candidates.names())
            return None

        best_score = ranked[0][1]
        tied = [
            language
            for language, score in ranked
            if math.isclose(score, best_score, rel_tol=1e-12, abs_tol=1e-12)
        ]
        winner = min(
            tied,
            key=lambda language: (-self._training_total(language), language.name),
        )
        logger.debug(
            "Classifier picked {} from {} (score={:.3f}, tied={})",
            winner.name,
            candidates.names(),
            best_score,
            len(tied),
        )
        return winner

    def _training_total(self, language: LanguageDefinition) -> int:
        model = self.knowledge_base.classifier_model(language.name)
        return model.total if model is not None else 0
