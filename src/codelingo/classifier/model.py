"""Per-language token frequency tables."""

import math
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from codelingo.classifier.tokenizer import DEFAULT_MAX_TOKENS, tokenize


@dataclass(frozen=True, eq=False)
class ClassifierModel:
    """
    Token counts observed in one language's training data.

    Attributes:
        language: Language name the table belongs to.
        counts: Read-only token -> frequency mapping.
        total: Sum of all frequencies.
    """

    language: str
    counts: Mapping[str, int]
    total: int

    @classmethod
    def from_counts(cls, language: str, counts: Mapping[str, int]) -> "ClassifierModel":
        """
        Build a model from a precomputed table.

        Raises:
            ValueError: If a count is negative.
        """
        table = {token: int(count) for token, count in counts.items() if count}
        negative = [token for token, count in table.items() if count < 0]
        if negative:
            raise ValueError(f"Negative token counts for {language}: {sorted(negative)[:5]}")
        return cls(language=language, counts=MappingProxyType(table), total=sum(table.values()))

    @classmethod
    def train(
        cls,
        language: str,
        samples: Iterable[str],
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> "ClassifierModel":
        """
        Build a model by tokenizing sample texts.

        Args:
            language: Language name.
            samples: Texts written in the language.
            max_tokens: Token bound applied per sample.

        Returns:
            Trained model.
        """
        counter: Counter[str] = Counter()
        for sample in samples:
            counter.update(tokenize(sample, max_tokens))
        return cls.from_counts(language, counter)

    def count(self, token: str) -> int:
        """Frequency of a token (0 if unseen)."""
        return self.counts.get(token, 0)

    def log_probability(
        self,
        tokens: Iterable[str],
        smoothing: float,
        vocabulary_size: int,
    ) -> float:
        """
        Laplace smoothed log-probability of a token sequence.

        Each token contributes
        ``log((count + smoothing) / (total + smoothing * vocabulary_size))``.
        """
        frequencies = Counter(tokens)
        if not frequencies:
            return 0.0

        denominator = math.log(self.total + smoothing * max(vocabulary_size, 1))
        score = 0.0
        for token, occurrences in frequencies.items():
            score += occurrences * (math.log(self.count(token) + smoothing) - denominator)
        return score
