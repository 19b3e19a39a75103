"""Identification result models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class StrategyName(StrEnum):
    """Stage of the cascade that decided a file's language."""

    FILENAME = "filename"
    SHEBANG = "shebang"
    EXTENSION = "extension"
    MODELINE = "modeline"
    HEURISTICS = "heuristics"
    CLASSIFIER = "classifier"


class NoMatchReason(StrEnum):
    """Why no language could be determined."""

    UNKNOWN = "unknown"
    AMBIGUOUS = "ambiguous"
    BINARY = "binary"


class IdentificationResult(BaseModel):
    """
    Outcome of identifying a single file.

    Either ``language`` is set (a match) or ``reason`` explains the
    NoMatch. ``candidates`` lists the languages still considered
    when the pipeline stopped, sorted by name.
    """

    path: str
    language: str | None = None
    strategy: StrategyName | None = None
    reason: NoMatchReason | None = None
    candidates: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_match(self) -> bool:
        """True if a language was determined."""
        return self.language is not None

    @classmethod
    def match(cls, path: str, language: str, strategy: StrategyName) -> "IdentificationResult":
        """Build a successful result."""
        return cls(path=path, language=language, strategy=strategy, candidates=[language])

    @classmethod
    def no_match(
        cls,
        path: str,
        reason: NoMatchReason,
        candidates: list[str] | None = None,
    ) -> "IdentificationResult":
        """Build a NoMatch result."""
        return cls(path=path, reason=reason, candidates=sorted(candidates or []))
