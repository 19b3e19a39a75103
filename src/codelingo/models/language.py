"""Language definition models.

These objects are built once by the knowledge base and never
mutated afterwards, so they can be shared freely between threads.
"""

import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codelingo.classifier.model import ClassifierModel


class LanguageType(StrEnum):
    """Broad category of a language."""

    PROGRAMMING = "programming"
    MARKUP = "markup"
    DATA = "data"
    PROSE = "prose"


@dataclass(frozen=True)
class PatternClause:
    """A single content pattern of a heuristic rule.

    A negated clause holds when the pattern does not match, which is
    how a rule excludes content that would otherwise confirm it.
    """

    pattern: re.Pattern[str]
    negated: bool = False

    def holds(self, content: str) -> bool:
        """Check the clause against content."""
        found = self.pattern.search(content) is not None
        return not found if self.negated else found


@dataclass(frozen=True)
class HeuristicRule:
    """An ordered disambiguation rule scoped to a set of extensions.

    Attributes:
        order: Position of the rule inside its disambiguation block.
        extensions: Extensions of the block the rule belongs to.
        languages: Names of the languages the rule confirms.
        clauses: Conjunction of pattern clauses; empty means always match.
    """

    order: int
    extensions: tuple[str, ...]
    languages: tuple[str, ...]
    clauses: tuple[PatternClause, ...] = ()

    def matches(self, content: str) -> bool:
        """Return True if every clause holds for the content."""
        return all(clause.holds(content) for clause in self.clauses)


@dataclass(frozen=True)
class LanguageDefinition:
    """Identity and lookup keys of one known language.

    Equality and hashing only consider the identity fields, so the
    attached rules and classifier model can be arbitrary objects.
    """

    name: str
    type: LanguageType
    extensions: frozenset[str] = frozenset()
    filenames: frozenset[str] = frozenset()
    interpreters: frozenset[str] = frozenset()
    modeline_aliases: frozenset[str] = frozenset()
    aliases: tuple[str, ...] = ()
    color: str | None = None
    group: str | None = None
    heuristics: tuple[HeuristicRule, ...] = field(default=(), compare=False, repr=False)
    classifier: "ClassifierModel | None" = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.name
