"""Candidate language sets narrowed by the strategy pipeline."""

from collections.abc import Iterable, Iterator

from codelingo.models.language import LanguageDefinition


class CandidateSet:
    """
    Immutable set of languages still considered for a file.

    ``is_universe`` marks the initial "all languages" set, before any
    strategy expressed an opinion. Iteration is ordered by name so
    every consumer sees the same order.
    """

    __slots__ = ("_members", "is_universe")

    def __init__(
        self,
        members: Iterable[LanguageDefinition] = (),
        is_universe: bool = False,
    ) -> None:
        self._members = frozenset(members)
        self.is_universe = is_universe

    @classmethod
    def universe(cls, languages: Iterable[LanguageDefinition]) -> "CandidateSet":
        """Create the "all languages" set."""
        return cls(languages, is_universe=True)

    def narrow(self, other: "CandidateSet") -> "CandidateSet":
        """
        Intersect with another set without ever becoming empty.

        Args:
            other: Languages proposed by a strategy.

        Returns:
            The intersection, or this set unchanged when the
            intersection is empty or adds no information.
        """
        if other.is_universe:
            return self
        members = self._members & other._members
        if not members or (members == self._members and not self.is_universe):
            return self
        return CandidateSet(members)

    def single(self) -> LanguageDefinition | None:
        """Return the only member, or None if there are zero or several.

        The "all languages" set never decides, even when the knowledge
        base holds a single language.
        """
        if len(self._members) == 1 and not self.is_universe:
            return next(iter(self._members))
        return None

    def names(self) -> list[str]:
        """Member names in sorted order."""
        return [language.name for language in self]

    def __iter__(self) -> Iterator[LanguageDefinition]:
        return iter(sorted(self._members, key=lambda language: language.name))

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return bool(self._members)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(language.name == item for language in self._members)
        return item in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self._members == other._members and self.is_universe == other.is_universe

    def __hash__(self) -> int:
        return hash((self._members, self.is_universe))

    def __repr__(self) -> str:
        if self.is_universe:
            return f"CandidateSet(<all {len(self)} languages>)"
        return f"CandidateSet({self.names()})"
