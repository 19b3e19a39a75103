"""Path exclusion rule models."""

import re
from dataclasses import dataclass, field
from enum import StrEnum

import pathspec


class ExclusionKind(StrEnum):
    """Why a path is kept out of aggregate statistics."""

    VENDOR = "vendor"
    GENERATED = "generated"
    DOCUMENTATION = "documentation"
    BINARY = "binary"


class PatternSyntax(StrEnum):
    """How an exclusion pattern is written."""

    REGEX = "regex"
    GITIGNORE = "gitignore"


@dataclass(frozen=True)
class ExclusionRule:
    """One ordered path rule.

    Attributes:
        kind: Exclusion category reported when the rule matches.
        pattern: Pattern source as declared.
        syntax: Pattern syntax.
        excluded: Verdict returned when the rule matches.
    """

    kind: ExclusionKind
    pattern: str
    syntax: PatternSyntax = PatternSyntax.REGEX
    excluded: bool = True
    _matcher: re.Pattern[str] | pathspec.PathSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Compile eagerly so malformed patterns fail at construction.
        if self.syntax == PatternSyntax.REGEX:
            matcher: re.Pattern[str] | pathspec.PathSpec = re.compile(self.pattern)
        else:
            matcher = pathspec.PathSpec.from_lines("gitignore", [self.pattern])
        object.__setattr__(self, "_matcher", matcher)

    def matches(self, path: str) -> bool:
        """
        Check a POSIX style relative path against the rule.

        Args:
            path: Path with forward slashes.

        Returns:
            True if the pattern matches the path.
        """
        matcher = self._matcher
        if isinstance(matcher, re.Pattern):
            return matcher.search(path) is not None
        return matcher.match_file(path)
