"""Statistics exclusion filter.

Decides which paths are kept out of aggregate language statistics:
vendored third-party code, generated files, documentation and
binary artifacts. Exclusion never affects identification itself.
"""

from collections.abc import Iterable
from pathlib import PurePath
from typing import ClassVar

from codelingo.config.models import ExtraRuleConfig, FilterConfig
from codelingo.models.exclusion import ExclusionKind, ExclusionRule, PatternSyntax
from codelingo.utils.paths import to_posix


class ExclusionFilter:
    """Ordered path rules with first-match-wins semantics.

    Rules are checked in this order:
    - Caller supplied extra rules (config)
    - Vendor, generated and documentation rules of the knowledge base
    - Binary artifact extensions

    Attributes:
        rules: All rules in evaluation order.
        exclude_kinds: Kinds whose matches count as excluded.
    """

    # Extensions of compiled, archived or media files
    BINARY_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(
        {
            ".pyc",
            ".pyo",  # Python bytecode
            ".so",
            ".dylib",
            ".dll",  # Shared libraries
            ".exe",
            ".bin",  # Executables
            ".o",
            ".a",
            ".obj",  # Object files
            ".class",  # Java bytecode
            ".jar",
            ".war",  # Java archives
            ".png",
            ".jpg",
            ".jpeg",
            ".gif",
            ".ico",  # Images
            ".pdf",  # Documents
            ".zip",
            ".tar",
            ".gz",
            ".bz2",
            ".xz",
            ".7z",  # Archives
            ".whl",
            ".egg",  # Python packages
            ".woff",
            ".woff2",
            ".ttf",  # Fonts
        }
    )

    def __init__(
        self,
        rules: Iterable[ExclusionRule] = (),
        config: FilterConfig | None = None,
    ) -> None:
        """Initialize filter.

        Args:
            rules: Built-in rules, usually ``KnowledgeBase.exclusion_rules``.
            config: Extra rules and the kinds that count as excluded.
        """
        config = config or FilterConfig()
        extra = [self._rule_from_config(entry) for entry in config.extra_rules]
        binary = [
            ExclusionRule(
                kind=ExclusionKind.BINARY,
                pattern="*" + extension,
                syntax=PatternSyntax.GITIGNORE,
            )
            for extension in sorted(self.BINARY_EXTENSIONS)
        ]
        self.rules: tuple[ExclusionRule, ...] = (*extra, *rules, *binary)
        self.exclude_kinds: frozenset[ExclusionKind] = frozenset(config.exclude_kinds)

    @staticmethod
    def _rule_from_config(entry: ExtraRuleConfig) -> ExclusionRule:
        return ExclusionRule(
            kind=entry.kind,
            pattern=entry.pattern,
            syntax=entry.syntax,
            excluded=entry.excluded,
        )

    def match(self, path: str | PurePath) -> ExclusionRule | None:
        """Return the first rule matching a path, or None."""
        posix = to_posix(path)
        for rule in self.rules:
            if rule.matches(posix):
                return rule
        return None

    def _first_configured(self, path: str | PurePath) -> ExclusionRule | None:
        posix = to_posix(path)
        for rule in self.rules:
            if rule.kind in self.exclude_kinds and rule.matches(posix):
                return rule
        return None

    def is_excluded(self, path: str | PurePath) -> bool:
        """Determine if a path is kept out of statistics.

        Only rules whose kind is in ``exclude_kinds`` take part, so an
        unconfigured kind never hides a later configured one.

        Args:
            path: Path relative to the analyzed root.

        Returns:
            Verdict of the first matching configured rule, False if
            none matches.
        """
        rule = self._first_configured(path)
        return rule is not None and rule.excluded

    def excluded_as(self, path: str | PurePath) -> ExclusionKind | None:
        """Kind of the rule excluding a path, or None if it is counted."""
        rule = self._first_configured(path)
        if rule is None or not rule.excluded:
            return None
        return rule.kind

    def _first_of_kind(self, path: str | PurePath, kind: ExclusionKind) -> bool:
        posix = to_posix(path)
        for rule in self.rules:
            if rule.kind == kind and rule.matches(posix):
                return rule.excluded
        return False

    def is_vendored(self, path: str | PurePath) -> bool:
        """Check vendor rules only."""
        return self._first_of_kind(path, ExclusionKind.VENDOR)

    def is_generated(self, path: str | PurePath) -> bool:
        """Check generated-file rules only."""
        return self._first_of_kind(path, ExclusionKind.GENERATED)

    def is_documentation(self, path: str | PurePath) -> bool:
        """Check documentation rules only."""
        return self._first_of_kind(path, ExclusionKind.DOCUMENTATION)
