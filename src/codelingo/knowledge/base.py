"""Immutable, indexed view over language definitions.

The knowledge base is built once (build -> freeze -> serve). All
indices are read-only mappings of frozensets, so any number of
threads may query it without synchronization. Rebuilding is the
only way to change it.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from types import MappingProxyType

from codelingo.classifier.model import ClassifierModel
from codelingo.errors import MalformedDefinitionError
from codelingo.models.candidates import CandidateSet
from codelingo.models.exclusion import ExclusionRule
from codelingo.models.language import HeuristicRule, LanguageDefinition, LanguageType

_EMPTY: frozenset[LanguageDefinition] = frozenset()


def _freeze(index: dict[str, set[LanguageDefinition]]) -> Mapping[str, frozenset[LanguageDefinition]]:
    return MappingProxyType({key: frozenset(values) for key, values in index.items()})


class KnowledgeBase:
    """Lookup operations over a fixed set of languages.

    Extension, filename, interpreter and modeline indices are
    many-to-many: one key may map to several languages, and the
    pipeline resolves the ambiguity later.
    """

    def __init__(
        self,
        languages: Iterable[LanguageDefinition],
        heuristics: Mapping[str, Sequence[HeuristicRule]] | None = None,
        exclusion_rules: Sequence[ExclusionRule] = (),
        classifier_models: Mapping[str, ClassifierModel] | None = None,
    ) -> None:
        """
        Validate and index definitions.

        Args:
            languages: Language definitions (names must be unique).
            heuristics: Ordered rules per lowercase extension.
            exclusion_rules: Ordered vendor/generated/documentation rules.
            classifier_models: Token tables keyed by language name.

        Raises:
            MalformedDefinitionError: On duplicate names, or rules and
                models that reference undeclared languages.
        """
        heuristics = heuristics or {}
        classifier_models = classifier_models or {}

        by_name: dict[str, LanguageDefinition] = {}
        for language in languages:
            key = language.name.lower()
            if key in by_name:
                raise MalformedDefinitionError(
                    f"Duplicate language name: {language.name}", source="languages"
                )
            by_name[key] = language

        for extension, rules in heuristics.items():
            for rule in rules:
                for name in rule.languages:
                    if name.lower() not in by_name:
                        raise MalformedDefinitionError(
                            f"Heuristic rule for {extension} references undeclared language: {name}",
                            source="heuristics",
                        )

        for name in classifier_models:
            if name.lower() not in by_name:
                raise MalformedDefinitionError(
                    f"Classifier model for undeclared language: {name}", source="classifier"
                )
        models = {name.lower(): model for name, model in classifier_models.items()}

        # Attach the rules naming each language and its model.
        rules_by_language: dict[str, list[HeuristicRule]] = {key: [] for key in by_name}
        seen: set[int] = set()
        for rules in heuristics.values():
            for rule in rules:
                if id(rule) in seen:
                    continue
                seen.add(id(rule))
                for name in rule.languages:
                    rules_by_language[name.lower()].append(rule)
        for key, language in by_name.items():
            by_name[key] = replace(
                language,
                heuristics=tuple(rules_by_language[key]),
                classifier=models.get(key),
            )

        by_extension: dict[str, set[LanguageDefinition]] = {}
        by_filename: dict[str, set[LanguageDefinition]] = {}
        by_interpreter: dict[str, set[LanguageDefinition]] = {}
        by_modeline: dict[str, set[LanguageDefinition]] = {}
        for language in by_name.values():
            for extension in language.extensions:
                by_extension.setdefault(extension.lower(), set()).add(language)
            for filename in language.filenames:
                by_filename.setdefault(filename, set()).add(language)
            for interpreter in language.interpreters:
                by_interpreter.setdefault(interpreter, set()).add(language)
            for alias in language.modeline_aliases:
                by_modeline.setdefault(alias.lower(), set()).add(language)

        vocabulary: set[str] = set()
        for model in models.values():
            vocabulary.update(model.counts)

        self._by_name = MappingProxyType(by_name)
        self._by_extension = _freeze(by_extension)
        self._by_filename = _freeze(by_filename)
        self._by_interpreter = _freeze(by_interpreter)
        self._by_modeline = _freeze(by_modeline)
        self._heuristics: Mapping[str, tuple[HeuristicRule, ...]] = MappingProxyType(
            {extension.lower(): tuple(rules) for extension, rules in heuristics.items()}
        )
        self._models: Mapping[str, ClassifierModel] = MappingProxyType(models)
        self._languages = tuple(sorted(by_name.values(), key=lambda language: language.name))
        self._universe = CandidateSet.universe(self._languages)
        self.exclusion_rules: tuple[ExclusionRule, ...] = tuple(exclusion_rules)
        self.vocabulary_size = len(vocabulary)

    @property
    def languages(self) -> tuple[LanguageDefinition, ...]:
        """All languages, sorted by name."""
        return self._languages

    def all(self) -> CandidateSet:
        """The "all languages" candidate set."""
        return self._universe

    def language(self, name: str) -> LanguageDefinition | None:
        """Find a language by name (case-insensitive)."""
        return self._by_name.get(name.lower())

    def by_extension(self, extension: str) -> CandidateSet:
        """Languages declaring an extension such as ".h" (case-insensitive)."""
        return CandidateSet(self._by_extension.get(extension.lower(), _EMPTY))

    def by_filename(self, basename: str) -> CandidateSet:
        """Languages declaring an exact filename such as "Makefile"."""
        return CandidateSet(self._by_filename.get(basename, _EMPTY))

    def by_interpreter(self, interpreter: str) -> CandidateSet:
        """Languages run by an interpreter such as "python3"."""
        return CandidateSet(self._by_interpreter.get(interpreter, _EMPTY))

    def by_modeline(self, alias: str) -> CandidateSet:
        """Languages matching an editor mode name (case-insensitive)."""
        return CandidateSet(self._by_modeline.get(alias.lower(), _EMPTY))

    def by_type(self, language_type: LanguageType) -> CandidateSet:
        """Languages of one broad category."""
        return CandidateSet(
            language for language in self._languages if language.type == language_type
        )

    def heuristics_for(self, extension: str) -> tuple[HeuristicRule, ...]:
        """Ordered disambiguation rules for an extension (empty if none)."""
        return self._heuristics.get(extension.lower(), ())

    def classifier_model(self, language: str) -> ClassifierModel | None:
        """Token table of a language, or None without training data."""
        return self._models.get(language.lower())

    @property
    def has_classifier_data(self) -> bool:
        """True if at least one language has a token table."""
        return bool(self._models)

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_name
