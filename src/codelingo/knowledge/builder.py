"""Build a KnowledgeBase from an already parsed definition payload."""

import re
from collections import Counter
from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from codelingo.classifier.model import ClassifierModel
from codelingo.classifier.tokenizer import DEFAULT_MAX_TOKENS, tokenize
from codelingo.errors import MalformedDefinitionError
from codelingo.knowledge.base import KnowledgeBase
from codelingo.models.exclusion import ExclusionKind, ExclusionRule
from codelingo.models.language import (
    HeuristicRule,
    LanguageDefinition,
    LanguageType,
    PatternClause,
)
from codelingo.models.payload import (
    ClauseEntry,
    DefinitionPayload,
    HeuristicsEntry,
    LanguageEntry,
    PatternValue,
)

# Upstream definition files are written for Ruby's regex engine.
_RUBY_SYNTAX: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(?<!\\)\\z"), r"\\Z"),
    (re.compile(r"(?<!\\)\\h"), "[0-9a-fA-F]"),
    (re.compile(r"\(\?<([A-Za-z_]\w*)>"), r"(?P<\1>"),
)
_LEADING_FLAGS = re.compile(r"^\(\?([imsx]+)\)")


def translate_pattern(pattern: str) -> str:
    """
    Rewrite Ruby-only regex syntax into Python syntax.

    ``\\z`` becomes ``\\Z``, ``\\h`` a hex digit class, ``(?<name>``
    a Python named group, and a leading ``(?i)`` is scoped to the
    pattern so that several patterns can be joined with ``|``.
    """
    for syntax, replacement in _RUBY_SYNTAX:
        pattern = syntax.sub(replacement, pattern)
    flags = _LEADING_FLAGS.match(pattern)
    if flags:
        pattern = f"(?{flags.group(1)}:{pattern[flags.end():]})"
    return pattern


def compile_pattern(value: PatternValue, source: str) -> re.Pattern[str]:
    """
    Compile one pattern or an alternation of patterns.

    Patterns are multiline: ``^`` and ``$`` anchor at line boundaries.

    Raises:
        MalformedDefinitionError: If the pattern does not compile.
    """
    parts = [value] if isinstance(value, str) else list(value)
    if not parts:
        raise MalformedDefinitionError("Empty pattern list", source=source)
    joined = "|".join(f"(?:{translate_pattern(part)})" for part in parts)
    try:
        return re.compile(joined, re.MULTILINE)
    except re.error as e:
        raise MalformedDefinitionError(f"Invalid pattern {joined!r}: {e}", source=source) from e


def _build_language(name: str, entry: LanguageEntry) -> LanguageDefinition:
    try:
        language_type = LanguageType(entry.type.lower())
    except ValueError as e:
        raise MalformedDefinitionError(
            f"Unknown type {entry.type!r} for language {name}", source="languages"
        ) from e

    for extension in entry.extensions:
        if not extension.startswith(".") or len(extension) < 2:
            raise MalformedDefinitionError(
                f"Extension {extension!r} of {name} must start with '.'", source="languages"
            )

    aliases = {alias.lower() for alias in [*entry.aliases, *entry.modelines]}
    aliases.add(name.lower())
    aliases.add(name.lower().replace(" ", "-"))

    return LanguageDefinition(
        name=name,
        type=language_type,
        extensions=frozenset(extension.lower() for extension in entry.extensions),
        filenames=frozenset(entry.filenames),
        interpreters=frozenset(entry.interpreters),
        modeline_aliases=frozenset(aliases),
        aliases=tuple(entry.aliases),
        color=entry.color,
        group=entry.group,
    )


def _build_clauses(
    entry: ClauseEntry,
    named_patterns: Mapping[str, re.Pattern[str]],
    source: str,
) -> list[PatternClause]:
    clauses: list[PatternClause] = []
    if entry.pattern is not None:
        clauses.append(PatternClause(compile_pattern(entry.pattern, source)))
    if entry.negative_pattern is not None:
        clauses.append(PatternClause(compile_pattern(entry.negative_pattern, source), negated=True))
    if entry.named_pattern is not None:
        if entry.named_pattern not in named_patterns:
            raise MalformedDefinitionError(
                f"Undefined named pattern: {entry.named_pattern}", source=source
            )
        clauses.append(PatternClause(named_patterns[entry.named_pattern]))
    return clauses


def _build_heuristics(
    heuristics: HeuristicsEntry,
    declared: Mapping[str, str],
) -> dict[str, list[HeuristicRule]]:
    named_patterns = {
        name: compile_pattern(value, f"named_patterns.{name}")
        for name, value in heuristics.named_patterns.items()
    }

    by_extension: dict[str, list[HeuristicRule]] = {}
    for block in heuristics.disambiguations:
        extensions = tuple(extension.lower() for extension in block.extensions)
        source = f"heuristics[{', '.join(extensions)}]"

        rules: list[HeuristicRule] = []
        for order, entry in enumerate(block.rules):
            names = [entry.language] if isinstance(entry.language, str) else entry.language
            languages: list[str] = []
            for name in names:
                if name.lower() not in declared:
                    raise MalformedDefinitionError(
                        f"Heuristic rule references undeclared language: {name}", source=source
                    )
                languages.append(declared[name.lower()])

            clauses = _build_clauses(entry, named_patterns, source)
            for sub_entry in entry.and_clauses:
                clauses.extend(_build_clauses(sub_entry, named_patterns, source))

            rules.append(
                HeuristicRule(
                    order=order,
                    extensions=extensions,
                    languages=tuple(languages),
                    clauses=tuple(clauses),
                )
            )

        for extension in extensions:
            if extension in by_extension:
                raise MalformedDefinitionError(
                    f"Extension {extension} appears in more than one disambiguation", source=source
                )
            by_extension[extension] = rules

    return by_extension


def _build_exclusion_rules(payload: DefinitionPayload) -> list[ExclusionRule]:
    rules: list[ExclusionRule] = []
    groups = (
        (ExclusionKind.VENDOR, payload.vendor),
        (ExclusionKind.GENERATED, payload.generated),
        (ExclusionKind.DOCUMENTATION, payload.documentation),
    )
    for kind, patterns in groups:
        for pattern in patterns:
            try:
                rules.append(ExclusionRule(kind=kind, pattern=translate_pattern(pattern)))
            except re.error as e:
                raise MalformedDefinitionError(
                    f"Invalid {kind} pattern {pattern!r}: {e}", source=str(kind)
                ) from e
    return rules


def _build_models(
    payload: DefinitionPayload,
    declared: Mapping[str, str],
    max_tokens: int,
) -> dict[str, ClassifierModel]:
    counters: dict[str, Counter[str]] = {}

    for name, table in payload.classifier.items():
        if name.lower() not in declared:
            raise MalformedDefinitionError(
                f"Classifier table for undeclared language: {name}", source="classifier"
            )
        if any(count < 0 for count in table.values()):
            raise MalformedDefinitionError(
                f"Negative token count in classifier table for {name}", source="classifier"
            )
        counters.setdefault(declared[name.lower()], Counter()).update(table)

    for name, samples in payload.samples.items():
        if name.lower() not in declared:
            raise MalformedDefinitionError(
                f"Training samples for undeclared language: {name}", source="samples"
            )
        counter = counters.setdefault(declared[name.lower()], Counter())
        for sample in samples:
            counter.update(tokenize(sample, max_tokens))

    return {
        name: ClassifierModel.from_counts(name, counter)
        for name, counter in counters.items()
        if counter
    }


def build_knowledge_base(
    payload: DefinitionPayload | Mapping[str, Any],
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> KnowledgeBase:
    """
    Validate a parsed payload and build the knowledge base.

    Args:
        payload: DefinitionPayload, or a plain mapping of the same shape.
        max_tokens: Token bound used when training from samples.

    Returns:
        Frozen KnowledgeBase.

    Raises:
        MalformedDefinitionError: If anything in the payload is invalid.
    """
    if not isinstance(payload, DefinitionPayload):
        try:
            payload = DefinitionPayload.model_validate(payload)
        except ValidationError as e:
            raise MalformedDefinitionError(f"Invalid definition payload: {e}") from e

    languages = [_build_language(name, entry) for name, entry in payload.languages.items()]
    declared = {language.name.lower(): language.name for language in languages}

    knowledge_base = KnowledgeBase(
        languages=languages,
        heuristics=_build_heuristics(payload.heuristics, declared),
        exclusion_rules=_build_exclusion_rules(payload),
        classifier_models=_build_models(payload, declared, max_tokens),
    )
    logger.debug(
        "Knowledge base built: {} languages, {} exclusion rules, vocabulary={}",
        len(knowledge_base),
        len(knowledge_base.exclusion_rules),
        knowledge_base.vocabulary_size,
    )
    return knowledge_base
