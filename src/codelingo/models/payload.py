"""Pydantic models of the already parsed definition payload.

The shape follows the upstream Linguist data files (languages,
heuristics, vendor, documentation) so that their parsed contents
can be handed over unchanged. Unknown keys are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

PatternValue = str | list[str]


class LanguageEntry(BaseModel):
    """One language as declared in the languages mapping."""

    model_config = ConfigDict(extra="ignore")

    type: str
    extensions: list[str] = Field(default_factory=list)
    filenames: list[str] = Field(default_factory=list)
    interpreters: list[str] = Field(default_factory=list)
    aliases: list[str] = Field(default_factory=list)
    modelines: list[str] = Field(default_factory=list)
    color: str | None = None
    group: str | None = None


class ClauseEntry(BaseModel):
    """Pattern part of a heuristic rule (also used for ``and`` items)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    pattern: PatternValue | None = None
    negative_pattern: PatternValue | None = None
    named_pattern: str | None = None


class RuleEntry(ClauseEntry):
    """A heuristic rule: languages plus an optional conjunction of clauses."""

    language: str | list[str]
    and_clauses: list[ClauseEntry] = Field(default_factory=list, alias="and")


class DisambiguationEntry(BaseModel):
    """Ordered rules shared by a group of extensions."""

    model_config = ConfigDict(extra="ignore")

    extensions: list[str]
    rules: list[RuleEntry]


class HeuristicsEntry(BaseModel):
    """The heuristics document."""

    model_config = ConfigDict(extra="ignore")

    disambiguations: list[DisambiguationEntry] = Field(default_factory=list)
    named_patterns: dict[str, PatternValue] = Field(default_factory=dict)


class DefinitionPayload(BaseModel):
    """Everything needed to build a knowledge base.

    Attributes:
        languages: Language name to definition.
        heuristics: Disambiguation rules keyed by extension groups.
        vendor: Regexes of vendored paths.
        documentation: Regexes of documentation paths.
        generated: Regexes of generated paths.
        classifier: Precomputed token tables (language -> token -> count).
        samples: Training snippets (language -> texts), tokenized at build time.
    """

    model_config = ConfigDict(extra="ignore")

    languages: dict[str, LanguageEntry] = Field(default_factory=dict)
    heuristics: HeuristicsEntry = Field(default_factory=HeuristicsEntry)
    vendor: list[str] = Field(default_factory=list)
    documentation: list[str] = Field(default_factory=list)
    generated: list[str] = Field(default_factory=list)
    classifier: dict[str, dict[str, int]] = Field(default_factory=dict)
    samples: dict[str, list[str]] = Field(default_factory=dict)
