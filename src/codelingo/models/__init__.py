"""Domain models for codelingo."""

from codelingo.models.candidates import CandidateSet
from codelingo.models.exclusion import ExclusionKind, ExclusionRule, PatternSyntax
from codelingo.models.file_info import FileInfo
from codelingo.models.language import (
    HeuristicRule,
    LanguageDefinition,
    LanguageType,
    PatternClause,
)
from codelingo.models.payload import (
    ClauseEntry,
    DefinitionPayload,
    DisambiguationEntry,
    HeuristicsEntry,
    LanguageEntry,
    RuleEntry,
)
from codelingo.models.report import AggregateReport, FileReport, LanguageStats
from codelingo.models.results import IdentificationResult, NoMatchReason, StrategyName

__all__ = [
    "AggregateReport",
    "CandidateSet",
    "ClauseEntry",
    "DefinitionPayload",
    "DisambiguationEntry",
    "ExclusionKind",
    "ExclusionRule",
    "FileInfo",
    "FileReport",
    "HeuristicRule",
    "HeuristicsEntry",
    "IdentificationResult",
    "LanguageDefinition",
    "LanguageEntry",
    "LanguageStats",
    "LanguageType",
    "NoMatchReason",
    "PatternClause",
    "PatternSyntax",
    "RuleEntry",
    "StrategyName",
]
