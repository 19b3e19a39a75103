"""codelingo: programming language identification for source trees."""

from codelingo.errors import (
    CodelingoError,
    ConfigurationError,
    MalformedDefinitionError,
    UnreadableContentError,
)
from codelingo.linguist import Linguist
from codelingo.models.report import AggregateReport, LanguageStats
from codelingo.models.results import IdentificationResult, NoMatchReason, StrategyName

__version__ = "0.1.0"

__all__ = [
    "AggregateReport",
    "CodelingoError",
    "ConfigurationError",
    "IdentificationResult",
    "LanguageStats",
    "Linguist",
    "MalformedDefinitionError",
    "NoMatchReason",
    "StrategyName",
    "UnreadableContentError",
    "__version__",
]
