"""Configuration management for codelingo."""

from codelingo.config.loader import load_config
from codelingo.config.models import (
    AnalysisConfig,
    ClassifierConfig,
    Config,
    DefinitionsConfig,
    ExtraRuleConfig,
    FilterConfig,
    LoggingConfig,
    SamplingConfig,
)

__all__ = [
    "AnalysisConfig",
    "ClassifierConfig",
    "Config",
    "DefinitionsConfig",
    "ExtraRuleConfig",
    "FilterConfig",
    "LoggingConfig",
    "SamplingConfig",
    "load_config",
]
