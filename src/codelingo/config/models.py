"""Pydantic configuration models for codelingo."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from codelingo.models.exclusion import ExclusionKind, PatternSyntax


class DefinitionsConfig(BaseModel):
    """Where language definitions are loaded from."""

    directory: Path | None = None

    @field_validator("directory", mode="before")
    @classmethod
    def expand_path(cls, v: Path | str | None) -> Path | None:
        """Expand user path and resolve to absolute."""
        if v is None:
            return None
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser().resolve()


class SamplingConfig(BaseModel):
    """Content sampling shared by heuristics and the classifier."""

    max_bytes: int = Field(default=50 * 1024, ge=1024, le=10 * 1024 * 1024)


class ClassifierConfig(BaseModel):
    """Statistical classifier configuration."""

    enabled: bool = True
    smoothing: float = Field(default=1.0, gt=0.0, le=10.0)
    max_tokens: int = Field(default=100_000, ge=100, le=1_000_000)


class ExtraRuleConfig(BaseModel):
    """A caller supplied exclusion rule, checked before the built-in rules."""

    pattern: str = Field(min_length=1)
    kind: ExclusionKind = ExclusionKind.VENDOR
    syntax: PatternSyntax = PatternSyntax.GITIGNORE
    excluded: bool = True


class FilterConfig(BaseModel):
    """Statistics exclusion configuration."""

    extra_rules: list[ExtraRuleConfig] = Field(default_factory=list)
    exclude_kinds: set[ExclusionKind] = Field(default_factory=lambda: set(ExclusionKind))
    respect_gitignore: bool = True


class AnalysisConfig(BaseModel):
    """Tree analysis behavior."""

    max_workers: int = Field(default=4, ge=1, le=64)
    identify_excluded: bool = False
    include_files: bool = False
    fail_on_unreadable: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for codelingo."""

    definitions: DefinitionsConfig = Field(default_factory=DefinitionsConfig)
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "CODELINGO_",
        "env_nested_delimiter": "__",
    }
