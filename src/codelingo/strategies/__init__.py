"""Identification strategies and the pipeline running them."""

from codelingo.strategies.base import Strategy
from codelingo.strategies.extension import ExtensionStrategy
from codelingo.strategies.filename import FilenameStrategy
from codelingo.strategies.heuristics import HeuristicsStrategy
from codelingo.strategies.modeline import ModelineStrategy, find_modeline
from codelingo.strategies.pipeline import StrategyPipeline
from codelingo.strategies.shebang import ShebangStrategy

__all__ = [
    "ExtensionStrategy",
    "FilenameStrategy",
    "HeuristicsStrategy",
    "ModelineStrategy",
    "ShebangStrategy",
    "Strategy",
    "StrategyPipeline",
    "find_modeline",
]
