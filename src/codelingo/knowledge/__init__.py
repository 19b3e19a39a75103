"""Language knowledge base."""

from codelingo.knowledge.base import KnowledgeBase
from codelingo.knowledge.builder import build_knowledge_base, compile_pattern, translate_pattern
from codelingo.knowledge.loader import (
    DEFAULT_DATA_DIR,
    load_default_knowledge_base,
    load_knowledge_base,
    load_payload,
)

__all__ = [
    "DEFAULT_DATA_DIR",
    "KnowledgeBase",
    "build_knowledge_base",
    "compile_pattern",
    "load_default_knowledge_base",
    "load_knowledge_base",
    "load_payload",
    "translate_pattern",
]
