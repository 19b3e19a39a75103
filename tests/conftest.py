"""Shared fixtures for codelingo tests."""

from typing import Any

import pytest

from codelingo.knowledge.base import KnowledgeBase
from codelingo.knowledge.builder import build_knowledge_base
from codelingo.knowledge.loader import load_default_knowledge_base
from codelingo.linguist import Linguist


@pytest.fixture
def payload() -> dict[str, Any]:
    """Small definition payload covering every lookup kind."""
    return {
        "languages": {
            "C": {"type": "programming", "extensions": [".c", ".h"]},
            "C++": {
                "type": "programming",
                "aliases": ["cpp"],
                "extensions": [".cpp", ".h"],
            },
            "Objective-C": {
                "type": "programming",
                "aliases": ["objc"],
                "extensions": [".m", ".h"],
            },
            "Python": {
                "type": "programming",
                "extensions": [".py"],
                "interpreters": ["python", "python3"],
            },
            "Ruby": {
                "type": "programming",
                "extensions": [".rb"],
                "filenames": ["Rakefile"],
                "interpreters": ["ruby"],
            },
            "Dockerfile": {
                "type": "programming",
                "extensions": [".dockerfile"],
                "filenames": ["Dockerfile"],
            },
            "Markdown": {"type": "prose", "extensions": [".md"]},
        },
        "heuristics": {
            "disambiguations": [
                {
                    "extensions": [".h"],
                    "rules": [
                        {"language": "Objective-C", "named_pattern": "objectivec"},
                        {"language": "C++", "pattern": r"^\s*#\s*include <iostream>"},
                    ],
                }
            ],
            "named_patterns": {"objectivec": r"^\s*@(interface|implementation)\b"},
        },
        "vendor": [r"(^|/)vendor/", r"(^|/)node_modules/"],
        "documentation": [r"^docs/"],
        "generated": [r"\.min\.js$"],
        "samples": {
            "C": ["int main(void) { printf(\"hi\"); return 0; }"],
            "C++": ["std::cout << value << std::endl; template <typename T> class Box {};"],
        },
    }


@pytest.fixture
def knowledge_base(payload: dict[str, Any]) -> KnowledgeBase:
    """Knowledge base built from the small payload."""
    return build_knowledge_base(payload)


@pytest.fixture(scope="session")
def bundled_knowledge_base() -> KnowledgeBase:
    """Knowledge base of the bundled definition files."""
    return load_default_knowledge_base()


@pytest.fixture
def linguist(bundled_knowledge_base: KnowledgeBase) -> Linguist:
    """Linguist over the bundled definitions with default configuration."""
    return Linguist(bundled_knowledge_base)
