"""Definition file loading.

Reads Linguist-style YAML data files into a DefinitionPayload and
builds knowledge bases from them. The bundled data directory ships
a curated subset of upstream definitions plus training samples.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from codelingo.classifier.tokenizer import DEFAULT_MAX_TOKENS
from codelingo.errors import MalformedDefinitionError
from codelingo.knowledge.base import KnowledgeBase
from codelingo.knowledge.builder import build_knowledge_base
from codelingo.models.payload import DefinitionPayload

DEFAULT_DATA_DIR = Path(__file__).parent / "data"

# Payload key -> file name. Only languages.yml is required.
DEFINITION_FILES: dict[str, str] = {
    "languages": "languages.yml",
    "heuristics": "heuristics.yml",
    "vendor": "vendor.yml",
    "documentation": "documentation.yml",
    "generated": "generated.yml",
    "classifier": "classifier.yml",
    "samples": "samples.yml",
}


def _load_yaml_file(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MalformedDefinitionError(f"Invalid YAML: {e}", source=str(path)) from e


def load_payload(directory: Path) -> DefinitionPayload:
    """
    Read the definition files of a directory.

    Args:
        directory: Directory containing languages.yml and optional
            heuristics, vendor, documentation, generated, classifier
            and samples files.

    Returns:
        Parsed payload (not yet validated against each other).

    Raises:
        FileNotFoundError: If languages.yml is missing.
        MalformedDefinitionError: If a file is not valid YAML.
    """
    languages_path = directory / DEFINITION_FILES["languages"]
    if not languages_path.exists():
        raise FileNotFoundError(f"Language definitions not found: {languages_path}")

    data: dict[str, Any] = {}
    for key, filename in DEFINITION_FILES.items():
        path = directory / filename
        if not path.exists():
            continue
        content = _load_yaml_file(path)
        if content is not None:
            data[key] = content

    return DefinitionPayload.model_validate(data)


def load_knowledge_base(
    directory: Path | None = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> KnowledgeBase:
    """
    Build a knowledge base from a definitions directory.

    Args:
        directory: Definitions directory, or None for the bundled data.
        max_tokens: Token bound used when training from samples.

    Returns:
        Frozen KnowledgeBase.
    """
    if directory is None:
        return load_default_knowledge_base()
    try:
        payload = load_payload(directory)
    except ValueError as e:
        raise MalformedDefinitionError(str(e), source=str(directory)) from e
    return build_knowledge_base(payload, max_tokens=max_tokens)


@lru_cache(maxsize=1)
def load_default_knowledge_base() -> KnowledgeBase:
    """Knowledge base of the bundled definitions, built once per process."""
    return build_knowledge_base(load_payload(DEFAULT_DATA_DIR))
