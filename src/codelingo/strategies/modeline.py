"""Editor modeline detection.

Recognizes Emacs and Vim declarations in the first and last lines of
a file, e.g.::

    # -*- mode: ruby -*-
    /* -*- c++ -*- */
    # vim: set ft=python:
    // vim: ts=4 sw=4 filetype=cpp
"""

import re

from codelingo.models.candidates import CandidateSet
from codelingo.models.file_info import FileInfo
from codelingo.models.results import StrategyName
from codelingo.strategies.base import KnowledgeBaseStrategy

# Lines searched at each end of the content.
MODELINE_SEARCH_LINES = 5

EMACS_MODELINE = re.compile(
    r"-\*-\s*(?:(?:.*?[;\s])?mode\s*:\s*)?([^:;\s]+)(?=[\s;]|-\*-).*?-\*-",
    re.IGNORECASE,
)
VIM_MODELINE = re.compile(
    r"(?:^|\s)(?:vi|vim|ex)(?:[<=>]?\d+)?:\s*(?:set?\s+)?(?:[^:\n]*?\s)?"
    r"(?:ft|filetype|syntax)\s*=\s*([\w+-]+)",
    re.IGNORECASE | re.MULTILINE,
)


def find_modeline(lines: list[str]) -> str | None:
    """
    Find the mode declared by an editor modeline.

    Args:
        lines: Content lines.

    Returns:
        The declared mode name, or None.
    """
    count = MODELINE_SEARCH_LINES
    searched = lines if len(lines) <= 2 * count else [*lines[:count], *lines[-count:]]
    for line in searched:
        match = EMACS_MODELINE.search(line) or VIM_MODELINE.search(line)
        if match:
            return match.group(1)
    return None


class ModelineStrategy(KnowledgeBaseStrategy):
    """Match an editor modeline against language names and aliases.

    Applies to files without a known extension as well: a declared mode
    narrows the full language set.
    """

    name = StrategyName.MODELINE

    def narrow(self, file: FileInfo, candidates: CandidateSet) -> CandidateSet:
        mode = find_modeline(file.lines)
        if mode is None:
            return candidates
        return candidates.narrow(self.knowledge_base.by_modeline(mode))
