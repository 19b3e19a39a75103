"""Extension lookup."""

from codelingo.models.candidates import CandidateSet
from codelingo.models.file_info import FileInfo
from codelingo.models.results import StrategyName
from codelingo.strategies.base import KnowledgeBaseStrategy


class ExtensionStrategy(KnowledgeBaseStrategy):
    """Match the longest known dotted suffix.

    "types.d.ts" is looked up as ".d.ts" first, then ".ts". Files
    without a known extension keep their candidates.
    """

    name = StrategyName.EXTENSION

    def narrow(self, file: FileInfo, candidates: CandidateSet) -> CandidateSet:
        for extension in file.extensions:
            found = self.knowledge_base.by_extension(extension)
            if found:
                return candidates.narrow(found)
        return candidates
