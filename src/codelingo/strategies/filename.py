"""Exact filename lookup (Makefile, Dockerfile, Gemfile, ...)."""

from codelingo.models.candidates import CandidateSet
from codelingo.models.file_info import FileInfo
from codelingo.models.results import StrategyName
from codelingo.strategies.base import KnowledgeBaseStrategy


class FilenameStrategy(KnowledgeBaseStrategy):
    """Match the basename against declared filenames."""

    name = StrategyName.FILENAME

    def narrow(self, file: FileInfo, candidates: CandidateSet) -> CandidateSet:
        return candidates.narrow(self.knowledge_base.by_filename(file.basename))
