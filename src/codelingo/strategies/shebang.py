"""Interpreter lookup from a leading "#!" line."""

from loguru import logger

from codelingo.models.candidates import CandidateSet
from codelingo.models.file_info import FileInfo
from codelingo.models.results import StrategyName
from codelingo.strategies.base import KnowledgeBaseStrategy
from codelingo.utils.shebang import interpreter_from_shebang, strip_version


class ShebangStrategy(KnowledgeBaseStrategy):
    """Match the shebang interpreter against declared interpreters.

    An interpreter with a version suffix that is not declared as such
    ("ruby2.7") is retried without the version.
    """

    name = StrategyName.SHEBANG

    def narrow(self, file: FileInfo, candidates: CandidateSet) -> CandidateSet:
        interpreter = interpreter_from_shebang(file.content)
        if interpreter is None:
            return candidates

        found = self.knowledge_base.by_interpreter(interpreter)
        if not found:
            unversioned = strip_version(interpreter)
            if unversioned is not None:
                found = self.knowledge_base.by_interpreter(unversioned)

        if not found:
            logger.debug("Unknown interpreter {} in {}", interpreter, file.path)
        return candidates.narrow(found)
