"""Content heuristics for extensions shared by several languages."""

from loguru import logger

from codelingo.models.candidates import CandidateSet
from codelingo.models.file_info import FileInfo
from codelingo.models.results import StrategyName
from codelingo.strategies.base import KnowledgeBaseStrategy


class HeuristicsStrategy(KnowledgeBaseStrategy):
    """Evaluate the ordered disambiguation rules of a file's extension.

    The rules of the longest suffix that has any are tried in
    declaration order. The first rule whose clauses all hold decides;
    later rules are never evaluated, so the outcome does not depend on
    how many rules would have matched.
    """

    name = StrategyName.HEURISTICS

    def narrow(self, file: FileInfo, candidates: CandidateSet) -> CandidateSet:
        if len(candidates) <= 1:
            return candidates

        for extension in file.extensions:
            rules = self.knowledge_base.heuristics_for(extension)
            if not rules:
                continue
            for rule in rules:
                if rule.matches(file.content):
                    logger.debug(
                        "Heuristic rule {} for {} matched {}: {}",
                        rule.order,
                        extension,
                        file.path,
                        ", ".join(rule.languages),
                    )
                    confirmed = CandidateSet(
                        language for language in candidates if language.name in rule.languages
                    )
                    return candidates.narrow(confirmed)
            return candidates

        return candidates
