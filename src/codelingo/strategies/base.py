"""Strategy protocol shared by the pipeline stages."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from codelingo.models.candidates import CandidateSet
from codelingo.models.file_info import FileInfo
from codelingo.models.results import StrategyName

if TYPE_CHECKING:
    from codelingo.knowledge.base import KnowledgeBase


@runtime_checkable
class Strategy(Protocol):
    """One stage of the identification cascade.

    A strategy receives the candidates left by the previous stages and
    returns a subset of them. It must never return an empty set: when
    it has no opinion, or its opinion contradicts the candidates, the
    input set is returned unchanged.
    """

    name: StrategyName

    def narrow(self, file: FileInfo, candidates: CandidateSet) -> CandidateSet:
        """Narrow the candidate set for a file."""
        ...


class KnowledgeBaseStrategy:
    """Base for strategies answering from knowledge base lookups."""

    name: StrategyName

    def __init__(self, knowledge_base: "KnowledgeBase") -> None:
        self.knowledge_base = knowledge_base

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
